"""Shared pytest fixtures and options."""

from dataclasses import dataclass, field
from io import BytesIO

import pytest
from fontTools.feaLib.builder import addOpenTypeFeaturesFromString
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables._c_m_a_p import CmapSubtable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from sfntcheck.config.paths import DEFAULT_MICROSOFT_DIR
from sfntcheck.core.errors import (
    GlyphLoadError,
    GlyphLookupError,
    KerningLookupError,
    NameLookupError,
    ParseError,
)
from sfntcheck.engine.base import DecodeBuffer


def pytest_addoption(parser):
    group = parser.getgroup("sfntcheck")
    group.addoption(
        "--proprietary",
        action="store_true",
        default=False,
        help="test proprietary fonts not included in this repository",
    )
    group.addoption(
        "--adobe-dir",
        default=None,
        help="directory name for the Adobe proprietary fonts",
    )
    group.addoption(
        "--microsoft-dir",
        default=str(DEFAULT_MICROSOFT_DIR),
        help="directory name for the Microsoft proprietary fonts",
    )


# ============================================================================
# Fake engine
# ============================================================================


@dataclass
class FakeFont:
    """In-memory font description served by FakeEngine."""

    num_glyphs: int = 100
    units_per_em: int = 2048
    version: str | None = "Version 1.00"
    cmap: dict[int, int] = field(default_factory=dict)
    # (first, second, ppem, hinting) -> 26.6 value
    kerning: dict[tuple, int] = field(default_factory=dict)
    broken_glyphs: set[int] = field(default_factory=set)
    bad_codepoints: set[int] = field(default_factory=set)
    bad_kern_pairs: set[tuple[int, int]] = field(default_factory=set)


class FakeEngine:
    """Engine double recording every call it receives."""

    def __init__(self, fonts: dict[bytes, FakeFont] | None = None):
        self.fonts = fonts or {}
        self.calls: list[tuple] = []
        self.buffers: list[DecodeBuffer] = []
        self.load_options: list = []

    def _track(self, buf: DecodeBuffer) -> None:
        if not any(b is buf for b in self.buffers):
            self.buffers.append(buf)

    def parse(self, data: bytes) -> FakeFont:
        self.calls.append(("parse", data))
        if data not in self.fonts:
            raise ParseError("not a font")
        return self.fonts[data]

    def num_glyphs(self, font: FakeFont) -> int:
        return font.num_glyphs

    def units_per_em(self, font: FakeFont) -> int:
        return font.units_per_em

    def name(self, font: FakeFont, buf: DecodeBuffer, name_id: int) -> str:
        self._track(buf)
        self.calls.append(("name", name_id))
        if font.version is None:
            raise NameLookupError("no name table")
        return font.version

    def load_glyph(self, font, buf, glyph_index, ppem, options=None):
        self._track(buf)
        self.calls.append(("load_glyph", glyph_index, ppem))
        self.load_options.append(options)
        if glyph_index in font.broken_glyphs:
            raise GlyphLoadError(f"bad glyph {glyph_index}")
        return []

    def glyph_index(self, font, buf, codepoint):
        self._track(buf)
        self.calls.append(("glyph_index", codepoint))
        if codepoint in font.bad_codepoints:
            raise GlyphLookupError(f"bad codepoint {codepoint:#x}")
        return font.cmap.get(codepoint, 0)

    def kern(self, font, buf, first, second, ppem, hinting):
        self._track(buf)
        self.calls.append(("kern", first, second, ppem, hinting))
        if (first, second) in font.bad_kern_pairs:
            raise KerningLookupError("bad kern subtable")
        return font.kerning.get((first, second, ppem, hinting), 0)

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


@pytest.fixture
def temp_font_dir(tmp_path):
    """Create a temporary directory for font testing."""
    path = tmp_path / "fonts"
    path.mkdir()
    return path


# ============================================================================
# Real fonts built with fontTools
# ============================================================================

TEST_VERSION = "Version 2.82"
TEST_UPEM = 2048
TEST_GLYPHS = [".notdef", "A", "T", "V", "theta", "lamda"]
TEST_CMAP = {
    0x0041: "A",
    0x0054: "T",
    0x0056: "V",
    0x03B8: "theta",
    0x03BB: "lamda",
}
TEST_KERNING = {
    ("A", "V"): -264,
    ("V", "A"): -264,
    ("A", "T"): -227,
    ("T", "A"): -164,
    ("theta", "lamda"): -39,
}


# Specific pairs compile to a PairPos format 1 subtable, class pairs to format 2
TEST_GPOS_FEATURES = """
languagesystem DFLT dflt;
feature kern {
    pos A V -100;
    pos [T V] A -80;
} kern;
"""

# The same specific pair, wrapped in an Extension (type 9) lookup
TEST_GPOS_EXTENSION_FEATURES = """
languagesystem DFLT dflt;
lookup KERN_PAIRS useExtension {
    pos A V -100;
} KERN_PAIRS;
feature kern {
    lookup KERN_PAIRS;
} kern;
"""


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 1400))
    pen.lineTo((900, 1400))
    pen.lineTo((900, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(
    *, symbol: bool = False, with_kern: bool = True, features: str | None = None
) -> bytes:
    """
    Build a small TrueType font.

    Args:
        symbol: Map glyphs only through a Windows symbol (3, 0) cmap at
            U+F041.. instead of a Unicode cmap
        with_kern: Include a legacy 'kern' table with TEST_KERNING
        features: Feature file source compiled into GSUB/GPOS

    Returns:
        Serialized font bytes
    """
    fb = FontBuilder(TEST_UPEM, isTTF=True)
    fb.setupGlyphOrder(TEST_GLYPHS)
    fb.setupCharacterMap(TEST_CMAP)
    fb.setupGlyf({name: _box_glyph() for name in TEST_GLYPHS})
    fb.setupHorizontalMetrics({name: (1000, 100) for name in TEST_GLYPHS})
    fb.setupHorizontalHeader(ascent=1854, descent=-434)
    fb.setupNameTable({"familyName": "Test Sans", "styleName": "Regular"})
    fb.font["name"].setName(TEST_VERSION, 5, 3, 1, 0x409)
    fb.setupOS2(sTypoAscender=1854, sTypoDescender=-434)
    fb.setupPost()

    if symbol:
        subtable = CmapSubtable.newSubtable(4)
        subtable.platformID = 3
        subtable.platEncID = 0
        subtable.language = 0
        subtable.cmap = {0xF041: "A", 0xF054: "T", 0xF056: "V"}
        fb.font["cmap"].tables = [subtable]

    if with_kern:
        kern = newTable("kern")
        kern.version = 0
        subtable = KernTable_format_0()
        subtable.version = 0
        subtable.format = 0
        subtable.coverage = 1
        subtable.kernTable = dict(TEST_KERNING)
        kern.kernTables = [subtable]
        fb.font["kern"] = kern

    if features is not None:
        addOpenTypeFeaturesFromString(fb.font, features)

    buf = BytesIO()
    fb.font.save(buf)
    fb.font.close()
    return buf.getvalue()


def corrupt_cmap(data: bytes) -> bytes:
    """
    Point every cmap encoding record far past the end of the table.

    The table directory is left intact, so the font still opens and only
    decoding 'cmap' fails.
    """
    data = bytearray(data)
    num_tables = int.from_bytes(data[4:6], "big")
    for i in range(num_tables):
        record = 12 + 16 * i
        if data[record : record + 4] == b"cmap":
            offset = int.from_bytes(data[record + 8 : record + 12], "big")
            break
    else:
        raise ValueError("font has no 'cmap' table")

    num_subtables = int.from_bytes(data[offset + 2 : offset + 4], "big")
    for i in range(num_subtables):
        subtable_offset = offset + 4 + 8 * i + 4
        data[subtable_offset : subtable_offset + 4] = (0x7FFFFFF0).to_bytes(4, "big")
    return bytes(data)


@pytest.fixture(scope="session")
def test_font_bytes() -> bytes:
    return build_test_font()


@pytest.fixture(scope="session")
def symbol_font_bytes() -> bytes:
    return build_test_font(symbol=True, with_kern=False)


@pytest.fixture(scope="session")
def gpos_font_bytes() -> bytes:
    return build_test_font(with_kern=False, features=TEST_GPOS_FEATURES)
