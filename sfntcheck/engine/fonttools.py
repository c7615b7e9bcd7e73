"""
Reference engine built on fontTools.

Adapts fontTools.ttLib to the Engine contract so the harness can be run
against a real parser out of the box. Kerning is read from the legacy 'kern'
table when present, else from GPOS pair adjustments, and scaled the way a
rasterizer would: font units * ppem / unitsPerEm in 26.6 fixed point.
"""

from dataclasses import dataclass, field
from functools import cached_property
from io import BytesIO

from fontTools.misc.roundTools import otRound
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.roundingPen import RoundingPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from sfntcheck.core.errors import (
    GlyphLoadError,
    GlyphLookupError,
    KerningLookupError,
    NameLookupError,
    ParseError,
)
from sfntcheck.core.types import Hinting
from sfntcheck.engine.base import DecodeBuffer, LoadGlyphOptions

# Like fontTools' default preferences, plus the Windows symbol subtable used
# by fonts such as Webdings, whose glyphs live in U+F000..U+F0FF.
CMAP_PREFERENCES = (
    (3, 10),
    (0, 6),
    (0, 4),
    (3, 1),
    (0, 3),
    (0, 2),
    (0, 1),
    (0, 0),
    (3, 0),
)

MAX_CODEPOINT = 0x10FFFF

# GPOS lookup types
PAIR_ADJUSTMENT = 2
EXTENSION = 9


@dataclass
class FontHandle:
    """
    Parsed font plus lazily built lookup tables.

    fontTools decodes tables on first access, so a malformed table surfaces
    here rather than in parse(). Each property converts such failures into
    the EngineError of the operation that needed the table.
    """

    font: TTFont
    glyph_order: list[str] = field(default_factory=list)

    @cached_property
    def cmap(self) -> dict[int, str] | None:
        try:
            if "cmap" not in self.font:
                return None
            return self.font["cmap"].getBestCmap(cmapPreferences=CMAP_PREFERENCES)
        except Exception as e:
            raise GlyphLookupError(f"Malformed 'cmap' table: {e}") from e

    @cached_property
    def glyph_set(self):
        return self.font.getGlyphSet()

    @cached_property
    def kern_pairs(self) -> dict[tuple[str, str], int]:
        """Horizontal pairs from format 0 subtables of the legacy 'kern' table."""
        pairs: dict[tuple[str, str], int] = {}
        try:
            if "kern" not in self.font:
                return pairs
            kern_tables = self.font["kern"].kernTables
        except Exception as e:
            raise KerningLookupError(f"Malformed 'kern' table: {e}") from e
        for subtable in kern_tables:
            if getattr(subtable, "format", None) != 0:
                continue
            # Bit 0 of the coverage field: horizontal data
            if not getattr(subtable, "coverage", 1) & 1:
                continue
            for pair, value in subtable.kernTable.items():
                pairs[pair] = pairs.get(pair, 0) + value
        return pairs

    @cached_property
    def gpos_pair_subtables(self) -> list:
        """PairPos subtables referenced by the GPOS 'kern' feature, in lookup order."""
        try:
            return self._gpos_pair_subtables()
        except Exception as e:
            raise KerningLookupError(f"Malformed 'GPOS' table: {e}") from e

    def _gpos_pair_subtables(self) -> list:
        if "GPOS" not in self.font:
            return []
        table = self.font["GPOS"].table
        if not table.FeatureList or not table.LookupList:
            return []
        indices = sorted(
            {
                index
                for record in table.FeatureList.FeatureRecord
                if record.FeatureTag == "kern"
                for index in record.Feature.LookupListIndex
            }
        )
        subtables = []
        for index in indices:
            lookup = table.LookupList.Lookup[index]
            for subtable in lookup.SubTable:
                if lookup.LookupType == EXTENSION:
                    subtable = subtable.ExtSubTable
                if getattr(subtable, "LookupType", PAIR_ADJUSTMENT) == PAIR_ADJUSTMENT:
                    subtables.append(subtable)
        return subtables


def _x_advance(value_record) -> int | None:
    if value_record is None:
        return None
    return getattr(value_record, "XAdvance", None)


def _gpos_pair_value(subtable, first: str, second: str) -> int | None:
    """XAdvance adjustment of the first glyph, or None if the subtable has no such pair."""
    coverage = subtable.Coverage.glyphs
    if first not in coverage:
        return None
    if subtable.Format == 1:
        pair_set = subtable.PairSet[coverage.index(first)]
        for record in pair_set.PairValueRecord:
            if record.SecondGlyph == second:
                return _x_advance(getattr(record, "Value1", None)) or 0
        return None
    if subtable.Format == 2:
        class1 = subtable.ClassDef1.classDefs.get(first, 0)
        class2 = subtable.ClassDef2.classDefs.get(second, 0)
        record = subtable.Class1Record[class1].Class2Record[class2]
        return _x_advance(getattr(record, "Value1", None)) or 0
    return None


def scale_units(units: int, ppem: int, units_per_em: int, hinting: Hinting) -> int:
    """
    Scale a font-unit value to 26.6 fixed point at ppem.

    Rounds half away from zero, then truncates toward zero. Full hinting
    rounds the result to a whole pixel.
    """
    x = units * ppem
    half = units_per_em // 2
    x = x + half if x >= 0 else x - half
    x = abs(x) // units_per_em * (1 if x >= 0 else -1)
    if hinting == Hinting.FULL:
        x = (x + 32) & ~63
    return x


def _round_to_pixel(value: float) -> int:
    """Snap a 26.6 coordinate to the nearest whole pixel."""
    return otRound(value / 64) * 64


class FontToolsEngine:
    """Engine implementation backed by fontTools.ttLib.TTFont."""

    def parse(self, data: bytes) -> FontHandle:
        try:
            font = TTFont(BytesIO(data))
            # Decode the tables every other operation depends on
            if font["head"].unitsPerEm <= 0:
                raise ValueError("unitsPerEm must be positive")
            if font["maxp"].numGlyphs <= 0:
                raise ValueError("font has no glyphs")
            glyph_order = font.getGlyphOrder()
        except Exception as e:
            raise ParseError(f"Failed to parse font: {e}") from e
        return FontHandle(font, glyph_order)

    def num_glyphs(self, font: FontHandle) -> int:
        return font.font["maxp"].numGlyphs

    def units_per_em(self, font: FontHandle) -> int:
        return font.font["head"].unitsPerEm

    def name(self, font: FontHandle, buf: DecodeBuffer, name_id: int) -> str:
        try:
            if "name" not in font.font:
                raise NameLookupError("Font has no 'name' table")
            table = font.font["name"]
            record = table.getName(name_id, 3, 1, 0x409) or table.getName(name_id, 1, 0, 0)
            value = record.toUnicode() if record is not None else table.getDebugName(name_id)
        except NameLookupError:
            raise
        except Exception as e:
            raise NameLookupError(f"Malformed 'name' table: {e}") from e
        if value is None:
            raise NameLookupError(f"Name id {name_id} not found")
        return value

    def load_glyph(
        self,
        font: FontHandle,
        buf: DecodeBuffer,
        glyph_index: int,
        ppem: int,
        options: LoadGlyphOptions | None = None,
    ) -> list:
        """
        Load a glyph outline scaled to ppem.

        Returns:
            RecordingPen value: a list of (operator, points) tuples in 26.6
            units. With full hinting every point is snapped to a whole pixel
            (a multiple of 64); no hinting instructions are executed.
        """
        if not 0 <= glyph_index < len(font.glyph_order):
            raise GlyphLoadError(f"Glyph index {glyph_index} out of range")
        options = options or LoadGlyphOptions()
        glyph_name = font.glyph_order[glyph_index]
        pen = buf.scratch.get("pen")
        if pen is None:
            pen = buf.scratch["pen"] = RecordingPen()
        pen.value.clear()

        out_pen = pen
        if options.hinting == Hinting.FULL:
            out_pen = RoundingPen(pen, roundFunc=_round_to_pixel)
        factor = ppem / self.units_per_em(font)
        try:
            font.glyph_set[glyph_name].draw(
                TransformPen(out_pen, (factor, 0, 0, factor, 0, 0))
            )
        except Exception as e:
            raise GlyphLoadError(f"Failed to draw glyph {glyph_name!r}: {e}") from e
        return list(pen.value)

    def glyph_index(self, font: FontHandle, buf: DecodeBuffer, codepoint: int) -> int:
        if not 0 <= codepoint <= MAX_CODEPOINT:
            raise GlyphLookupError(f"Invalid codepoint {codepoint:#x}")
        cmap = font.cmap
        if cmap is None:
            raise GlyphLookupError("Font has no supported cmap subtable")
        glyph_name = cmap.get(codepoint)
        if glyph_name is None:
            return 0
        try:
            return font.font.getGlyphID(glyph_name)
        except KeyError as e:
            raise GlyphLookupError(f"cmap refers to unknown glyph {glyph_name!r}") from e

    def kern(
        self,
        font: FontHandle,
        buf: DecodeBuffer,
        first: int,
        second: int,
        ppem: int,
        hinting: Hinting,
    ) -> int:
        count = len(font.glyph_order)
        for index in (first, second):
            if not 0 <= index < count:
                raise KerningLookupError(f"Glyph index {index} out of range")
        names = (font.glyph_order[first], font.glyph_order[second])

        try:
            units = self._kern_units(font, *names)
        except (AttributeError, IndexError, KeyError) as e:
            raise KerningLookupError(f"Malformed kerning data: {e}") from e
        return scale_units(units, ppem, self.units_per_em(font), hinting)

    def _kern_units(self, font: FontHandle, first: str, second: str) -> int:
        if "kern" in font.font:
            return font.kern_pairs.get((first, second), 0)
        for subtable in font.gpos_pair_subtables:
            value = _gpos_pair_value(subtable, first, second)
            if value is not None:
                return value
        return 0
