"""
Operation contract between the harness and a font engine.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from sfntcheck.core.types import Hinting

# OpenType name table id of the version string
NAME_ID_VERSION = 5


@dataclass
class DecodeBuffer:
    """
    Reusable scratch state for one font's verification sequence.

    A buffer is created per font and must never be shared between fonts
    processed concurrently. Engines may stash anything they like in `scratch`.
    """

    scratch: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LoadGlyphOptions:
    """Options for Engine.load_glyph. FULL hinting snaps points to whole pixels."""

    hinting: Hinting = Hinting.NONE


class Engine(Protocol):
    """
    Capabilities the harness needs from a font engine.

    Handles returned by parse() are opaque to the harness. Failures are
    reported by raising the matching sfntcheck.core.errors.EngineError
    subclass.
    """

    def parse(self, data: bytes) -> Any:
        """Parse raw font bytes, raising ParseError on failure."""
        ...

    def num_glyphs(self, font: Any) -> int: ...

    def units_per_em(self, font: Any) -> int: ...

    def name(self, font: Any, buf: DecodeBuffer, name_id: int) -> str:
        """Read a name table string, raising NameLookupError on failure."""
        ...

    def load_glyph(
        self,
        font: Any,
        buf: DecodeBuffer,
        glyph_index: int,
        ppem: int,
        options: LoadGlyphOptions | None = None,
    ) -> Any:
        """Load a glyph outline at ppem (26.6), raising GlyphLoadError on failure."""
        ...

    def glyph_index(self, font: Any, buf: DecodeBuffer, codepoint: int) -> int:
        """Map a codepoint to a glyph index; 0 means no glyph."""
        ...

    def kern(
        self,
        font: Any,
        buf: DecodeBuffer,
        first: int,
        second: int,
        ppem: int,
        hinting: Hinting,
    ) -> int:
        """Kerning between two glyph indexes in 26.6 fixed point."""
        ...
