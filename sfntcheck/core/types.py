"""
Golden dataset model: font identifiers, kerning cases and expectations.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType


class Provider(str, Enum):
    """Publishers of the proprietary fonts under test."""

    ADOBE = "adobe"
    MICROSOFT = "microsoft"


class Hinting(IntEnum):
    """Hinting mode used when evaluating scaled metrics."""

    NONE = 0
    FULL = 1


@dataclass(frozen=True, order=True)
class QualifiedFontID:
    """Identifies one golden dataset and one physical font file."""

    provider: Provider
    filename: str

    def __str__(self) -> str:
        return f"{self.provider.value}/{self.filename}"

    @classmethod
    def parse(cls, text: str) -> "QualifiedFontID":
        """
        Parse a "provider/filename" string.

        Raises:
            ValueError: If the provider is unknown or the filename is empty
        """
        provider, sep, filename = text.partition("/")
        if not sep or not filename:
            raise ValueError(f"Expected 'provider/filename', got {text!r}")
        return cls(Provider(provider), filename)


@dataclass(frozen=True)
class KernCase:
    """One expected kerning adjustment between an ordered pair of codepoints."""

    ppem: int  # 26.6 fixed point
    hinting: Hinting
    codepoints: tuple[int, int]
    expected: int

    def describe(self) -> str:
        """Human readable pair description, e.g. Kern('A', 'V', ppem=2048, hinting=none)."""
        first, second = (format_codepoint(c) for c in self.codepoints)
        return f"Kern({first}, {second}, ppem={self.ppem}, hinting={self.hinting.name.lower()})"


@dataclass(frozen=True)
class GoldenEntry:
    """Known-correct facts about one proprietary font."""

    expected_version: str = ""
    min_glyph_count: int = 0
    first_unsupported_glyph: int | None = None
    glyph_index_samples: Mapping[int, int] = field(default_factory=dict)
    kerning_samples: tuple[KernCase, ...] = ()

    def __post_init__(self) -> None:
        if self.first_unsupported_glyph is not None and self.first_unsupported_glyph < 0:
            raise ValueError("first_unsupported_glyph must be non-negative or None")
        # Freeze the sample mapping so a registry entry can never be mutated
        object.__setattr__(
            self,
            "glyph_index_samples",
            MappingProxyType(dict(self.glyph_index_samples)),
        )
        object.__setattr__(self, "kerning_samples", tuple(self.kerning_samples))

    def coverage_bound(self, num_glyphs: int) -> int:
        """Exclusive upper glyph index for the coverage scan."""
        if self.first_unsupported_glyph is None:
            return num_glyphs
        return self.first_unsupported_glyph


EMPTY_ENTRY = GoldenEntry()


def format_codepoint(codepoint: int) -> str:
    """Format a codepoint the way golden tables are annotated: 'A' or U+F041."""
    char = chr(codepoint)
    if char.isprintable() and codepoint < 0xE000:
        return repr(char)
    return f"U+{codepoint:04X}"
