"""
Immutable registry of golden entries keyed by qualified font id.
"""

from collections.abc import Iterable, Iterator, Mapping
from functools import cache
from types import MappingProxyType

from sfntcheck.core.types import EMPTY_ENTRY, GoldenEntry, QualifiedFontID


class DatasetRegistry:
    """
    Read-only store of golden expectations.

    Built once at startup; lookups of unregistered fonts return an empty
    entry instead of raising, so an unconfigured font is simply not checked.
    """

    def __init__(self, entries: Iterable[tuple[QualifiedFontID, GoldenEntry]]):
        table: dict[QualifiedFontID, GoldenEntry] = {}
        for font_id, entry in entries:
            if font_id in table:
                raise ValueError(f"Duplicate golden entry for {font_id}")
            if entry.min_glyph_count <= 0:
                raise ValueError(
                    f"{font_id}: min_glyph_count must be positive, got {entry.min_glyph_count}"
                )
            table[font_id] = entry
        self._entries: Mapping[QualifiedFontID, GoldenEntry] = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, entries: Mapping[QualifiedFontID, GoldenEntry]) -> "DatasetRegistry":
        return cls(entries.items())

    @staticmethod
    @cache
    def default() -> "DatasetRegistry":
        """Registry built from the embedded golden tables."""
        from sfntcheck.config.golden import GOLDEN_ENTRIES

        return DatasetRegistry.from_mapping(GOLDEN_ENTRIES)

    def lookup(self, font_id: QualifiedFontID) -> GoldenEntry:
        return self._entries.get(font_id, EMPTY_ENTRY)

    def font_ids(self) -> list[QualifiedFontID]:
        """Registered ids in registration order."""
        return list(self._entries)

    def __contains__(self, font_id: object) -> bool:
        return font_id in self._entries

    def __iter__(self) -> Iterator[QualifiedFontID]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
