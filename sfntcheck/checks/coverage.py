"""
Coverage scan: load every glyph outline up to a bound.

Sampled checks only catch breakage in sampled glyphs; this scan catches
systemic outline decoding failures across the whole glyph set. Outlines are
loaded at ppem == unitsPerEm so that scaling and hinting play no part.
"""

from dataclasses import dataclass, field
from typing import Any

from sfntcheck.checks.findings import Finding, FindingKind
from sfntcheck.core.errors import GlyphLoadError
from sfntcheck.core.types import GoldenEntry, Hinting
from sfntcheck.engine.base import DecodeBuffer, Engine, LoadGlyphOptions
from sfntcheck.utils.logging import logger

# The scan stops once this many glyphs have failed to load
ERROR_BUDGET = 10


@dataclass
class CoverageResult:
    bound: int
    scanned: int = 0
    findings: list[Finding] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return any(f.kind == FindingKind.COVERAGE_BUDGET_EXCEEDED for f in self.findings)


def scan_coverage(
    engine: Engine,
    font: Any,
    buf: DecodeBuffer,
    entry: GoldenEntry,
    num_glyphs: int,
    budget: int = ERROR_BUDGET,
) -> CoverageResult:
    """
    Load glyphs [0, bound) where bound is the first unsupported glyph, if
    any, else num_glyphs.

    Args:
        engine: Engine under test
        font: Handle returned by engine.parse
        buf: Scratch buffer for this font
        entry: Golden entry for this font
        num_glyphs: Glyph count reported by the engine
        budget: Number of failures after which the scan is abandoned

    Returns:
        CoverageResult with one finding per failed glyph, plus a fatal
        COVERAGE_BUDGET_EXCEEDED finding if the budget ran out
    """
    ppem = engine.units_per_em(font)
    options = LoadGlyphOptions(hinting=Hinting.NONE)
    result = CoverageResult(bound=entry.coverage_bound(num_glyphs))
    num_errors = 0

    for glyph_index in range(result.bound):
        result.scanned += 1
        try:
            engine.load_glyph(font, buf, glyph_index, ppem, options)
        except GlyphLoadError as e:
            num_errors += 1
            logger.debug(f"LoadGlyph({glyph_index}) failed: {e}")
            result.findings.append(
                Finding(FindingKind.GLYPH_LOAD_FAILURE, str(e), subject=f"LoadGlyph({glyph_index})")
            )
        if num_errors == budget:
            result.findings.append(
                Finding(
                    FindingKind.COVERAGE_BUDGET_EXCEEDED,
                    f"too many errors ({num_errors}), scan stopped at glyph {glyph_index}",
                    subject="LoadGlyph",
                )
            )
            break

    logger.debug(f"Scanned {result.scanned}/{result.bound} glyphs, {num_errors} errors")
    return result
