"""
Kerning spot checks.

Kerning is directional: (A, V) and (V, A) are independent cases, each with
its own expected value.
"""

from typing import Any

from sfntcheck.checks.findings import Finding, FindingKind
from sfntcheck.core.errors import GlyphLookupError, KerningLookupError
from sfntcheck.core.types import GoldenEntry, KernCase, format_codepoint
from sfntcheck.engine.base import DecodeBuffer, Engine


def _resolve(engine: Engine, font: Any, buf: DecodeBuffer, codepoint: int) -> int:
    """
    Resolve a codepoint for kerning.

    Index 0 (.notdef) with no error is treated as a failure: fonts signal an
    absent glyph that way, and kerning against .notdef is meaningless.
    """
    index = engine.glyph_index(font, buf, codepoint)
    if index == 0:
        raise GlyphLookupError("no glyph index found")
    return index


def verify_kern_case(
    engine: Engine, font: Any, buf: DecodeBuffer, case: KernCase
) -> Finding | None:
    """Check one kerning case, returning early on the first lookup failure."""
    indexes = []
    for codepoint in case.codepoints:
        try:
            indexes.append(_resolve(engine, font, buf, codepoint))
        except GlyphLookupError as e:
            return Finding(
                FindingKind.KERNING_LOOKUP_FAILURE,
                f"GlyphIndex({format_codepoint(codepoint)}): {e}",
                subject=case.describe(),
            )

    try:
        got = engine.kern(font, buf, indexes[0], indexes[1], case.ppem, case.hinting)
    except KerningLookupError as e:
        return Finding(FindingKind.KERNING_LOOKUP_FAILURE, str(e), subject=case.describe())

    if got != case.expected:
        return Finding(
            FindingKind.KERNING_MISMATCH,
            f"got {got}, want {case.expected}",
            subject=case.describe(),
            got=got,
            want=case.expected,
        )
    return None


def verify_kerning(
    engine: Engine, font: Any, buf: DecodeBuffer, entry: GoldenEntry
) -> list[Finding]:
    """Check every golden kerning case in order."""
    findings = []
    for case in entry.kerning_samples:
        finding = verify_kern_case(engine, font, buf, case)
        if finding is not None:
            findings.append(finding)
    return findings
