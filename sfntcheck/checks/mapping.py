"""
Codepoint to glyph index spot checks.
"""

from typing import Any

from sfntcheck.checks.findings import Finding, FindingKind
from sfntcheck.core.errors import GlyphLookupError
from sfntcheck.core.types import GoldenEntry, format_codepoint
from sfntcheck.engine.base import DecodeBuffer, Engine


def verify_mappings(
    engine: Engine, font: Any, buf: DecodeBuffer, entry: GoldenEntry, num_glyphs: int
) -> list[Finding]:
    """
    Check every golden (codepoint, glyph index) sample; collect all mismatches.

    Indexes outside [0, num_glyphs) are reported as mismatches, whether they
    come from the engine or from the golden data.
    """
    findings = []
    for codepoint, want in entry.glyph_index_samples.items():
        subject = f"GlyphIndex({format_codepoint(codepoint)})"
        if not 0 <= want < num_glyphs:
            findings.append(
                Finding(
                    FindingKind.MAPPING_MISMATCH,
                    f"want {want} is outside the font's glyph range [0, {num_glyphs})",
                    subject=subject,
                    want=want,
                )
            )
            continue
        try:
            got = engine.glyph_index(font, buf, codepoint)
        except GlyphLookupError as e:
            findings.append(Finding(FindingKind.MAPPING_LOOKUP_FAILURE, str(e), subject=subject))
            continue
        if not 0 <= got < num_glyphs:
            message = f"got {got}, outside the font's glyph range [0, {num_glyphs})"
        elif got != want:
            message = f"got {got}, want {want}"
        else:
            continue
        findings.append(
            Finding(FindingKind.MAPPING_MISMATCH, message, subject=subject, got=got, want=want)
        )
    return findings
