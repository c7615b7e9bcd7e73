"""
Findings reported by the checks, and the policy deciding which are fatal.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from sfntcheck.core.types import QualifiedFontID


class Severity(IntEnum):
    """How a finding affects the result for its font."""

    ADVISORY = 0  # logged, never fails the font
    ERROR = 1  # fails the font, remaining checks continue
    FATAL = 2  # fails the font, remaining checks for it are skipped


class FindingKind(Enum):
    ASSET_UNAVAILABLE = "asset-unavailable"
    PARSE_FAILURE = "parse-failure"
    NAME_LOOKUP_FAILURE = "name-lookup-failure"
    ENGINE_FAILURE = "engine-failure"
    STRUCTURAL_VIOLATION = "structural-violation"
    VERSION_DRIFT = "version-drift"
    GLYPH_LOAD_FAILURE = "glyph-load-failure"
    COVERAGE_BUDGET_EXCEEDED = "coverage-budget-exceeded"
    MAPPING_LOOKUP_FAILURE = "mapping-lookup-failure"
    MAPPING_MISMATCH = "mapping-mismatch"
    KERNING_LOOKUP_FAILURE = "kerning-lookup-failure"
    KERNING_MISMATCH = "kerning-mismatch"

    @property
    def severity(self) -> Severity:
        return SEVERITIES[self]


SEVERITIES = {
    FindingKind.ASSET_UNAVAILABLE: Severity.FATAL,
    FindingKind.PARSE_FAILURE: Severity.FATAL,
    FindingKind.NAME_LOOKUP_FAILURE: Severity.ERROR,
    FindingKind.ENGINE_FAILURE: Severity.FATAL,
    FindingKind.STRUCTURAL_VIOLATION: Severity.FATAL,
    FindingKind.VERSION_DRIFT: Severity.ADVISORY,
    FindingKind.GLYPH_LOAD_FAILURE: Severity.ERROR,
    FindingKind.COVERAGE_BUDGET_EXCEEDED: Severity.FATAL,
    FindingKind.MAPPING_LOOKUP_FAILURE: Severity.ERROR,
    FindingKind.MAPPING_MISMATCH: Severity.ERROR,
    FindingKind.KERNING_LOOKUP_FAILURE: Severity.ERROR,
    FindingKind.KERNING_MISMATCH: Severity.ERROR,
}


@dataclass(frozen=True)
class Finding:
    """
    One discrepancy between the engine and the golden data.

    `got` and `want` are set for mismatches; `subject` names what was checked,
    e.g. "GlyphIndex('A')" or "LoadGlyph(17)".
    """

    kind: FindingKind
    message: str
    subject: str = ""
    got: object = None
    want: object = None

    @property
    def severity(self) -> Severity:
        return self.kind.severity

    @property
    def is_failure(self) -> bool:
        return self.severity >= Severity.ERROR

    def __str__(self) -> str:
        prefix = f"{self.subject}: " if self.subject else ""
        return f"{prefix}{self.message}"


@dataclass
class FontReport:
    """Everything found while checking one font."""

    font_id: QualifiedFontID
    findings: list[Finding] = field(default_factory=list)
    skipped: bool = False
    glyphs_scanned: int = 0

    def add(self, finding: Finding) -> None:
        self.findings.append(finding)

    def extend(self, findings: list[Finding]) -> None:
        self.findings.extend(findings)

    @property
    def fatal(self) -> Finding | None:
        """The first fatal finding, if any."""
        return next((f for f in self.findings if f.severity == Severity.FATAL), None)

    @property
    def failures(self) -> list[Finding]:
        return [f for f in self.findings if f.is_failure]

    @property
    def advisories(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.ADVISORY]

    @property
    def passed(self) -> bool:
        return not self.failures


@dataclass
class RunReport:
    """Reports for every font checked in one harness run."""

    fonts: list[FontReport] = field(default_factory=list)
    skipped: bool = False

    @property
    def passed(self) -> bool:
        return all(report.passed for report in self.fonts)

    @property
    def failed_fonts(self) -> list[QualifiedFontID]:
        return [report.font_id for report in self.fonts if not report.passed]
