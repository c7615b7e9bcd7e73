"""
Harness orchestration.

Checks each registered font in turn: locate, parse, version, glyph count,
then the coverage scan and the mapping and kerning spot checks.
"""

from collections.abc import Iterable

from sfntcheck.checks.coverage import scan_coverage
from sfntcheck.checks.findings import Finding, FindingKind, FontReport, RunReport, Severity
from sfntcheck.checks.kerning import verify_kerning
from sfntcheck.checks.mapping import verify_mappings
from sfntcheck.checks.version import check_version
from sfntcheck.config.settings import HarnessConfig
from sfntcheck.core.errors import AssetUnavailableError, EngineError, ParseError
from sfntcheck.core.font_io import FontLocator
from sfntcheck.core.registry import DatasetRegistry
from sfntcheck.core.types import QualifiedFontID
from sfntcheck.engine.base import DecodeBuffer, Engine
from sfntcheck.utils.logging import logger


class Harness:
    """
    Drives an engine against the golden registry.

    Fonts are processed strictly one after another. A fatal finding stops
    the remaining checks for that font only.
    """

    def __init__(
        self,
        config: HarnessConfig,
        engine: Engine,
        registry: DatasetRegistry | None = None,
        locator: FontLocator | None = None,
    ):
        self.config = config
        self.engine = engine
        self.registry = registry if registry is not None else DatasetRegistry.default()
        self.locator = locator or FontLocator(config)

    def check_font(self, font_id: QualifiedFontID) -> FontReport:
        """
        Run every check for one font and log its findings.

        An EngineError escaping the checks is recorded as a fatal
        ENGINE_FAILURE for this font, so later fonts are still checked.
        """
        report = FontReport(font_id)
        try:
            self._check(font_id, report)
        except EngineError as e:
            logger.debug(f"{font_id}: unexpected {type(e).__name__}: {e}")
            report.add(Finding(FindingKind.ENGINE_FAILURE, str(e), subject=type(e).__name__))
        finally:
            log_report(report)
        return report

    def _check(self, font_id: QualifiedFontID, report: FontReport) -> None:
        entry = self.registry.lookup(font_id)
        engine = self.engine

        try:
            data = self.locator.resolve_id(font_id)
        except AssetUnavailableError as e:
            report.add(Finding(FindingKind.ASSET_UNAVAILABLE, str(e), subject=str(font_id)))
            return

        try:
            font = engine.parse(data)
        except ParseError as e:
            report.add(Finding(FindingKind.PARSE_FAILURE, str(e), subject="Parse"))
            return

        # Scratch state for this font only
        buf = DecodeBuffer()

        report.extend(check_version(engine, font, buf, entry))

        num_glyphs = engine.num_glyphs(font)
        if num_glyphs < entry.min_glyph_count:
            report.add(
                Finding(
                    FindingKind.STRUCTURAL_VIOLATION,
                    f"got {num_glyphs}, want at least {entry.min_glyph_count}",
                    subject="NumGlyphs",
                    got=num_glyphs,
                    want=entry.min_glyph_count,
                )
            )
            return
        logger.info(f"Glyph count: {num_glyphs}")

        coverage = scan_coverage(engine, font, buf, entry, num_glyphs)
        report.glyphs_scanned = coverage.scanned
        report.extend(coverage.findings)
        report.extend(verify_mappings(engine, font, buf, entry, num_glyphs))
        report.extend(verify_kerning(engine, font, buf, entry))

    def run(self, font_ids: Iterable[QualifiedFontID] | None = None) -> RunReport:
        """
        Check the given fonts, or every registered font.

        Unregistered ids are skipped with a warning. Nothing is read when the
        harness is disabled.
        """
        if not self.config.enabled:
            logger.warning("Skipping proprietary font checks (not enabled)")
            return RunReport(skipped=True)

        selected = list(font_ids) if font_ids is not None else self.registry.font_ids()
        run = RunReport()
        total = len(selected)

        for i, font_id in enumerate(selected, 1):
            if font_id not in self.registry:
                logger.warning(f"[{i}/{total}] No golden data for {font_id}, skipping")
                run.fonts.append(FontReport(font_id, skipped=True))
                continue
            logger.info(f"[{i}/{total}] Checking {font_id}")
            run.fonts.append(self.check_font(font_id))

        if run.passed:
            logger.info(f"All {total} fonts passed")
        else:
            failed = ", ".join(str(f) for f in run.failed_fonts)
            logger.error(f"Some fonts failed: {failed}")
        return run


def log_report(report: FontReport) -> None:
    """Log every finding of a font, then a one-line summary."""
    for finding in report.findings:
        if finding.severity == Severity.ADVISORY:
            logger.warning(f"  {finding}")
        else:
            logger.error(f"  {finding}")

    fatal = report.fatal
    if fatal is not None and fatal.kind != FindingKind.COVERAGE_BUDGET_EXCEEDED:
        logger.error(f"{report.font_id}: stopped ({fatal.kind.value})")
    elif report.passed:
        logger.info(f"{report.font_id}: passed")
    else:
        logger.error(f"{report.font_id}: {len(report.failures)} failures")
