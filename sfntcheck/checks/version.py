"""
Version check.

Some checks, such as which glyph index a particular codepoint maps to, can
depend on the specific version of a proprietary font. When tested against a
different version, a check might (but not necessarily will) fail even though
the engine is good. A version mismatch is therefore advisory: it is logged as
a warning so that failures can be attributed to stale golden data.
"""

from typing import Any

from sfntcheck.checks.findings import Finding, FindingKind
from sfntcheck.core.errors import NameLookupError
from sfntcheck.core.types import GoldenEntry
from sfntcheck.engine.base import NAME_ID_VERSION, DecodeBuffer, Engine
from sfntcheck.utils.logging import logger


def check_version(
    engine: Engine, font: Any, buf: DecodeBuffer, entry: GoldenEntry
) -> list[Finding]:
    """
    Compare the font's version string with the golden one.

    A version string that cannot be read is reported as a NAME_LOOKUP_FAILURE
    finding; the remaining checks for the font still run.
    """
    try:
        got = engine.name(font, buf, NAME_ID_VERSION)
    except NameLookupError as e:
        return [Finding(FindingKind.NAME_LOOKUP_FAILURE, str(e), subject="Name(version)")]
    want = entry.expected_version
    if got == want:
        logger.debug(f"Font version: {got}")
        return []

    return [
        Finding(
            FindingKind.VERSION_DRIFT,
            "font version provided differs from the one the golden data was written against: "
            f"got {got!r}, want {want!r}",
            subject="Name(version)",
            got=got,
            want=want,
        )
    ]
