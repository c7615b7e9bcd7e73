"""
Opt-in checks against popular, high quality, proprietary fonts.

These fonts are generally available, but copies are not included in this
repository due to licensing differences or file size concerns. To opt in:

    uv run pytest tests/integration --proprietary

Not every check passes out of the box on every system. For example, the
Microsoft Times New Roman font is downloadable gratis even on non-Windows
systems, but as per the ttf-mscorefonts-installer Debian package, this
requires accepting an End User License Agreement (EULA) and a CAB format
decoder. These tests assume that such fonts have already been installed. You
may need to specify the directories for these fonts:

    uv run pytest tests/integration --proprietary \\
        --adobe-dir=/foo/bar/aFonts --microsoft-dir=/foo/bar/mFonts

To only run the checks for the Microsoft fonts:

    uv run pytest tests/integration --proprietary -k microsoft
"""

import pytest

from sfntcheck.config.settings import HarnessConfig
from sfntcheck.core.registry import DatasetRegistry
from sfntcheck.engine.fonttools import FontToolsEngine
from sfntcheck.pipeline.runner import Harness

pytestmark = pytest.mark.proprietary


@pytest.fixture(scope="module")
def harness(request):
    if not request.config.getoption("--proprietary"):
        pytest.skip("skipping proprietary font test")

    config = HarnessConfig().with_overrides(
        enabled=True,
        adobe_dir=request.config.getoption("--adobe-dir"),
        microsoft_dir=request.config.getoption("--microsoft-dir"),
    )
    return Harness(config, FontToolsEngine())


@pytest.mark.parametrize(
    "font_id",
    DatasetRegistry.default().font_ids(),
    ids=str,
)
def test_proprietary_font(harness, font_id):
    """Every glyph loads and every golden sample matches."""
    report = harness.check_font(font_id)

    fatal = report.fatal
    if fatal is not None:
        pytest.fail(str(fatal))
    assert report.passed, "\n".join(str(f) for f in report.failures)
