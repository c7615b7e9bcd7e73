"""
Main CLI entry point for sfntcheck.
"""

import sys

import click

from sfntcheck import __version__
from sfntcheck.config.paths import ENV_ADOBE_DIR, ENV_ENABLED, ENV_MICROSOFT_DIR


def _parse_font_id(ctx, param, values):
    from sfntcheck.core.types import QualifiedFontID

    try:
        return [QualifiedFontID.parse(value) for value in values]
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.version_option(version=__version__)
def cli():
    """Regression checks for font engines against proprietary fonts."""
    pass


@cli.command()
@click.argument("font_ids", nargs=-1, callback=_parse_font_id)
@click.option(
    "--proprietary/--no-proprietary",
    default=False,
    envvar=ENV_ENABLED,
    help="Test proprietary fonts not included in this repository.",
)
@click.option(
    "--adobe-dir",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    envvar=ENV_ADOBE_DIR,
    help="Directory holding the Adobe proprietary fonts.",
)
@click.option(
    "--microsoft-dir",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    envvar=ENV_MICROSOFT_DIR,
    help="Directory holding the Microsoft proprietary fonts.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log per-glyph progress.")
def run(font_ids, proprietary, adobe_dir, microsoft_dir, verbose):
    """Check FONT_IDS (e.g. microsoft/Arial.ttf), or every registered font."""
    from sfntcheck.config.settings import HarnessConfig
    from sfntcheck.engine.fonttools import FontToolsEngine
    from sfntcheck.pipeline.runner import Harness
    from sfntcheck.utils.logging import set_verbose

    set_verbose(verbose)
    config = HarnessConfig().with_overrides(
        enabled=proprietary,
        adobe_dir=adobe_dir,
        microsoft_dir=microsoft_dir,
    )
    report = Harness(config, FontToolsEngine()).run(font_ids or None)
    if not report.passed:
        sys.exit(1)


@cli.command("list")
def list_fonts():
    """List fonts with golden data."""
    from sfntcheck.core.registry import DatasetRegistry

    registry = DatasetRegistry.default()
    for font_id in registry:
        entry = registry.lookup(font_id)
        click.echo(
            f"{str(font_id):40} glyphs>={entry.min_glyph_count:<6} "
            f"cmap={len(entry.glyph_index_samples):<3} kern={len(entry.kerning_samples)}"
        )


@cli.command()
@click.argument("font_id", callback=lambda ctx, param, value: _parse_font_id(ctx, param, [value])[0])
def show(font_id):
    """Show the golden data for FONT_ID."""
    from sfntcheck.core.registry import DatasetRegistry
    from sfntcheck.core.types import format_codepoint

    registry = DatasetRegistry.default()
    if font_id not in registry:
        click.echo(f"No golden data for {font_id}", err=True)
        sys.exit(1)

    entry = registry.lookup(font_id)
    click.echo(f"{font_id}")
    click.echo(f"  version:           {entry.expected_version}")
    click.echo(f"  min glyphs:        {entry.min_glyph_count}")
    bound = entry.first_unsupported_glyph
    click.echo(f"  first unsupported: {'none' if bound is None else bound}")
    for codepoint, index in entry.glyph_index_samples.items():
        click.echo(f"  GlyphIndex({format_codepoint(codepoint)}) = {index}")
    for case in entry.kerning_samples:
        click.echo(f"  {case.describe()} = {case.expected}")


if __name__ == "__main__":
    cli()
