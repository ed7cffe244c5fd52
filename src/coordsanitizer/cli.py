"""
coordsanitizer.cli — Command-line interface for coordsanitizer.

Provides ``coordsan sanitize``, ``coordsan batch`` and ``coordsan formats``
commands.

Output is one line per input so it can be piped into other tools; ``--json``
prints the full result records instead.
"""

from __future__ import annotations
import json
import logging
import sys
import click

from coordsanitizer.config import PRESETS, OutputFormat


def _build_options(fmt, precision, no_validate, preset) -> dict:
    """Merge a preset with explicit command-line overrides."""
    options = PRESETS[preset].as_options() if preset else {}
    if fmt:
        options["output_format"] = fmt
    if precision is not None:
        options["precision"] = precision
    if no_validate:
        options["validate_ranges"] = False
    return options


def _echo_result(label: str, result, as_json: bool, show_label: bool) -> None:
    if as_json:
        payload = result.to_dict()
        if show_label:
            payload["input"] = label
        click.echo(json.dumps(payload, ensure_ascii=False))
        return
    prefix = f"{label}\t" if show_label else ""
    if result.valid:
        click.echo(f"{prefix}{result.coordinates}")
    else:
        click.echo(f"{prefix}❌ {result.error}", err=True)


_format_choice = click.Choice([f.value for f in OutputFormat])
_preset_choice = click.Choice(sorted(PRESETS.keys()))


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="coordsanitizer")
@click.option("-v", "--verbose", is_flag=True, help="Log parsing decisions to stderr")
def main(verbose):
    """🔭 coordsan — Normalize astronomical coordinates from the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("-f", "--format", "fmt", type=_format_choice, default=None,
              help="Output format (default: aladin)")
@click.option("-p", "--precision", type=int, default=None,
              help="Decimal places for --format decimal (default: 6)")
@click.option("--no-validate", is_flag=True, help="Skip RA/DEC range checks")
@click.option("--preset", type=_preset_choice, default=None,
              help="Start from a preset option bundle")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
def sanitize(text, fmt, precision, no_validate, preset, as_json):
    """Sanitize one coordinate string or object name.

    TEXT words are joined with spaces, so quoting is optional.

    Examples:

        coordsan sanitize "12h 34m 56s, +12° 34' 56\\""

        coordsan sanitize 12:34:56 +12:34:56 -f decimal -p 4

        coordsan sanitize M31
    """
    from coordsanitizer.api import CoordinateSanitizer

    try:
        sanitizer = CoordinateSanitizer(**_build_options(fmt, precision, no_validate, preset))
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    result = sanitizer.sanitize(" ".join(text))
    _echo_result(" ".join(text), result, as_json, show_label=False)
    if not result.valid:
        sys.exit(1)


@main.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--column", required=True, help="Column holding the coordinate text")
@click.option("-n", "--limit", default=None, type=int, help="Max rows")
@click.option("-f", "--format", "fmt", type=_format_choice, default=None)
@click.option("-p", "--precision", type=int, default=None)
@click.option("--no-validate", is_flag=True)
@click.option("--preset", type=_preset_choice, default=None)
@click.option("--json", "as_json", is_flag=True, help="One JSON record per row")
def batch(filepath, column, limit, fmt, precision, no_validate, preset, as_json):
    """Sanitize every row of a CSV/TSV/FITS column.

    Examples:

        coordsan batch targets.csv --column position

        coordsan batch catalog.fits -c RADEC -f decimal --json
    """
    from coordsanitizer.api import read_column, sanitize_many

    try:
        values = read_column(filepath, column, limit)
    except (KeyError, ValueError) as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    try:
        results = sanitize_many(values, **_build_options(fmt, precision, no_validate, preset))
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    for value, result in zip(values, results):
        _echo_result(value, result, as_json, show_label=True)

    n_bad = sum(1 for r in results if not r.valid)
    if n_bad:
        click.echo(f"{n_bad}/{len(results)} rows invalid", err=True)
        sys.exit(1)


@main.command()
def formats():
    """List accepted input notations and output formats."""
    from coordsanitizer.api import supported_formats

    info = supported_formats()
    click.echo("Input formats:\n")
    for desc in info["input"]:
        click.echo(f"  {desc}")
    click.echo("\nOutput formats:\n")
    for name in info["output"]:
        marker = " ← default" if name == OutputFormat.ALADIN.value else ""
        click.echo(f"  {name}{marker}")
    click.echo("\nPresets:\n")
    for name, cfg in PRESETS.items():
        click.echo(f"  {name:8s}  format={cfg.output_format.value}  "
                   f"validate={cfg.validate_ranges}  strict={cfg.strict_mode}")


if __name__ == "__main__":
    main()
