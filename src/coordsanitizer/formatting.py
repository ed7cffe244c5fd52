"""
coordsanitizer.formatting — Render parsed RA/DEC pairs as text.

Three renderings are available:

``aladin``
    ``"12 34 56.780, +12 34 56.780"``: fixed-width sexagesimal fields, the
    form accepted by the Aladin sky atlas.
``decimal``
    ``"12.582439, 12.582439"``: decimal hours and degrees at the configured
    precision.
``hms-dms``
    ``"12h 34m 56.780s, +12° 34' 56.780\\""``: unpadded, with unit symbols.
"""

from __future__ import annotations
from typing import Callable

from coordsanitizer.config import OutputFormat, SanitizerConfig
from coordsanitizer.convert import RA_RANGE, round_sexagesimal
from coordsanitizer.result import AxisComponent

#: Decimal places of rendered seconds.
SECONDS_PLACES = 3


def _fields(component: AxisComponent) -> tuple[int, int, float]:
    wrap = int(RA_RANGE[1]) if component.axis == "RA" else None
    return round_sexagesimal(component.integer_part, component.minutes,
                             component.seconds, sign=component.sign,
                             places=SECONDS_PLACES, wrap=wrap)


def _sign_prefix(component: AxisComponent) -> str:
    return "-" if component.negative else "+"


def format_aladin(ra: AxisComponent, dec: AxisComponent,
                  config: SanitizerConfig | None = None) -> str:
    """Render ``"HH MM SS.sss, ±DD MM SS.sss"``."""
    hours, ra_min, ra_sec = _fields(ra)
    degrees, dec_min, dec_sec = _fields(dec)
    return (f"{hours:02d} {ra_min:02d} {ra_sec:06.3f}, "
            f"{_sign_prefix(dec)}{abs(degrees):02d} {dec_min:02d} {dec_sec:06.3f}")


def format_decimal(ra: AxisComponent, dec: AxisComponent,
                   config: SanitizerConfig | None = None) -> str:
    """Render ``"<ra>, <dec>"`` with ``config.precision`` decimals."""
    precision = (config or SanitizerConfig()).precision
    return f"{ra.decimal:.{precision}f}, {dec.decimal:.{precision}f}"


def format_hms_dms(ra: AxisComponent, dec: AxisComponent,
                   config: SanitizerConfig | None = None) -> str:
    """Render ``"Hh Mm S.sss, ±D° M' S.sss\\""`` without zero padding."""
    hours, ra_min, ra_sec = _fields(ra)
    degrees, dec_min, dec_sec = _fields(dec)
    return (f"{hours}h {ra_min}m {ra_sec:.3f}s, "
            f"{_sign_prefix(dec)}{abs(degrees)}° {dec_min}' {dec_sec:.3f}\"")


FORMATTERS: dict[OutputFormat, Callable[..., str]] = {
    OutputFormat.ALADIN: format_aladin,
    OutputFormat.DECIMAL: format_decimal,
    OutputFormat.HMS_DMS: format_hms_dms,
}


def format_coordinates(ra: AxisComponent, dec: AxisComponent,
                       config: SanitizerConfig) -> str:
    """Render a parsed pair using ``config.output_format``."""
    return FORMATTERS[config.output_format](ra, dec, config)
