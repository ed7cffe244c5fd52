"""
coordsanitizer.convert — Sexagesimal ↔ decimal conversion and range checks.

RA values are handled in hours, DEC values in degrees.  The sign of a
sexagesimal value is carried separately from its integer part: ``-00 58 20``
has an integer part of ``0`` that cannot hold the sign on its own.

Decimal → sexagesimal decomposition uses :class:`astropy.coordinates.Angle`,
so the arithmetic matches what the rest of an astropy-based pipeline sees.
"""

from __future__ import annotations
from typing import NamedTuple, Optional

import astropy.units as u
from astropy.coordinates import Angle

#: Valid RA interval in hours (upper bound exclusive).
RA_RANGE = (0.0, 24.0)
#: Valid DEC interval in degrees (both bounds inclusive).
DEC_RANGE = (-90.0, 90.0)


class Sexagesimal(NamedTuple):
    """A sexagesimal split: signed integer part, minutes, seconds, sign.

    ``minutes`` and ``seconds`` are always non-negative magnitudes.
    ``sign`` is ``-1`` for negative values (including ``-0``) else ``+1``.
    """
    integer_part: int
    minutes: int
    seconds: float
    sign: int


def _sign_of(value: float) -> int:
    return -1 if value < 0 else 1


def _split(angle: Angle, sign: int) -> Sexagesimal:
    _, whole, minutes, seconds = angle.signed_dms
    whole = int(whole)
    return Sexagesimal(sign * whole, int(minutes), float(seconds), sign)


def hms_to_decimal(hours: int, minutes: int, seconds: float) -> float:
    """Convert an hours/minutes/seconds triple to decimal hours."""
    return hours + minutes / 60 + seconds / 3600


def decimal_to_hms(value: float) -> Sexagesimal:
    """Split decimal hours into ``(hours, minutes, seconds, sign)``.

    The split is done on the magnitude; the sign is re-applied to the hour
    field only.
    """
    # Base-60 split is unit-agnostic, so the hour value goes in as degrees.
    return _split(Angle(abs(value), unit=u.deg), _sign_of(value))


def dms_to_decimal(degrees: int, minutes: int, seconds: float,
                   sign: Optional[int] = None) -> float:
    """Convert a degrees/minutes/seconds triple to decimal degrees.

    Parameters
    ----------
    degrees : int
        Integer degrees.  May be negative.
    minutes, seconds : int, float
        Non-negative magnitudes.
    sign : int, optional
        Explicit sign captured from the text (``-1`` or ``+1``).  Needed when
        ``degrees`` is zero; when omitted the sign of ``degrees`` is used.

    Returns
    -------
    float
    """
    if sign is None:
        sign = _sign_of(degrees)
    magnitude = abs(degrees) + minutes / 60 + seconds / 3600
    return -magnitude if sign < 0 else magnitude


def decimal_to_dms(value: float) -> Sexagesimal:
    """Split decimal degrees into ``(degrees, minutes, seconds, sign)``.

    >>> decimal_to_dms(-0.5)
    Sexagesimal(integer_part=0, minutes=30, seconds=0.0, sign=-1)
    """
    return _split(Angle(abs(value), unit=u.deg), _sign_of(value))


def round_sexagesimal(integer_part: int, minutes: int, seconds: float,
                      sign: int = 1, places: int = 3,
                      wrap: Optional[int] = None) -> tuple[int, int, float]:
    """Round *seconds* to *places* decimals, carrying overflow upward.

    The carry grows the magnitude of the integer part, so ``-00 59 59.9996``
    becomes ``(-1, 0, 0.0)``.  Minutes and seconds stay magnitudes.

    With *wrap* set (24 for RA) a carry that reaches *wrap* rolls over to 0,
    so ``23 59 59.9999`` becomes ``(0, 0, 0.0)``.  Values already past *wrap*
    are left alone.
    """
    seconds = round(seconds, places)
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        integer_part = (abs(integer_part) + 1) * (-1 if sign < 0 else 1)
        if wrap and integer_part == wrap:
            integer_part = 0
    return integer_part, minutes, abs(seconds)


# ---------------------------------------------------------------------------
# Range validation
# ---------------------------------------------------------------------------

def validate_ra(hours: float) -> Optional[str]:
    """Return an error message if *hours* lies outside ``[0, 24)``, else None."""
    lo, hi = RA_RANGE
    if hours < lo or hours >= hi:
        return f"RA out of range: {hours} (must be 0-24 hours)"
    return None


def validate_dec(degrees: float) -> Optional[str]:
    """Return an error message if *degrees* lies outside ``[-90, 90]``, else None."""
    lo, hi = DEC_RANGE
    if degrees < lo or degrees > hi:
        return f"DEC out of range: {degrees} (must be -90 to +90 degrees)"
    return None
