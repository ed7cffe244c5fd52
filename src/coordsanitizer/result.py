"""
coordsanitizer.result — Result records returned by the sanitizer.

Every call to :meth:`CoordinateSanitizer.sanitize` returns a
:class:`SanitizationResult`; failures are reported through ``valid=False``
plus an ``error`` message and an :class:`ErrorKind`, never raised.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import astropy.units as u
from astropy.coordinates import Angle, SkyCoord


class InputFormat(str, Enum):
    """What the sanitizer decided the input was."""
    COORDINATES = "coordinates"
    OBJECT_NAME = "object-name"
    ALREADY_VALID = "already-valid"


class SourceFormat(str, Enum):
    """Grammar an axis value was parsed with."""
    HMS = "hms"
    HMS_COMPACT = "hms-compact"
    DMS = "dms"
    DMS_COMPACT = "dms-compact"
    DECIMAL = "decimal"


class ErrorKind(str, Enum):
    """Failure categories, so callers can branch without parsing messages."""
    INVALID_INPUT = "invalid-input"
    MALICIOUS_INPUT = "malicious-input"
    PARSE_ERROR = "parse-error"
    RANGE_ERROR = "range-error"


#: ``output_format`` reported for object names, which are not re-rendered.
PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class AxisComponent:
    """One parsed axis (RA in hours or DEC in degrees).

    ``integer_part`` carries the sign when non-zero; ``sign`` always does,
    including for values like ``-00 58 20`` whose integer part is zero.
    """
    axis: str
    valid: bool
    decimal: Optional[float] = None
    error: Optional[str] = None
    source_format: Optional[SourceFormat] = None
    integer_part: int = 0
    minutes: int = 0
    seconds: float = 0.0
    sign: int = 1

    @classmethod
    def failure(cls, axis: str, error: str) -> "AxisComponent":
        return cls(axis=axis, valid=False, error=error)

    @property
    def hours(self) -> int:
        return self.integer_part

    @property
    def degrees(self) -> int:
        return self.integer_part

    @property
    def negative(self) -> bool:
        return self.sign < 0

    def to_angle(self) -> Angle:
        """Return the value as an astropy Angle (hourangle for RA)."""
        if not self.valid:
            raise ValueError(f"Cannot convert invalid {self.axis} component: {self.error}")
        unit = u.hourangle if self.axis == "RA" else u.deg
        return Angle(self.decimal, unit=unit)

    def to_dict(self) -> dict:
        return {
            "axis": self.axis,
            "valid": self.valid,
            "decimal": self.decimal,
            "error": self.error,
            "format": self.source_format.value if self.source_format else None,
            "integer_part": self.integer_part,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "sign": self.sign,
        }


@dataclass(frozen=True)
class ResultMetadata:
    input_format: Optional[InputFormat] = None
    output_format: Optional[str] = None
    ra: Optional[AxisComponent] = None
    dec: Optional[AxisComponent] = None


@dataclass(frozen=True)
class SanitizationResult:
    """Outcome of one sanitize call.

    Attributes
    ----------
    valid : bool
        Whether the input was accepted.
    coordinates : str
        Rendered coordinates, the passed-through object name, or ``""`` on
        failure.
    error : str, optional
        Human-readable failure message.
    error_kind : ErrorKind, optional
        Failure category.
    metadata : ResultMetadata
        Classification and per-axis parse details.
    """
    valid: bool
    coordinates: str = ""
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    metadata: ResultMetadata = field(default_factory=ResultMetadata)

    def __bool__(self) -> bool:
        return self.valid

    @property
    def is_coordinates(self) -> bool:
        return self.metadata.input_format is InputFormat.COORDINATES

    @property
    def is_object_name(self) -> bool:
        return self.metadata.input_format is InputFormat.OBJECT_NAME

    def to_skycoord(self) -> SkyCoord:
        """Build an ICRS SkyCoord from a parsed coordinate result.

        Raises
        ------
        ValueError
            If the result holds no parsed coordinates, or DEC lies outside
            ``[-90, 90]`` (possible with range validation turned off).
        """
        ra, dec = self.metadata.ra, self.metadata.dec
        if not self.valid or ra is None or dec is None:
            raise ValueError("Result does not contain parsed coordinates")
        return SkyCoord(ra=ra.to_angle(), dec=dec.to_angle(), frame="icrs")

    def to_dict(self) -> dict:
        """Return a JSON-serialisable view of the result."""
        meta = self.metadata
        return {
            "valid": self.valid,
            "coordinates": self.coordinates,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "metadata": {
                "input_format": meta.input_format.value if meta.input_format else None,
                "output_format": meta.output_format,
                "ra": meta.ra.to_dict() if meta.ra else None,
                "dec": meta.dec.to_dict() if meta.dec else None,
            },
        }


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def success(coordinates: str, input_format: InputFormat, output_format: str,
            ra: AxisComponent | None = None,
            dec: AxisComponent | None = None) -> SanitizationResult:
    return SanitizationResult(
        valid=True,
        coordinates=coordinates,
        metadata=ResultMetadata(input_format=input_format,
                                output_format=output_format, ra=ra, dec=dec),
    )


def failure(error: str, kind: ErrorKind) -> SanitizationResult:
    """Build a failed result; ``coordinates`` is always empty."""
    return SanitizationResult(valid=False, coordinates="", error=error, error_kind=kind)
