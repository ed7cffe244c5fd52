"""
coordsanitizer.config — Sanitizer configuration and presets.

A sanitizer is driven by an immutable :class:`SanitizerConfig`.  Options can
be given in Python spelling (``output_format``) or in camelCase as
JSON option objects spell them (``outputFormat``).

Presets bundle the common option sets: ``aladin``, ``decimal``, ``loose``
and ``strict``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class OutputFormat(str, Enum):
    """Renderings a sanitizer can produce."""
    ALADIN = "aladin"
    DECIMAL = "decimal"
    HMS_DMS = "hms-dms"


#: camelCase option name → SanitizerConfig field.
_OPTION_ALIASES = {
    "outputFormat": "output_format",
    "validateRanges": "validate_ranges",
    "strictMode": "strict_mode",
}


@dataclass(frozen=True)
class SanitizerConfig:
    """Options for a :class:`~coordsanitizer.api.CoordinateSanitizer`.

    Attributes
    ----------
    output_format : OutputFormat
        Rendering of parsed coordinates (default ``"aladin"``).
    precision : int
        Decimal places used by the ``"decimal"`` rendering (default ``6``).
    validate_ranges : bool
        Reject RA outside ``[0, 24)`` hours and DEC outside ``[-90, 90]``
        degrees (default ``True``).
    strict_mode : bool
        Reserved flag.  Stored and queryable; no parsing path reads it yet.
    """
    output_format: OutputFormat = OutputFormat.ALADIN
    precision: int = 6
    validate_ranges: bool = True
    strict_mode: bool = False

    def __post_init__(self):
        try:
            fmt = OutputFormat(self.output_format)
        except ValueError:
            raise ValueError(
                f"Unknown output format '{self.output_format}'. "
                f"Available: {[f.value for f in OutputFormat]}") from None
        object.__setattr__(self, "output_format", fmt)

        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")

        object.__setattr__(self, "validate_ranges", bool(self.validate_ranges))
        object.__setattr__(self, "strict_mode", bool(self.strict_mode))

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None,
                     **kwargs) -> "SanitizerConfig":
        """Build a config from an options mapping and/or keyword arguments.

        Unrecognized keys are ignored and ``None`` values fall back to the
        defaults.  Keyword arguments win over the mapping.
        """
        merged = dict(options or {})
        merged.update(kwargs)
        fields = {}
        for key, value in merged.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__ and value is not None:
                fields[name] = value
        return cls(**fields)

    def as_options(self) -> dict:
        """Return the config as a plain dict (enum values as strings)."""
        return {
            "output_format": self.output_format.value,
            "precision": self.precision,
            "validate_ranges": self.validate_ranges,
            "strict_mode": self.strict_mode,
        }


# ---------------------------------------------------------------------------
# Preset registry
# ---------------------------------------------------------------------------

PRESETS: dict[str, SanitizerConfig] = {
    "aladin": SanitizerConfig(
        output_format=OutputFormat.ALADIN, validate_ranges=True,
    ),
    "decimal": SanitizerConfig(
        output_format=OutputFormat.DECIMAL, precision=6, validate_ranges=True,
    ),
    "loose": SanitizerConfig(
        output_format=OutputFormat.ALADIN, validate_ranges=False,
    ),
    "strict": SanitizerConfig(
        output_format=OutputFormat.ALADIN, validate_ranges=True, strict_mode=True,
    ),
}

#: Preset used when none is specified.
DEFAULT_PRESET = "aladin"


def get_preset(name: str | None = None) -> SanitizerConfig:
    """Look up a preset configuration by name.

    Parameters
    ----------
    name : str, optional
        Preset identifier (case-insensitive).  Defaults to :data:`DEFAULT_PRESET`.

    Returns
    -------
    SanitizerConfig

    Raises
    ------
    ValueError
        If *name* is not a known preset.
    """
    key = (name or DEFAULT_PRESET).lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{key}'. Available: {list(PRESETS.keys())}")
    return PRESETS[key]
