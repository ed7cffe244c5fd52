"""
coordsanitizer.api — Public entry points.

This module provides the main interface for library and CLI usage.  The
public names are re-exported from the top-level ``coordsanitizer`` package.

Typical usage::

    from coordsanitizer import CoordinateSanitizer

    sanitizer = CoordinateSanitizer(output_format="decimal", precision=4)
    result = sanitizer.sanitize("12h 34m 56s, +12° 34' 56\\"")
    if result.valid:
        print(result.coordinates)      # "12.5822, 12.5822"
    else:
        print(result.error)
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import numpy as np

from coordsanitizer.classify import is_canonical, looks_like_coordinates as _looks_like, match_catalog
from coordsanitizer.config import OutputFormat, SanitizerConfig, get_preset
from coordsanitizer.convert import validate_dec, validate_ra
from coordsanitizer.formatting import format_coordinates
from coordsanitizer.normalize import normalize_input
from coordsanitizer.resolver import parse_coordinates
from coordsanitizer.result import (
    PASSTHROUGH, ErrorKind, InputFormat, SanitizationResult, failure, success,
)
from coordsanitizer.security import MALICIOUS_INPUT_ERROR, is_safe

logger = logging.getLogger(__name__)

EMPTY_INPUT_ERROR = "Input must be a non-empty string"

#: Human-readable descriptions of accepted input notations.
INPUT_FORMATS = [
    'HMS/DMS (12h 34m 56.78s, +12° 34\' 56.78")',
    "Colon-separated (12:34:56.78, +12:34:56.78)",
    "Decimal hours/degrees (12.5, -45.75)",
    "Compact (123456.78, -123456.78)",
    "Space-separated (12 34 56.7 -45 12 34.5)",
    'Mixed separators (12:34:56.78; +12°34\'56.78")',
    "Labelled (RA 12:34:56, DEC +12:34:56)",
    "Catalog names, passed through (M31, NGC 1234, HD 209458)",
]

ConfigLike = Union[SanitizerConfig, Mapping[str, Any], None]


def _coerce_config(config: ConfigLike = None, **options) -> SanitizerConfig:
    if isinstance(config, SanitizerConfig):
        if not options:
            return config
        return SanitizerConfig.from_options(config.as_options(), **options)
    return SanitizerConfig.from_options(config, **options)


class CoordinateSanitizer:
    """Parse, validate and re-render free-form astronomical coordinates.

    Parameters
    ----------
    config : SanitizerConfig or mapping, optional
        Configuration object, or an options mapping such as
        ``{"outputFormat": "decimal", "precision": 4}``.
    **options
        Individual options (``output_format``, ``precision``,
        ``validate_ranges``, ``strict_mode``); override *config*.

    Raises
    ------
    ValueError
        If an option value is invalid (unknown format, negative precision).

    Examples
    --------
    >>> CoordinateSanitizer().sanitize("M31").coordinates
    'M31'
    >>> CoordinateSanitizer().sanitize("12:00:00, -12:00:00").coordinates
    '12 00 00.000, -12 00 00.000'
    """

    def __init__(self, config: ConfigLike = None, **options):
        self._config = _coerce_config(config, **options)

    def __repr__(self) -> str:
        return f"CoordinateSanitizer({self._config!r})"

    @property
    def config(self) -> SanitizerConfig:
        return self._config

    @property
    def options(self) -> dict:
        return self._config.as_options()

    # -- classification helpers ---------------------------------------------

    def looks_like_coordinates(self, text: str) -> bool:
        """True if *text* carries coordinate markers and is not a catalog name."""
        if not isinstance(text, str):
            return False
        return _looks_like(normalize_input(text))

    def is_valid_format(self, text: str) -> bool:
        """True if *text* is already in the configured output format."""
        if not isinstance(text, str):
            return False
        return is_canonical(text.strip(), self._config.output_format)

    # -- main entry point ---------------------------------------------------

    def sanitize(self, text: Any) -> SanitizationResult:
        """Sanitize one coordinate string or object name.

        Never raises for bad input; check ``result.valid``.

        Parameters
        ----------
        text : str
            Raw input, e.g. ``"12h 34m 56s, +12° 34' 56\\""`` or ``"NGC 788"``.

        Returns
        -------
        SanitizationResult
            ``input_format`` is ``"already-valid"`` (returned unchanged),
            ``"object-name"`` (passed through) or ``"coordinates"``
            (re-rendered).  Catalog names come back in normalized form;
            other passthrough text comes back as the trimmed original.
        """
        if not isinstance(text, str):
            return failure(EMPTY_INPUT_ERROR, ErrorKind.INVALID_INPUT)

        trimmed = text.strip()
        normalized = normalize_input(text)
        if not normalized:
            return failure(EMPTY_INPUT_ERROR, ErrorKind.INVALID_INPUT)

        if not is_safe(text):
            return failure(MALICIOUS_INPUT_ERROR, ErrorKind.MALICIOUS_INPUT)

        fmt = self._config.output_format
        if is_canonical(trimmed, fmt):
            logger.debug("input already in %s form", fmt.value)
            return success(trimmed, InputFormat.ALREADY_VALID, fmt.value)

        catalog = match_catalog(normalized)
        if catalog is not None:
            logger.debug("%r matched catalog shape %s", normalized, catalog)
            return success(normalized, InputFormat.OBJECT_NAME, PASSTHROUGH)

        if not _looks_like(normalized):
            return success(trimmed, InputFormat.OBJECT_NAME, PASSTHROUGH)

        pair = parse_coordinates(normalized)
        if pair is None:
            return success(trimmed, InputFormat.OBJECT_NAME, PASSTHROUGH)

        if not pair.valid:
            return failure(f"Invalid coordinates: {pair.error}", ErrorKind.PARSE_ERROR)

        if self._config.validate_ranges:
            range_error = validate_ra(pair.ra.decimal) or validate_dec(pair.dec.decimal)
            if range_error:
                logger.debug("range check failed: %s", range_error)
                return failure(range_error, ErrorKind.RANGE_ERROR)

        formatted = format_coordinates(pair.ra, pair.dec, self._config)
        return success(formatted, InputFormat.COORDINATES, fmt.value,
                       ra=pair.ra, dec=pair.dec)

    #: Long-form alias.
    sanitize_coordinates = sanitize

    @staticmethod
    def supported_formats() -> dict[str, list[str]]:
        return supported_formats()

    @staticmethod
    def create_preset(name: str) -> "CoordinateSanitizer":
        return create_preset(name)


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

def supported_formats() -> dict[str, list[str]]:
    """Describe accepted inputs and list output format identifiers.

    Returns
    -------
    dict
        ``{"input": [...descriptions...], "output": ["aladin", "decimal", "hms-dms"]}``
    """
    return {
        "input": list(INPUT_FORMATS),
        "output": [fmt.value for fmt in OutputFormat],
    }


def create_preset(name: str) -> CoordinateSanitizer:
    """Build a sanitizer from a named preset.

    Parameters
    ----------
    name : str
        ``"aladin"``, ``"decimal"``, ``"loose"`` or ``"strict"``.

    Raises
    ------
    ValueError
        If *name* is not a known preset.
    """
    return CoordinateSanitizer(get_preset(name))


def sanitize(text: Any, config: ConfigLike = None, **options) -> SanitizationResult:
    """One-shot :meth:`CoordinateSanitizer.sanitize` with a throwaway sanitizer."""
    return CoordinateSanitizer(config, **options).sanitize(text)


def _coerce_inputs(inputs) -> list:
    """Normalize list / tuple / numpy array / pandas Series input to a flat list.

    numpy scalars are converted to native Python objects, so ``np.str_``
    values are sanitized like ``str`` and anything else is reported as
    invalid input.
    """
    if isinstance(inputs, str):
        return [inputs]
    if not hasattr(inputs, "__array__"):
        inputs = list(inputs)
    arr = np.asarray(inputs, dtype=object).ravel()
    items = []
    for item in arr:
        if hasattr(item, "item") and not isinstance(item, str):
            item = item.item()
        items.append(item)
    return items


def sanitize_many(inputs, config: ConfigLike = None,
                  **options) -> list[SanitizationResult]:
    """Sanitize a sequence of inputs with one shared sanitizer.

    Parameters
    ----------
    inputs : various
        A string, list or tuple of strings, numpy array, or pandas Series.
    config, **options
        As for :class:`CoordinateSanitizer`.

    Returns
    -------
    list[SanitizationResult]
        One result per input, in order.

    Examples
    --------
    >>> results = sanitize_many(["M31", "12:00:00, +45:00:00"])
    >>> [r.metadata.input_format.value for r in results]
    ['object-name', 'coordinates']
    """
    sanitizer = CoordinateSanitizer(config, **options)
    items = _coerce_inputs(inputs)
    results = [sanitizer.sanitize(item) for item in items]
    n_bad = sum(1 for r in results if not r.valid)
    if n_bad:
        logger.debug("sanitized %d inputs, %d invalid", len(results), n_bad)
    return results


def read_column(filepath: Union[str, Path], column: str,
                limit: Optional[int] = None) -> list[str]:
    """Read one text column from a ``.csv``/``.tsv``/``.txt`` or ``.fits`` file.

    Raises
    ------
    ValueError
        For an unsupported file extension.
    KeyError
        If *column* is not in the file.
    """
    path = Path(filepath)
    ext = path.suffix.lower()

    if ext in (".fits", ".fit"):
        from astropy.table import Table
        tbl = Table.read(str(path))
        tbl.convert_bytestring_to_unicode()
        if column not in tbl.colnames:
            raise KeyError(f"Column '{column}' not found. Available: {tbl.colnames}")
        values = [str(v) for v in tbl[column][:limit]]
    elif ext in (".csv", ".tsv", ".txt"):
        import csv
        sep = "\t" if ext == ".tsv" else ","
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f, delimiter=sep)
            if column not in (reader.fieldnames or []):
                raise KeyError(f"Column '{column}' not found. Available: {reader.fieldnames}")
            rows = list(reader)[:limit]
        values = [r[column] for r in rows]
    else:
        raise ValueError(f"Unsupported file format: {ext}. Use .csv, .tsv, .fits")
    return values


def sanitize_file(filepath: Union[str, Path], column: str,
                  limit: Optional[int] = None, config: ConfigLike = None,
                  **options) -> list[SanitizationResult]:
    """Load a catalog column and sanitize each row.

    Examples
    --------
    >>> sanitize_file("targets.csv", column="position", output_format="decimal")
    """
    return sanitize_many(read_column(filepath, column, limit), config, **options)
