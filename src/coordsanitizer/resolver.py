"""
coordsanitizer.resolver — Axis parsing and RA/DEC splitting.

Each axis is tried against an ordered list of grammars; the first that
matches wins:

1. **Sexagesimal**: ``"12h 34m 56.78s"``, ``"12:34:56.78"``,
   ``"+12d 34' 56.78\\""``, ``"12 34 56.78"``.
2. **Compact**: ``"123456.78"`` / ``"-123456"`` (``HHMMSS`` / ``DDMMSS``).
3. **Decimal**: ``"12.5"`` (hours for RA) / ``"-45.75d"`` (degrees for DEC).

Only DEC grammars accept a leading sign.  The sign is captured as its own
token so that ``-00 58 20`` keeps its sign although its degree field is 0.

Text is expected to be normalized (see :mod:`coordsanitizer.normalize`), but
the glyphs ``° ′ ″`` are accepted too.
"""

from __future__ import annotations
import logging
import re
from typing import Callable, NamedTuple, Optional

from coordsanitizer.convert import (
    decimal_to_dms, decimal_to_hms, dms_to_decimal, hms_to_decimal,
)
from coordsanitizer.result import AxisComponent, SourceFormat

logger = logging.getLogger(__name__)

_SECONDS = r"(?P<sec>\d{1,2}(?:\.\d+)?)"
_MINUTE_MARK = r"\s*[m:'′\s]\s*"
_SECOND_MARK = r"\s*[s\"'″\s]*"

RA_HMS = re.compile(
    rf"^(?P<whole>\d{{1,2}})\s*[h:\s]\s*(?P<min>\d{{1,2}}){_MINUTE_MARK}{_SECONDS}{_SECOND_MARK}$",
    re.IGNORECASE,
)
RA_HMS_COMPACT = re.compile(r"^(?P<whole>\d{2})(?P<min>\d{2})(?P<sec>\d{2}(?:\.\d+)?)$")
RA_DECIMAL = re.compile(r"^(?P<value>\d{1,3}(?:\.\d+)?)[d°]?$", re.IGNORECASE)

DEC_DMS = re.compile(
    rf"^(?P<sign>[+-])?\s*(?P<whole>\d{{1,2}})\s*[d°:\s]\s*(?P<min>\d{{1,2}}){_MINUTE_MARK}{_SECONDS}{_SECOND_MARK}$",
    re.IGNORECASE,
)
DEC_DMS_COMPACT = re.compile(
    r"^(?P<sign>[+-])?(?P<whole>\d{2})(?P<min>\d{2})(?P<sec>\d{2}(?:\.\d+)?)$"
)
DEC_DECIMAL = re.compile(r"^(?P<sign>[+-])?\s*(?P<value>\d{1,3}(?:\.\d+)?)[d°]?$", re.IGNORECASE)

#: "<ra> , <dec>" or "<ra> ; <dec>", split at the first separator.
COMBINED_PATTERN = re.compile(r"^(.+?)\s*[,;]\s*(.+)$")

_AXIS_LABEL = re.compile(r"\b(?:RA|DECL|DEC)\b\s*[=:]?\s*", re.IGNORECASE)
_NUMERIC_TOKEN = re.compile(r"^[+-]?\d+(?:\.\d+)?$")

#: Minimum numeric tokens for separator-less "H M S D M S" input.
MIN_SPACE_TOKENS = 6


class _Tokens(NamedTuple):
    """Raw pieces pulled out of one axis string by a grammar."""
    source_format: SourceFormat
    sign: int
    whole: int = 0
    minutes: int = 0
    seconds: float = 0.0
    value: Optional[float] = None


Matcher = Callable[[str], Optional[_Tokens]]


def _sign(match: re.Match) -> int:
    return -1 if match.groupdict().get("sign") == "-" else 1


def _sexagesimal(pattern: re.Pattern, source_format: SourceFormat) -> Matcher:
    def match(text: str) -> Optional[_Tokens]:
        m = pattern.match(text)
        if not m:
            return None
        return _Tokens(source_format, _sign(m), int(m["whole"]),
                       int(m["min"]), float(m["sec"]))
    return match


def _decimal(pattern: re.Pattern) -> Matcher:
    def match(text: str) -> Optional[_Tokens]:
        m = pattern.match(text)
        if not m:
            return None
        sign = _sign(m)
        return _Tokens(SourceFormat.DECIMAL, sign, value=sign * float(m["value"]))
    return match


RA_GRAMMARS: list[Matcher] = [
    _sexagesimal(RA_HMS, SourceFormat.HMS),
    _sexagesimal(RA_HMS_COMPACT, SourceFormat.HMS_COMPACT),
    _decimal(RA_DECIMAL),
]

DEC_GRAMMARS: list[Matcher] = [
    _sexagesimal(DEC_DMS, SourceFormat.DMS),
    _sexagesimal(DEC_DMS_COMPACT, SourceFormat.DMS_COMPACT),
    _decimal(DEC_DECIMAL),
]


def _first_match(grammars: list[Matcher], text: str) -> Optional[_Tokens]:
    for grammar in grammars:
        tokens = grammar(text)
        if tokens is not None:
            return tokens
    return None


def parse_ra(text: str) -> AxisComponent:
    """Parse a right ascension string into an :class:`AxisComponent` (hours).

    Parameters
    ----------
    text : str
        RA part only, e.g. ``"12h 34m 56.78s"``, ``"123456"`` or ``"12.5"``.

    Returns
    -------
    AxisComponent
        ``valid=False`` with ``"Invalid RA format: <text>"`` when no grammar
        matches.  Range is not checked here.
    """
    text = text.strip()
    tokens = _first_match(RA_GRAMMARS, text)
    if tokens is None:
        return AxisComponent.failure("RA", f"Invalid RA format: {text}")
    logger.debug("RA %r parsed as %s", text, tokens.source_format.value)

    if tokens.value is not None:
        hours, minutes, seconds, sign = decimal_to_hms(tokens.value)
        return AxisComponent("RA", True, tokens.value, None, tokens.source_format,
                             hours, minutes, seconds, sign)

    decimal = hms_to_decimal(tokens.whole, tokens.minutes, tokens.seconds)
    return AxisComponent("RA", True, decimal, None, tokens.source_format,
                         tokens.whole, tokens.minutes, tokens.seconds, 1)


def parse_dec(text: str) -> AxisComponent:
    """Parse a declination string into an :class:`AxisComponent` (degrees).

    The sign is taken from an explicit leading ``+``/``-``, never from the
    parsed degree field, so ``"-00 58 20"`` gives a negative value.
    """
    text = text.strip()
    tokens = _first_match(DEC_GRAMMARS, text)
    if tokens is None:
        return AxisComponent.failure("DEC", f"Invalid DEC format: {text}")
    logger.debug("DEC %r parsed as %s", text, tokens.source_format.value)

    if tokens.value is not None:
        degrees, minutes, seconds, sign = decimal_to_dms(tokens.value)
        return AxisComponent("DEC", True, tokens.value, None, tokens.source_format,
                             degrees, minutes, seconds, sign)

    decimal = dms_to_decimal(tokens.whole, tokens.minutes, tokens.seconds,
                             sign=tokens.sign)
    return AxisComponent("DEC", True, decimal, None, tokens.source_format,
                         tokens.sign * tokens.whole, tokens.minutes,
                         tokens.seconds, tokens.sign)


# ---------------------------------------------------------------------------
# Splitting a full coordinate string
# ---------------------------------------------------------------------------

class AxisPair(NamedTuple):
    ra: AxisComponent
    dec: AxisComponent

    @property
    def valid(self) -> bool:
        return self.ra.valid and self.dec.valid

    @property
    def error(self) -> Optional[str]:
        return self.ra.error or self.dec.error


def strip_axis_labels(text: str) -> str:
    """Drop ``RA``/``DEC``/``DECL`` labels (with optional ``=`` or ``:``)."""
    return _AXIS_LABEL.sub("", text).strip()


def parse_coordinates(text: str) -> Optional[AxisPair]:
    """Split normalized *text* into RA and DEC and parse both.

    Tries, in order:

    1. **Separator**: ``"<ra>,<dec>"`` or ``"<ra>;<dec>"``, split at the
       first separator.  Both parts are parsed whatever they contain.
    2. **Two tokens**: ``"10:00:00 +02:12:00"``.  Used only when both tokens
       parse.
    3. **Six numbers**: ``"12 34 56.7 -45 12 34.5"``; the first three numeric
       tokens are RA, the next three DEC.

    Returns
    -------
    AxisPair or None
        ``None`` when the text cannot be split into two axes; the caller
        treats it as an object name.  A returned pair may hold invalid axes.
    """
    text = strip_axis_labels(text)

    m = COMBINED_PATTERN.match(text)
    if m:
        return AxisPair(parse_ra(m.group(1)), parse_dec(m.group(2)))

    tokens = text.split()
    if len(tokens) == 2:
        pair = AxisPair(parse_ra(tokens[0]), parse_dec(tokens[1]))
        if pair.valid:
            return pair

    numeric = [t for t in tokens if _NUMERIC_TOKEN.match(t)]
    if len(numeric) >= MIN_SPACE_TOKENS:
        return AxisPair(parse_ra(" ".join(numeric[:3])),
                        parse_dec(" ".join(numeric[3:6])))

    logger.debug("no RA/DEC split found in %r", text)
    return None
