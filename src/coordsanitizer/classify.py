"""
coordsanitizer.classify — Decide what kind of text the user typed.

Three outcomes, checked in this order:

1. **already-valid**: the text is already in the canonical Aladin form.
2. **object-name**: the text matches a known catalog designation shape
   (``M31``, ``NGC 1234``, ``Sh2-155``, ``51 Eri`` ...).
3. **coordinates**: the text carries coordinate markers (``h``, ``d``,
   ``m``, ``:``, signed numbers, a ``RA``/``DEC`` label ...).  Text with none
   of them is treated as an object name too.

Catalog matching is a shape filter, not a lookup: ``"NGC 99999"`` is
accepted even though no such object exists.
"""

from __future__ import annotations
import re

from coordsanitizer.config import OutputFormat

#: Exact Aladin rendering: "HH MM SS.sss, ±DD MM SS.sss".
ALADIN_PATTERN = re.compile(
    r"^\d{2} \d{2} \d{2}\.\d{3}, [+-]?\d{2} \d{2} \d{2}\.\d{3}$"
)

# Canonical grammar per output format.  Only Aladin has a recognizable one.
_CANONICAL_PATTERNS = {
    OutputFormat.ALADIN: ALADIN_PATTERN,
}

#: Catalog designation shapes (matched case-insensitively on normalized text).
CATALOG_PATTERNS: dict[str, re.Pattern] = {
    name: re.compile(rf"^(?:{pattern})$", re.IGNORECASE)
    for name, pattern in {
        "messier": r"M\s?\d{1,3}",
        "ngc-ic-ugc-pgc": r"(?:NGC|IC|UGC|PGC)\s?\d{1,7}[A-Z]?",
        "hip-hd-sao": r"(?:HIP|HD|SAO)\s?\d{1,7}",
        "sharpless": r"SH\s?2\s?-\s?\d{1,3}",
        "barnard": r"BARNARD\s?\d{1,3}",
        "planetary-nebula": r"PK\s?\d{1,3}\s?[+-]\s?\d{1,2}(?:\.\d+)?",
        "lynds-bright": r"LBN\s?\d{1,4}",
        "two-word-name": r"[A-Z]+ [A-Z]+",
        "number-name": r"\d{1,4} [A-Z]{2,}",
        "letter-name": r"[A-Z] [A-Z]{2,}",
    }.items()
}

# Any one of these makes text look like coordinates.
_COORDINATE_HINTS = [
    re.compile(r"\d\s*[h:]\s*\d", re.IGNORECASE),        # hour marker + digits
    re.compile(r"\d\s*d\s*\d", re.IGNORECASE),           # degree marker + digits
    re.compile(r"[+-]\s*\d"),                            # signed number
    re.compile(r"\d\s*[m':]\s*\d", re.IGNORECASE),       # minute marker + digits
    re.compile(r"\d\s*[s\"]", re.IGNORECASE),            # seconds marker
    re.compile(r"\d+(?:\.\d+)?\s*[,;]\s*[+-]?\d+(?:\.\d+)?"),
    re.compile(r"\b(?:RA|DECL?)\b", re.IGNORECASE),      # explicit label
]


def is_canonical(text: str, output_format: OutputFormat | str) -> bool:
    """True if *text* is already in the canonical form of *output_format*."""
    pattern = _CANONICAL_PATTERNS.get(OutputFormat(output_format))
    return bool(pattern and pattern.match(text))


def match_catalog(text: str) -> str | None:
    """Return the name of the catalog shape *text* matches, or None."""
    for name, pattern in CATALOG_PATTERNS.items():
        if pattern.match(text):
            return name
    return None


def is_object_name(text: str) -> bool:
    return match_catalog(text) is not None


def looks_like_coordinates(text: str) -> bool:
    """Heuristic test for coordinate-shaped text.

    Catalog designations are excluded first, so ``"NGC 1234"`` and
    ``"M 42"`` never count as coordinates even though they hold digits.
    """
    if is_object_name(text):
        return False
    return any(hint.search(text) for hint in _COORDINATE_HINTS)
