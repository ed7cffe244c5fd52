"""
coordsanitizer.normalize — Canonicalize raw coordinate text.

Users paste coordinates from catalogs, papers and web pages, so the same
position arrives with curly quotes, prime marks, degree signs, typographic
dashes and arbitrary spacing.  :func:`normalize_input` folds all of that into
a small ASCII alphabet before any pattern matching happens::

    >>> normalize_input("12h 34m 56s · +12° 34′ 56″")
    '12h 34m 56s,+12d 34\\' 56"'

After normalization downstream code only sees digits, letters, spaces and
``h m s d ' " : , ; + - .``.
"""

from __future__ import annotations
import re

# (pattern, replacement) pairs applied in order.
_GLYPH_FOLDS = [
    # Quote-like glyphs: curly double quotes and double prime → '"'
    (re.compile("[“”„‟″〃]"), '"'),
    # Single curly quotes and prime → "'"
    (re.compile("[‘’‚‛′´]"), "'"),
    # Degree sign and ordinal indicators → 'd'
    (re.compile("[°ºª˚]"), "d"),
    # En dash, em dash, minus sign → '-'
    (re.compile("[‒–—―−]"), "-"),
    # Middle dot and bullets → ','
    (re.compile("[·•‧∙]"), ","),
]

_LIST_SEPARATOR = re.compile(r"\s*([,;])\s*")
_COLON = re.compile(r"\s*:\s*")
_WHITESPACE = re.compile(r"\s+")


def fold_glyphs(text: str) -> str:
    """Replace typographic symbols with their ASCII stand-ins."""
    for pattern, replacement in _GLYPH_FOLDS:
        text = pattern.sub(replacement, text)
    return text


def collapse_whitespace(text: str) -> str:
    """Tighten spacing around separators and collapse remaining runs."""
    text = _LIST_SEPARATOR.sub(r"\1", text)
    text = _COLON.sub(":", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def normalize_input(text: str) -> str:
    """Return the canonical form of *text*.

    Parameters
    ----------
    text : str
        Raw user input.

    Returns
    -------
    str
        Text with glyphs folded, spacing collapsed and ends trimmed.  An
        all-whitespace input normalizes to ``""``.
    """
    return collapse_whitespace(fold_glyphs(text))
