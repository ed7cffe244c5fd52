"""
coordsanitizer.security — Reject obviously hostile input.

Coordinate strings often come straight from web forms, so text that looks
like markup or script injection is turned away before parsing.  Tab, newline
and carriage return are the only control characters allowed through.  This is a
denylist: callers that render the output into HTML must still escape it.
"""

from __future__ import annotations
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

#: Patterns that mark input as hostile, with a short label used in logs.
THREAT_PATTERNS: dict[str, re.Pattern] = {
    "markup": re.compile(r"<[^>]*>"),
    "script-uri": re.compile(r"\b(?:java|vb)script\s*:", re.IGNORECASE),
    "event-handler": re.compile(r"\bon[a-z]+\s*=", re.IGNORECASE),
    "control-char": re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]"),
}

MALICIOUS_INPUT_ERROR = "Input contains potentially malicious content"


def find_threat(text: str) -> Optional[str]:
    """Return the label of the first threat pattern found in *text*, or None."""
    for label, pattern in THREAT_PATTERNS.items():
        if pattern.search(text):
            return label
    return None


def is_safe(text: str) -> bool:
    """True when *text* matches none of :data:`THREAT_PATTERNS`."""
    threat = find_threat(text)
    if threat is not None:
        logger.debug("rejected input: %s pattern matched", threat)
        return False
    return True
