"""
Text field cleaners.

All cleaners pass falsy input through (``None``) or return an empty string
rather than raising, so callers can chain them over partially filled records.
"""

from __future__ import annotations

import re
from typing import Optional, TypeVar

T = TypeVar("T")

_WS_RE = re.compile(r"\s+")

# " . -Dr." -> "Dr."
_LEADING_NON_ALPHA_RE = re.compile(r"^[^A-Za-z]*([A-Za-z].*)")
# "M.D . " -> "M.D"
_TRAILING_NON_ALPHA_RE = re.compile(r"([A-Za-z].*?)\s[^A-Za-z]*$")

# Smart punctuation commonly pasted from word processors.
_UTF8_TO_ASCII = str.maketrans({
    "\u2018": "'",    # left single quote
    "\u2019": "'",    # right single quote
    "\u201a": "'",    # single low-9 quote
    "\u201b": "'",    # single high-reversed-9 quote
    "\u201c": '"',    # left double quote
    "\u201d": '"',    # right double quote
    "\u201e": '"',    # double low-9 quote
    "\u201f": '"',    # double high-reversed-9 quote
    "\u2026": "...",  # ellipsis
    "\u2013": "-",    # en dash
    "\u2014": "-",    # em dash
    "\u02c6": "^",    # modifier circumflex
    "\u202f": " ",    # narrow no-break space
})


def trim(s: Optional[str]) -> str:
    """Strip both ends and collapse internal whitespace runs to one space."""
    if s is None:
        return ""
    return _WS_RE.sub(" ", str(s)).strip()


def licet(s: Optional[str]) -> str:
    return trim(s)


def license(s: Optional[str]) -> str:
    return trim(s)


def email(s: Optional[str]) -> Optional[str]:
    if not s:
        return None
    return s.strip()


def date(d: T) -> T:
    # Placeholder for future validation.
    return d


def trim_non_alpha_from_sides(s: str) -> str:
    """
    Keep everything from the first letter on, then drop a trailing
    whitespace-separated run of non-letters. Internal punctuation stays.
    """
    s = _LEADING_NON_ALPHA_RE.sub(r"\1", s, count=1)
    return _TRAILING_NON_ALPHA_RE.sub(r"\1", s, count=1)


def name(s: Optional[str]) -> Optional[str]:
    if not s:
        return None
    return trim_non_alpha_from_sides(trim(s))


def utf8_to_ascii(s: str) -> str:
    return s.translate(_UTF8_TO_ASCII)
