"""
parser.py
Splits a free-text personal name into prefix / base / suffix.

    "REV Dr. Matthew Mark Luke John jr. M.D."
        prefix: "REV Dr."
        base:   "Matthew Mark Luke John"
        suffix: "jr. M.D."

Stages:
- clean():      trim whitespace, drop non-letters hanging off either end,
                join spaced hyphens ("Smith - Carpenter" -> "Smith-Carpenter")
- split():      break on whitespace/commas; hyphens stay inside tokens
- categorize(): positional classification against the word lists. Hyphenated
                tokens are re-categorized part by part so that "Kelso-M.D."
                yields a suffix while "Smith-Carpenter" stays one base word.

Every token of the cleaned name lands in exactly one of the three parts, in
its original order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from name_clean.core.exceptions import InvalidArgumentError
from name_clean.logging import get_logger
from name_clean.names.wordlists import is_prefix, is_suffix
from name_clean.normalization.text import trim, trim_non_alpha_from_sides

log = get_logger(__name__)

_SPACED_HYPHEN_RE = re.compile(r"\s+-\s+")
_SPLIT_RE = re.compile(r"[\s,]+")


# -----------------------------------------------------------------------------
# Data models
# -----------------------------------------------------------------------------

@dataclass(slots=True)
class ParsedName:
    original: Optional[str] = None
    prefix: str = ""
    base: str = ""
    suffix: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "prefix": self.prefix,
            "base": self.base,
            "suffix": self.suffix,
        }


@dataclass(slots=True)
class CategorizationResult:
    prefixes: List[str] = field(default_factory=list)
    bases: List[str] = field(default_factory=list)
    suffixes: List[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Stages
# -----------------------------------------------------------------------------

def clean(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return raw
    cleaned = trim_non_alpha_from_sides(trim(raw))
    return _SPACED_HYPHEN_RE.sub("-", cleaned)


def split(cleaned: str) -> List[str]:
    """"Dr. Bob Kelso,Jr.-M.D." -> ["Dr.", "Bob", "Kelso", "Jr.-M.D."]"""
    tokens = [t for t in _SPLIT_RE.split(cleaned) if t]
    # Nothing but separators (","): keep the input whole as the one token.
    if not tokens and cleaned:
        return [cleaned]
    return tokens


def _split_hyphens(token: str) -> List[str]:
    return [t for t in token.split("-") if t]


def categorize(tokens: Sequence[str]) -> CategorizationResult:
    if not tokens:
        return CategorizationResult()

    # A lone word is always the base, even "Dr." or "J.D."
    if len(tokens) == 1:
        return CategorizationResult(bases=[tokens[0]])

    prefixes: List[str] = []
    bases: List[str] = []
    suffixes: List[str] = []

    for token in tokens:
        if not bases and is_prefix(token):
            prefixes.append(token)

        elif bases and is_suffix(token):
            suffixes.append(token)

        else:
            # Suffixes can only follow the last base word; anything
            # collected before another base word was a false positive.
            if suffixes:
                bases.extend(suffixes)
                suffixes = []

            inner = categorize(_split_hyphens(token))
            if not inner.suffixes:
                # Maiden/compound name: keep the hyphenated word whole.
                bases.append(token)
            else:
                # "Smith-II": base "Smith", suffix "II". Inner prefixes sit
                # mid-name here, so they are base words.
                bases.extend(inner.prefixes)
                bases.extend(inner.bases)
                suffixes.extend(inner.suffixes)

    # Nothing but titles: the last one has to be the name.
    if not bases and prefixes:
        bases.append(prefixes.pop())

    return CategorizationResult(prefixes=prefixes, bases=bases, suffixes=suffixes)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def _check_name_arg(name: Any) -> None:
    if name is not None and not isinstance(name, str):
        raise InvalidArgumentError(
            f"Param `name` must be string or None, got {type(name).__name__}"
        )


def name_parse(name: Optional[str]) -> ParsedName:
    """
    Parse a raw name into prefix/base/suffix.

    Never raises for ``None`` or ``""``; those give empty parts with
    ``original`` set to the input.
    """
    _check_name_arg(name)

    parsed = ParsedName(original=name)
    if not name:
        return parsed

    result = categorize(split(clean(name)))

    parsed.prefix = " ".join(result.prefixes)
    parsed.base = " ".join(result.bases)
    parsed.suffix = " ".join(result.suffixes)

    log.debug(
        "Parsed name %r: prefix=%r base=%r suffix=%r",
        name,
        parsed.prefix,
        parsed.base,
        parsed.suffix,
    )
    return parsed


def name_base(name: Optional[str]) -> Optional[str]:
    _check_name_arg(name)

    if not name:
        return None
    return name_parse(name).base
