"""
Fuzzy equality of two names (e.g. registrant name vs. account name).

Known limitation: the shorter a name, the more other names contain it, so
"Ki" or "O" would match a great many different people. Strings shorter than
MIN_CONTAINMENT_LENGTH are therefore compared letter-for-letter instead of by
containment. Longer strings still match in either direction without any
length normalization, e.g. "HERNANDEZ" matches "DE LA ROSE HERNANDEZ".
"""

from __future__ import annotations

import re
from typing import Any

from name_clean.core.exceptions import InvalidArgumentError
from name_clean.logging import get_logger
from name_clean.names.wordlists import loose_key

log = get_logger(__name__)

MIN_CONTAINMENT_LENGTH = 5


def _check_str(value: Any, param: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Param `{param}` must be string.")


def escape_regex(s: str) -> str:
    """"(Bob)" -> "\\(Bob\\)"."""
    return re.escape(s)


def _equals(str1: str, str2: str) -> bool:
    return loose_key(str1) == loose_key(str2)


def matches(str1: str, str2: str) -> bool:
    _check_str(str1, "str1")
    _check_str(str2, "str2")

    str1 = str1.upper()
    str2 = str2.upper()

    if len(str1) < MIN_CONTAINMENT_LENGTH or len(str2) < MIN_CONTAINMENT_LENGTH:
        return _equals(str1, str2)

    found = re.search(escape_regex(str1), str2) is not None
    if not found:
        found = re.search(escape_regex(str2), str1) is not None

    log.debug("Name match %r ~ %r: %s", str1, str2, found)
    return found
