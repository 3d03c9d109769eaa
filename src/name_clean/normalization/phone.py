"""
Phone number cleaning.

Digits are extracted from the raw value and formatted with ``phonenumbers``
into E.164 (``+16502530000``). The region used for numbers without a country
code comes from ``phone.default_region`` in the config.
"""

from __future__ import annotations

import re
from typing import Optional

import phonenumbers

from name_clean.config import get_config
from name_clean.logging import get_logger

log = get_logger(__name__)

_NON_DIGIT_RE = re.compile(r"\D")

DEFAULT_REGION = "US"


def default_region() -> str:
    return str(get_config().phone.get("default_region") or DEFAULT_REGION).upper()


def phone(s: Optional[str], region: Optional[str] = None) -> Optional[str]:
    """
    "(650) 253-0000" -> "+16502530000"

    Returns None for falsy input, input without digits, or digits that
    phonenumbers cannot parse or does not recognise as a valid number.
    """
    if not s:
        return None

    digits = _NON_DIGIT_RE.sub("", str(s))
    if not digits:
        return None

    try:
        parsed = phonenumbers.parse(digits, region or default_region())
    except phonenumbers.NumberParseException as exc:
        log.debug("Unparseable phone %r: %s", s, exc)
        return None

    if not phonenumbers.is_valid_number(parsed):
        log.debug("Invalid phone %r", s)
        return None

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
