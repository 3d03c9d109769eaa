"""
name_clean

Cleaning helpers for registrant records, centred on splitting free-text
personal names into prefix / base / suffix for identity matching.

    >>> from name_clean import name_parse
    >>> name_parse("Dr Bob Kelso-M.D.").base
    'Bob Kelso'
"""

from name_clean.core.exceptions import ConfigError, InvalidArgumentError, NameCleanError
from name_clean.dates.compare import is_same_date
from name_clean.names.matching import matches
from name_clean.names.parser import ParsedName, name_base, name_parse
from name_clean.normalization.phone import phone
from name_clean.normalization.text import (
    date,
    email,
    licet,
    license,
    name,
    trim,
    utf8_to_ascii,
)

__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "NameCleanError",
    "ParsedName",
    "date",
    "email",
    "is_same_date",
    "licet",
    "license",
    "matches",
    "name",
    "name_base",
    "name_parse",
    "phone",
    "trim",
    "utf8_to_ascii",
]
