"""
name_clean.names package

- wordlists: curated prefix/suffix tables and loose matching
- parser:    prefix/base/suffix parsing of free-text names
- matching:  fuzzy equality/containment of two names
"""

from name_clean.names.matching import matches
from name_clean.names.parser import ParsedName, name_base, name_parse

__all__ = [
    "ParsedName",
    "matches",
    "name_base",
    "name_parse",
]
