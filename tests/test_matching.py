# tests/test_matching.py

from __future__ import annotations

import pytest

from name_clean import InvalidArgumentError, matches
from name_clean.names.matching import escape_regex


def test_short_strings_use_exact_letters() -> None:
    assert matches("Bob", "bob")
    assert matches("Bo-b", "BOB.")
    assert not matches("Jonathan", "Jon")
    assert not matches("Ki", "Kim")


def test_long_strings_match_by_containment_either_way() -> None:
    assert matches("Hernandez", "de la Rose Hernandez")
    assert matches("de la Rose Hernandez", "HERNANDEZ")
    assert matches("Jonathan", "jonathan")


def test_long_strings_without_containment() -> None:
    assert not matches("Jonathan", "Johnny Smith")
    # Containment is literal; punctuation is not stripped on this path.
    assert not matches("O'Connor", "OConnor")


def test_regex_metacharacters_are_literal() -> None:
    assert matches("(Bob) Smith+", "Mr (bob) smith+ jr")
    assert not matches("B.b Smith", "Bob Smith")
    assert not matches("[Bob]*", "Bobby")


def test_escape_regex() -> None:
    assert escape_regex("(Bob)") == "\\(Bob\\)"


def test_non_strings_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        matches(None, "Bob")
    with pytest.raises(InvalidArgumentError):
        matches("Bob", 5)
