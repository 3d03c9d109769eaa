# tests/test_name_parse.py

from __future__ import annotations

import pytest

from name_clean import InvalidArgumentError, name_base, name_parse


def check(name, prefix, base, suffix) -> None:
    got = name_parse(name)
    assert got.original == name
    assert got.prefix == prefix
    assert got.base == base
    assert got.suffix == suffix


def test_multiple_prefixes_and_suffixes() -> None:
    check("REV Dr. Matthew Mark Luke John jr. M.D.", "REV Dr.", "Matthew Mark Luke John", "jr. M.D.")


def test_suffix_attached_by_hyphen() -> None:
    check("Dr Bob Kelso-M.D.", "Dr", "Bob Kelso", "M.D.")


def test_suffix_attached_by_comma() -> None:
    check("Doctor Perry Cox,PhD", "Doctor", "Perry Cox", "PhD")


def test_suffixes_only_at_the_end() -> None:
    check("J.D. Turk RN", "", "J.D. Turk", "RN")


def test_trailing_non_letters_removed() -> None:
    check("J.D. Turk RN .", "", "J.D. Turk", "RN")


def test_lone_prefix_is_base() -> None:
    check("Dr.", "", "Dr.", "")


def test_lone_suffix_is_base() -> None:
    check("J.D.", "", "J.D.", "")


def test_words_resembling_regex_are_not_confused() -> None:
    check("J.D. JaDe", "", "J.D. JaDe", "")


def test_leading_garbage_and_spaced_hyphen_suffix() -> None:
    check("-Dr Professor Farnsworth - Ph.D.", "Dr Professor", "Farnsworth", "Ph.D.")


def test_maiden_name_stays_in_base() -> None:
    check("Jane Smith - Carpenter", "", "Jane Smith-Carpenter", "")
    check("Jane Smith-Carpenter", "", "Jane Smith-Carpenter", "")


def test_generational_suffix_by_hyphen() -> None:
    check("John Smith-II", "", "John Smith", "II")


def test_false_positive_suffix_in_middle_is_demoted() -> None:
    # "Ma" is a suffix entry but is followed by another base word
    check("Bob Ma Kelso MD", "", "Bob Ma Kelso", "MD")


def test_demoted_suffixes_keep_earlier_base_words() -> None:
    check("Anna Jr Sr Lee", "", "Anna Jr Sr Lee", "")


def test_all_titles_last_becomes_base() -> None:
    check("Mr Dr", "Mr", "Dr", "")
    check("Rev. Father Sister", "Rev. Father", "Sister", "")


def test_hyphenated_prefixes_mid_name_are_kept() -> None:
    check("Bob Dr-Kelso-II", "", "Bob Dr Kelso", "II")


def test_trailing_comma_does_not_create_empty_token() -> None:
    check("Bob Kelso,", "", "Bob Kelso", "")
    check("Kelso, Bob, Jr.", "", "Kelso Bob", "Jr.")


def test_none_and_empty() -> None:
    check(None, "", "", "")
    check("", "", "", "")


def test_whitespace_only() -> None:
    check("   ", "", "", "")


def test_rejects_non_string() -> None:
    with pytest.raises(InvalidArgumentError):
        name_parse(42)
    with pytest.raises(TypeError):
        name_parse(["Bob"])


def test_name_base_matches_parse() -> None:
    for raw in (
        "REV Dr. Matthew Mark Luke John jr. M.D.",
        "Dr Bob Kelso-M.D.",
        "Jane Smith - Carpenter",
        "Dr.",
    ):
        assert name_base(raw) == name_parse(raw).base


def test_name_base_none_for_empty() -> None:
    assert name_base(None) is None
    assert name_base("") is None
    with pytest.raises(InvalidArgumentError):
        name_base(3.5)


def test_parts_reconstruct_the_tokens() -> None:
    raw = "  Hon. Gen. Ulysses  S. Grant, Esq. III "
    got = name_parse(raw)
    joined = " ".join(p for p in (got.prefix, got.base, got.suffix) if p)
    assert joined == "Hon. Gen. Ulysses S. Grant Esq. III"
    assert got.prefix == "Hon. Gen."
    assert got.suffix == "Esq. III"


def test_base_is_stable_when_reparsed() -> None:
    for raw in (
        "REV Dr. Matthew Mark Luke John jr. M.D.",
        "Doctor Perry Cox,PhD",
        "Jane Smith - Carpenter",
    ):
        base = name_parse(raw).base
        again = name_parse(base)
        assert again.base == base
        assert again.prefix == ""
        assert again.suffix == ""


def test_to_dict() -> None:
    assert name_parse("Dr Bob Kelso-M.D.").to_dict() == {
        "original": "Dr Bob Kelso-M.D.",
        "prefix": "Dr",
        "base": "Bob Kelso",
        "suffix": "M.D.",
    }


def test_separator_only_input_still_has_a_base() -> None:
    check(",", "", ",", "")
    check(" , ", "", ",", "")
