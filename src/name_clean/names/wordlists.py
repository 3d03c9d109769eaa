"""
Curated honorific (prefix) and credential/generational (suffix) tables.

Entries are uppercase letters only; tokens are compared "loosely", i.e. after
dropping every non-letter and uppercasing, so "Dr.", "DR" and "dr.." all hit
the "DR" entry.
"""

from __future__ import annotations

import re
from typing import AbstractSet

_NON_ALPHA_RE = re.compile(r"[^A-Za-z]")


# ==========================================================
# PREFIXES (titles, honorifics, military/ecclesiastical ranks)
# ==========================================================

PREFIXES: frozenset[str] = frozenset({
    "AIRMAN", "ATTORNEY", "ATTY", "BG", "BR",
    "BRIG", "BRIGADIER", "CADET", "CAPT", "CAPTAIN",
    "CMDR", "COL", "COLONEL", "COMMANDER", "COMMISSIONER",
    "CORPORAL", "CPL", "CPT", "DEP", "DEPUTY",
    "DOCTOR", "DR", "FATHER", "FR", "GEN",
    "GENERAL", "GOV", "GOVERNOR", "HON", "HONORABLE",
    "JDGE", "JUDGE", "LIEUTENANT", "LT", "LTCOL",
    "LTGEN", "MAJ", "MAJGEN", "MAJOR", "MASTER",
    "MISS", "MISTER", "MONSIGNOR", "MR", "MRMRS",
    "MRS", "MS", "MSGR", "PASTOR", "PFC",
    "PRES", "PRESIDENT", "PRIVATE", "PROF", "PROFESSOR",
    "PVT", "RABBI", "REP", "REPRESENTATIVE", "REV",
    "REVEREND", "SEN", "SENATOR", "SGT", "SHERIFF",
    "SIR", "SISTER", "SM", "SN", "SRA",
    "SSGT", "SUPERINTENDENT", "SUPT",
})


# ==========================================================
# SUFFIXES (credentials, generational markers)
# ==========================================================

SUFFIXES: frozenset[str] = frozenset({
    "APR", "BC", "BSN", "CCSP", "CDT",
    "CME", "CNP", "CPA", "DC", "DDS",
    "DMA", "DMD", "DMIN", "DMUS", "DNP",
    "DO", "DPM", "DVM", "EDD", "EI",
    "EIT", "ESQ", "FNP", "GVN", "I",
    "II", "III", "IV", "JD", "JR",
    "LCSW", "LLS", "LP", "LPC", "LPN",
    "LUTCF", "LVN", "MA", "MBA", "MD",
    "MED", "OC", "OD", "PA", "PE",
    "PHARMD", "PHD", "PSYD", "RA", "RD",
    "RDH", "RLA", "RLS", "RN", "RNBC",
    "SE", "SJ", "SR", "V", "VI",
    "VII", "VIII", "VP",
})


# ==========================================================
# HELPERS
# ==========================================================

def remove_non_alpha(s: str) -> str:
    """"M.D." -> "MD"."""
    return _NON_ALPHA_RE.sub("", s)


def loose_key(word: str) -> str:
    """Letters only, uppercased: the form word-list entries are stored in."""
    return remove_non_alpha(word).upper()


def contains_loose(collection: AbstractSet[str], word: str) -> bool:
    return loose_key(word) in collection


def is_prefix(word: str) -> bool:
    return contains_loose(PREFIXES, word)


def is_suffix(word: str) -> bool:
    return contains_loose(SUFFIXES, word)
