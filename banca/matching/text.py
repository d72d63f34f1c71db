# Banca Matching - Text Normalization
# ===================================
"""
Text normalization and tokenization for assignee matching.

Assignee cells are typed by hand in spreadsheets, so the same person shows
up as "José Souza", "JOSE SOUZA " or "souza, josé". Everything compared by
the matcher first goes through normalize_text():

    "  José   da SILVA "  ->  "jose da silva"

and tokenize() breaks the normalized text into comparison tokens, dropping
Portuguese connector words:

    "Maria da Silva"  ->  ["maria", "silva"]
"""

import re
import unicodedata
from typing import List

# Connector words ignored when comparing names
STOP_WORDS = frozenset({"da", "de", "do", "das", "dos", "e", "d", "di", "du"})

# Separators between several people written in a single cell
VALUE_SPLITTER = re.compile(r"[,;|/\n]+")

# Separators between the words of a single entry
TOKEN_SPLITTER = re.compile(r"[\s\-_/]+")

_LIST_PUNCTUATION = re.compile(r"[|,;/]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(value: str) -> str:
    """
    Canonical form used for every comparison.

    Decomposes to NFD, strips combining marks, collapses whitespace,
    trims and lower-cases. Never raises.
    """
    if not value:
        return ""
    # Lower-case before decomposing: some lower-case forms (U+0130) carry
    # a combining mark that must be stripped too.
    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE.sub(" ", stripped).strip()


def tokenize(value: str) -> List[str]:
    """
    Split text into normalized tokens, without stop words.

    Order of first occurrence is kept and duplicates are not removed;
    callers only test membership.
    """
    text = _LIST_PUNCTUATION.sub(" ", normalize_text(value))
    tokens = []
    for fragment in TOKEN_SPLITTER.split(text):
        fragment = fragment.strip()
        if fragment and fragment not in STOP_WORDS:
            tokens.append(fragment)
    return tokens


def split_entries(value: str) -> List[str]:
    """Split a multi-person cell ("Ana; Bruno/Carla") into raw entries."""
    return VALUE_SPLITTER.split(value)
