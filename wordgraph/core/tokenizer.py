"""
wordgraph.core.tokenizer — text normalization into word tokens.

Two views of the same text are needed: the corpus view (lowercase alphabetic
tokens only, used to build the graph) and the rewrite view (every run kept,
so punctuation and spacing survive a round trip).
"""
from __future__ import annotations
import re
from typing import Iterator, List, Tuple

WORD, SPACE, OTHER = "word", "space", "other"

_NON_LETTERS = re.compile(r"[^a-zA-Z]+")
_RUNS = re.compile(r"(?P<word>[a-zA-Z]+)|(?P<space>\s+)|(?P<other>[^a-zA-Z\s]+)")


def tokenize(text: str) -> List[str]:
    """Return the lowercase alphabetic tokens of ``text``.

    Every run of non-letter characters acts as a single separator.

    >>> tokenize("The scientist, studies the data-set!")
    ['the', 'scientist', 'studies', 'the', 'data', 'set']
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    return _NON_LETTERS.sub(" ", text).lower().split()


def iter_runs(text: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(kind, run)`` for each maximal word, whitespace or other run."""
    for m in _RUNS.finditer(text):
        yield m.lastgroup, m.group()
