from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple
from wordgraph.graph import Graph

FOUND, NOT_FOUND = "found", "not_found"

@dataclass(frozen=True)
class BridgeWords:
    """Outcome of a bridge-word query.

    ``words`` is ``None`` when one of the endpoints is unknown (``missing``
    then lists it); an empty set means both words exist but nothing links them.
    """
    word1: str
    word2: str
    words: Optional[FrozenSet[str]] = None
    missing: Tuple[str, ...] = ()

    @property
    def status(self) -> str: return NOT_FOUND if self.words is None else FOUND
    @property
    def found(self) -> bool: return self.words is not None

    def sorted(self) -> List[str]:
        return sorted(self.words or ())

    def message(self) -> str:
        if self.words is None:
            return "No " + " and ".join(f'"{w}"' for w in self.missing) + " in the graph!"
        if not self.words:
            return f'No bridge words from "{self.word1}" to "{self.word2}"!'
        verb = "is" if len(self.words) == 1 else "are"
        return f'The bridge words from "{self.word1}" to "{self.word2}" {verb}: "{", ".join(self.sorted())}"'

def query_bridge_words(graph: Graph, word1: str, word2: str) -> BridgeWords:
    """Words ``c`` with edges ``word1 -> c`` and ``c -> word2``."""
    missing = tuple(w for w in (word1, word2) if w not in graph)
    if missing:
        return BridgeWords(word1, word2, None, missing)
    return BridgeWords(word1, word2, frozenset(graph.successors(word1).keys() & graph.predecessors(word2)))
