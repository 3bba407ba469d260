from __future__ import annotations
import logging
from typing import List, Optional
import numpy as np
from wordgraph.analysis.bridges import query_bridge_words
from wordgraph.core.tokenizer import OTHER, WORD, iter_runs
from wordgraph.graph import Graph

logger = logging.getLogger(__name__)

def generate_new_text(
    graph: Graph,
    text: str,
    rng: Optional[np.random.Generator] = None,
    reset_on_punctuation: bool = False,
) -> str:
    """
    Insert a bridge word between each pair of consecutive words that has one.

    Whitespace, punctuation and the casing of the input words are kept as
    they are; the only change is ``"<bridge> "`` spliced in front of a word
    whose predecessor word links to it through the graph. When several
    bridges exist one is drawn uniformly from the sorted candidates using
    ``rng``.

    With ``reset_on_punctuation`` a punctuation run breaks the pairing, so
    ``"cat. dog"`` is never bridged.
    """
    if graph.is_empty or not text or not text.strip():
        return text
    if rng is None:
        rng = np.random.default_rng()

    out: List[str] = []
    prev: Optional[str] = None
    inserted = 0
    for kind, run in iter_runs(text):
        if kind == WORD:
            current = run.lower()
            if prev is not None and prev in graph and current in graph:
                candidates = query_bridge_words(graph, prev, current).sorted()
                if candidates:
                    out.append(candidates[int(rng.integers(len(candidates)))])
                    out.append(" ")
                    inserted += 1
            prev = current
        elif kind == OTHER and reset_on_punctuation:
            prev = None
        out.append(run)

    logger.debug("Inserted %d bridge words", inserted)
    return "".join(out)
