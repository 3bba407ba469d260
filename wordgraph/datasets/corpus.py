"""
wordgraph.datasets.corpus — small corpora with known graph structure.
"""
from __future__ import annotations
import numpy as np
import pandas as pd
from typing import Optional


def sample_text() -> str:
    """
    The two-sentence corpus used throughout the docs.

    Its graph has ``the -> scientist`` and ``the -> dataset`` at weight 2,
    every other edge at weight 1, and ``scientist`` as the only bridge from
    ``the`` to ``studies``.

    Example
    -------
    >>> from wordgraph import WordGraph
    >>> from wordgraph.datasets import sample_text
    >>> WordGraph.from_text(sample_text()).bridge_words("the", "studies").sorted()
    ['scientist']
    """
    return "The scientist studies the dataset. The scientist analyzes the dataset."


def generate_sentence_corpus(n_sentences: int = 20, seed: Optional[int] = None) -> pd.DataFrame:
    """
    Generate a token stream of random subject-verb-object sentences.

    Sentences are drawn from three small word pools, so every verb bridges
    some subject to ``the`` and the graph stays strongly connected through
    ``the``.

    Columns: ``sentence_id``, ``pos``, ``token``

    Returns
    -------
    pd.DataFrame
        ``4 * n_sentences`` rows in stream order.
    """
    rng = np.random.default_rng(seed)
    subjects = ["scientist", "engineer", "analyst", "student"]
    verbs = ["studies", "analyzes", "reviews", "explains"]
    objects = ["dataset", "report", "model", "paper"]

    rows = []
    for s in range(n_sentences):
        sentence = [
            subjects[rng.integers(len(subjects))],
            verbs[rng.integers(len(verbs))],
            "the",
            objects[rng.integers(len(objects))],
        ]
        base = len(rows)
        rows.extend((f"S{s + 1}", base + i, tok) for i, tok in enumerate(sentence))
    return pd.DataFrame(rows, columns=["sentence_id", "pos", "token"])
