# ---------------------------------------------------------------------------
# Tests configuration
# ---------------------------------------------------------------------------

import pytest
import pandas as pd

from wordgraph.core.connection import DuckDBConnection
from wordgraph.graph import Graph


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def conn():
    """In-memory DuckDB connection for each test."""
    db = DuckDBConnection()  # :memory:
    yield db
    db.close()


@pytest.fixture
def science_tokens():
    """Token stream with known edge weights.

    the -> scientist 2, scientist -> studies 1, studies -> the 1,
    the -> dataset 2, scientist -> analyzes 1, analyzes -> the 1, dataset -> the 1
    """
    return ["the", "scientist", "studies", "the", "dataset",
            "the", "scientist", "analyzes", "the", "dataset"]


@pytest.fixture
def science_text():
    return "The scientist studies the dataset. The scientist analyzes the dataset."


@pytest.fixture
def science_graph(science_tokens):
    from wordgraph.core.builder import build_graph
    return build_graph(science_tokens)


@pytest.fixture
def word_graph():
    """Two routes word1 -> word4 (weights 1+2 and 3+1) plus an isolated node."""
    return Graph({
        "word1": {"word2": 1, "word3": 3},
        "word2": {"word4": 2},
        "word3": {"word4": 1},
        "word4": {},
        "isolated": {},
    })


@pytest.fixture
def tokens_df(science_tokens):
    """The science stream as a shuffled frame with explicit positions."""
    df = pd.DataFrame({"pos": range(len(science_tokens)), "word": science_tokens})
    return df.sample(frac=1.0, random_state=7).reset_index(drop=True)


@pytest.fixture
def engine(science_text):
    """WordGraph loaded with the science corpus and no walk pacing."""
    from wordgraph.api import WordGraph
    wg = WordGraph(seed=0, walk_delay=0).load(science_text)
    yield wg
    wg.close()
