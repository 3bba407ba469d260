from __future__ import annotations
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
import numpy as np
import pyarrow as pa
from wordgraph.analysis.bridges import BridgeWords, query_bridge_words
from wordgraph.analysis.pagerank import DAMPING_FACTOR, PAGERANK_ITERATIONS, page_rank, page_ranks, rank_table, validate_params
from wordgraph.analysis.paths import PathResult, shortest_path, shortest_paths_from
from wordgraph.analysis.rewrite import generate_new_text
from wordgraph.analysis.walk import WALK_DELAY, WalkHandle, random_walk
from wordgraph.core.builder import GraphBuilder
from wordgraph.core.connection import DuckDBConnection
from wordgraph.core.ingestion import load_text_file, load_tokens
from wordgraph.core.tokenizer import tokenize
from wordgraph.graph import Graph
from wordgraph import render

logger = logging.getLogger(__name__)

class WordGraph:
    """Engine owning one immutable word graph and the queries over it."""

    DAMPING_FACTOR = DAMPING_FACTOR
    PAGERANK_ITERATIONS = PAGERANK_ITERATIONS
    WALK_DELAY = WALK_DELAY

    def __init__(
        self,
        database: Union[str, Path] = ":memory:",
        memory_limit: Optional[str] = None,
        threads: Optional[int] = None,
        damping: float = DAMPING_FACTOR,
        iterations: int = PAGERANK_ITERATIONS,
        walk_delay: float = WALK_DELAY,
        seed: Optional[int] = None,
    ) -> None:
        validate_params(damping, iterations)
        if walk_delay < 0: raise ValueError("walk_delay must be non-negative")
        self.conn = DuckDBConnection(database=database, memory_limit=memory_limit, threads=threads)
        self.table_name = "tokens"
        self.damping, self.iterations, self.walk_delay = damping, iterations, walk_delay
        self.rng = np.random.default_rng(seed)
        self._graph = Graph()

    @classmethod
    def from_text(cls, text: str, **kwargs) -> WordGraph:
        return cls(**kwargs).load(text)

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8", **kwargs) -> WordGraph:
        return cls(**kwargs).load_file(path, encoding=encoding)

    @property
    def graph(self) -> Graph: return self._graph
    @property
    def is_empty(self) -> bool: return self._graph.is_empty

    def load(self, data: Any, **kwargs) -> WordGraph:
        """Replace the graph with one built from raw text, a token list or a token dataframe."""
        tokens = tokenize(data) if isinstance(data, str) else data
        load_tokens(self.conn, tokens, table_name=self.table_name, **kwargs)
        self._graph = GraphBuilder(self.conn, table_name=self.table_name).build()
        return self

    def load_file(self, path: Union[str, Path], encoding: str = "utf-8") -> WordGraph:
        return self.load(load_text_file(path, encoding=encoding))

    def bridge_words(self, word1: str, word2: str) -> BridgeWords:
        return query_bridge_words(self._graph, word1.lower(), word2.lower())

    def generate_new_text(self, text: str, rng: Optional[np.random.Generator] = None, reset_on_punctuation: bool = False) -> str:
        return generate_new_text(self._graph, text, rng=rng or self.rng, reset_on_punctuation=reset_on_punctuation)

    def shortest_path(self, start: str, end: str) -> PathResult:
        return shortest_path(self._graph, start.lower(), end.lower())

    def shortest_paths_from(self, start: str) -> Dict[str, PathResult]:
        return shortest_paths_from(self._graph, start.lower())

    def page_rank(self, word: str) -> Optional[float]:
        return page_rank(self._graph, word.lower(), self.damping, self.iterations)

    def page_ranks(self) -> Dict[str, float]:
        return page_ranks(self._graph, self.damping, self.iterations)

    def rank_nodes(self, n: Optional[int] = None) -> pa.Table:
        return rank_table(self.page_ranks(), n=n)

    def random_walk(self, cancel: Optional[threading.Event] = None, rng: Optional[np.random.Generator] = None, delay: Optional[float] = None) -> List[str]:
        return random_walk(self._graph, cancel=cancel, rng=rng or self.rng, delay=self.walk_delay if delay is None else delay)

    def start_walk(self, rng: Optional[np.random.Generator] = None, delay: Optional[float] = None) -> WalkHandle:
        return WalkHandle(self._graph, rng=rng or self.rng, delay=self.walk_delay if delay is None else delay).start()

    def edges(self) -> pa.Table: return self._graph.edges()
    def describe(self) -> str: return render.describe(self._graph)
    def to_dot(self) -> str: return render.to_dot(self._graph)
    def render_png(self, path: Union[str, Path], **kwargs) -> Path: return render.render_png(self._graph, path, **kwargs)
    def save_walk(self, path: Union[str, Path], walk: Sequence[str]) -> Path: return render.save_walk(path, walk)

    def sql(self, query: str) -> pa.Table: return self.conn.query(query)
    def close(self): self.conn.close()
    def __enter__(self): return self
    def __exit__(self, *_): self.close()
    def __repr__(self) -> str: return f"WordGraph(nodes={len(self._graph)}, edges={self._graph.num_edges})"
