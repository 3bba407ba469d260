from .api import WordGraph
from .graph import Graph
from .core.connection import DuckDBConnection
from .core.tokenizer import tokenize
from .core.builder import GraphBuilder, build_graph
from .core.ingestion import load_text_file, load_tokens
from .analysis import (
    BridgeWords,
    PathResult,
    WalkHandle,
    generate_new_text,
    page_rank,
    page_ranks,
    query_bridge_words,
    random_walk,
    shortest_path,
    shortest_paths_from,
    start_walk,
)
from .render import describe, to_dot, render_png, save_walk
from .exceptions import EmptyGraphError, RenderError
from .datasets import sample_text, generate_sentence_corpus

def build(text: str) -> Graph:
    return build_graph(tokenize(text))

def load(data, **kwargs) -> WordGraph:
    engine = WordGraph(**kwargs)
    engine.load(data)
    return engine

def connect(database=":memory:", **kwargs) -> WordGraph:
    return WordGraph(database=database, **kwargs)

__all__ = [
    "WordGraph",
    "Graph",
    "build",
    "load",
    "connect",
    "DuckDBConnection",
    "tokenize",
    "GraphBuilder",
    "build_graph",
    "load_text_file",
    "load_tokens",
    # Queries
    "BridgeWords",
    "PathResult",
    "WalkHandle",
    "query_bridge_words",
    "generate_new_text",
    "shortest_path",
    "shortest_paths_from",
    "page_rank",
    "page_ranks",
    "random_walk",
    "start_walk",
    # Output
    "describe",
    "to_dot",
    "render_png",
    "save_walk",
    "EmptyGraphError",
    "RenderError",
    # Datasets
    "sample_text",
    "generate_sentence_corpus",
]
