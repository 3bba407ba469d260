from .bridges import BridgeWords, query_bridge_words
from .rewrite import generate_new_text
from .paths import PathResult, shortest_path, shortest_paths_from
from .pagerank import page_rank, page_ranks, rank_table
from .walk import WalkHandle, random_walk, start_walk

__all__ = [
    "BridgeWords",
    "query_bridge_words",
    "generate_new_text",
    "PathResult",
    "shortest_path",
    "shortest_paths_from",
    "page_rank",
    "page_ranks",
    "rank_table",
    "WalkHandle",
    "random_walk",
    "start_walk",
]
