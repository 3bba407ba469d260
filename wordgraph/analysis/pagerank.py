"""
wordgraph.analysis.pagerank — iterative PageRank over the word graph.

Each iteration:

    new(u) = (1 - d) / N + d * (sum_{v -> u} pr(v) / outdeg(v) + dangling / N)

where ``dangling`` is the mass sitting on nodes with no outgoing edges, and
the vector is renormalized to sum to one afterwards. Out-degree counts
distinct successors; edge weights play no part. Incoming mass is a sparse
matrix product, so one iteration costs O(N + E).
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple
import numpy as np
import pyarrow as pa
from scipy import sparse
from wordgraph.graph import Graph

logger = logging.getLogger(__name__)

DAMPING_FACTOR = 0.85
PAGERANK_ITERATIONS = 50

RANK_SCHEMA = pa.schema([("node", pa.string()), ("score", pa.float64()), ("rank", pa.int32())])

def validate_params(damping: float, iterations: int):
    if not (0.0 <= damping <= 1.0): raise ValueError("damping must be in [0, 1]")
    if iterations < 0: raise ValueError("iterations must be non-negative")

def _incoming_matrix(graph: Graph, nodes: List[str]) -> Tuple[sparse.csr_matrix, np.ndarray]:
    index = {n: i for i, n in enumerate(nodes)}
    rows, cols, data = [], [], []
    dangling = np.zeros(len(nodes), dtype=bool)
    for v in nodes:
        succ = graph.successors(v)
        if not succ:
            dangling[index[v]] = True
            continue
        share = 1.0 / len(succ)
        for u in succ:
            rows.append(index[u]); cols.append(index[v]); data.append(share)
    m = sparse.csr_matrix((data, (rows, cols)), shape=(len(nodes), len(nodes)))
    return m, dangling

def page_ranks(graph: Graph, damping: float = DAMPING_FACTOR, iterations: int = PAGERANK_ITERATIONS) -> Dict[str, float]:
    """Score every node; always starts from the uniform vector."""
    validate_params(damping, iterations)
    nodes = graph.nodes
    n = len(nodes)
    if n == 0: return {}

    incoming, dangling = _incoming_matrix(graph, nodes)
    pr = np.full(n, 1.0 / n)
    for _ in range(iterations):
        dangling_sum = pr[dangling].sum()
        new = (1.0 - damping) / n + damping * (incoming @ pr + dangling_sum / n)
        pr = new / new.sum()
    logger.debug("PageRank over %d nodes after %d iterations", n, iterations)
    return dict(zip(nodes, pr.tolist()))

def page_rank(graph: Graph, node: str, damping: float = DAMPING_FACTOR, iterations: int = PAGERANK_ITERATIONS) -> Optional[float]:
    if node not in graph: return None
    return page_ranks(graph, damping, iterations)[node]

def rank_table(scores: Dict[str, float], n: Optional[int] = None) -> pa.Table:
    """Scores as a table ordered by descending score, then node."""
    ordered = sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))
    if n is not None: ordered = ordered[:n]
    rows = [{"node": k, "score": v, "rank": i} for i, (k, v) in enumerate(ordered, start=1)]
    return pa.Table.from_pylist(rows, schema=RANK_SCHEMA)
