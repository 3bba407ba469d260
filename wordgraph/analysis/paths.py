from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from wordgraph.graph import Graph

logger = logging.getLogger(__name__)

FOUND, NOT_FOUND, DISCONNECTED = "found", "not_found", "disconnected"

@dataclass(frozen=True)
class PathResult:
    start: str
    end: str
    status: str
    path: Tuple[str, ...] = ()
    weight: Optional[int] = None
    missing: Tuple[str, ...] = ()

    @property
    def found(self) -> bool: return self.status == FOUND

    def message(self) -> str:
        if self.status == NOT_FOUND:
            return f'No "{self.start}" or "{self.end}" in the graph!'
        if self.status == DISCONNECTED:
            return f'"{self.start}" and "{self.end}" are not connected!'
        return " → ".join(f"*{w}*" if w in (self.start, self.end) else w for w in self.path)

def _dijkstra(graph: Graph, start: str) -> Tuple[Dict[str, int], Dict[str, str]]:
    # Heap entries are (distance, node) so ties resolve alphabetically.
    dist, prev = {start: 0}, {}
    visited = set()
    heap = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if u in visited: continue
        visited.add(u)
        for v, w in graph.successors(u).items():
            nd = d + w
            if nd < dist.get(v, float("inf")):
                dist[v], prev[v] = nd, u
                heapq.heappush(heap, (nd, v))
    return dist, prev

def _reconstruct(prev: Dict[str, str], start: str, end: str) -> Tuple[str, ...]:
    path: List[str] = [end]
    while path[-1] != start:
        path.append(prev[path[-1]])
    return tuple(reversed(path))

def shortest_path(graph: Graph, start: str, end: str) -> PathResult:
    """Lightest directed path from ``start`` to ``end`` by summed edge weight."""
    missing = tuple(w for w in (start, end) if w not in graph)
    if missing:
        return PathResult(start, end, NOT_FOUND, missing=missing)
    if start == end:
        return PathResult(start, end, FOUND, (start,), 0)

    dist, prev = _dijkstra(graph, start)
    if end not in dist:
        return PathResult(start, end, DISCONNECTED)
    path = _reconstruct(prev, start, end)
    logger.debug("Shortest path %s -> %s has %d edges, weight %d", start, end, len(path) - 1, dist[end])
    return PathResult(start, end, FOUND, path, graph.path_weight(path))

def shortest_paths_from(graph: Graph, start: str) -> Dict[str, PathResult]:
    """Shortest path from ``start`` to every node reachable from it, itself included."""
    if start not in graph: return {}
    dist, prev = _dijkstra(graph, start)
    out = {}
    for node in sorted(dist):
        path = _reconstruct(prev, start, node)
        out[node] = PathResult(start, node, FOUND, path, dist[node])
    return out
