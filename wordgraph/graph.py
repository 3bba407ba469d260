from __future__ import annotations
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Sequence
import pyarrow as pa

EDGE_SCHEMA = pa.schema([("source", pa.string()), ("target", pa.string()), ("weight", pa.int64())])
_EMPTY: Mapping[str, int] = MappingProxyType({})

class Graph:
    """Immutable weighted word graph.

    ``adjacency`` maps each word to ``{successor: weight}``. Successors that
    are not keys themselves are registered as nodes without outgoing edges, so
    every word of the stream is a node. Weights must be positive integers.
    """
    __slots__ = ("_adj", "_pred", "_num_edges")

    def __init__(self, adjacency: Optional[Mapping[str, Mapping[str, int]]] = None):
        adj: Dict[str, Dict[str, int]] = {}
        for source, targets in (adjacency or {}).items():
            row = adj.setdefault(source, {})
            for target, weight in targets.items():
                if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                    raise ValueError(f"Edge {source!r} -> {target!r} needs a positive integer weight, got {weight!r}")
                row[target] = weight
                adj.setdefault(target, {})

        pred: Dict[str, set] = {node: set() for node in adj}
        for source, targets in adj.items():
            for target in targets: pred[target].add(source)

        self._adj = MappingProxyType({k: MappingProxyType(v) for k, v in adj.items()})
        self._pred = {k: frozenset(v) for k, v in pred.items()}
        self._num_edges = sum(len(v) for v in adj.values())

    @classmethod
    def from_edges(cls, nodes: Iterable[str], edges: Iterable[Mapping]) -> Graph:
        """Build from a node list and ``{"source", "target", "weight"}`` rows."""
        adj: Dict[str, Dict[str, int]] = {n: {} for n in nodes}
        for e in edges:
            adj.setdefault(e["source"], {})[e["target"]] = int(e["weight"])
        return cls(adj)

    @property
    def nodes(self) -> List[str]: return list(self._adj)
    @property
    def num_edges(self) -> int: return self._num_edges
    @property
    def is_empty(self) -> bool: return not self._adj

    def successors(self, node: str) -> Mapping[str, int]:
        return self._adj.get(node, _EMPTY)

    def predecessors(self, node: str) -> FrozenSet[str]:
        return self._pred.get(node, frozenset())

    def weight(self, source: str, target: str) -> Optional[int]:
        return self.successors(source).get(target)

    def out_degree(self, node: str) -> int:
        return len(self.successors(node))

    def is_dangling(self, node: str) -> bool:
        return node in self._adj and not self._adj[node]

    def path_weight(self, path: Sequence[str]) -> int:
        """Sum of edge weights along ``path``; raises ``KeyError`` on a missing edge."""
        total = 0
        for a, b in zip(path, path[1:]):
            w = self.weight(a, b)
            if w is None: raise KeyError(f"No edge {a!r} -> {b!r}")
            total += w
        return total

    def adjacency(self) -> Dict[str, Dict[str, int]]:
        return {k: dict(v) for k, v in self._adj.items()}

    def edges(self) -> pa.Table:
        rows = [{"source": s, "target": t, "weight": w} for s in sorted(self._adj) for t, w in sorted(self._adj[s].items())]
        return pa.Table.from_pylist(rows, schema=EDGE_SCHEMA)

    def __contains__(self, node: object) -> bool: return node in self._adj
    def __iter__(self) -> Iterator[str]: return iter(self._adj)
    def __len__(self) -> int: return len(self._adj)
    def __bool__(self) -> bool: return bool(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph): return NotImplemented
        return self.adjacency() == other.adjacency()

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self._num_edges})"
