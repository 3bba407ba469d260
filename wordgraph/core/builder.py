from __future__ import annotations
import logging
from typing import Any, Optional
from wordgraph.core.connection import DuckDBConnection
from wordgraph.core.ingestion import load_tokens
from wordgraph.graph import Graph

logger = logging.getLogger(__name__)

class GraphBuilder:
    """Aggregates adjacent token pairs of a staged stream into a ``Graph``."""
    def __init__(self, conn: DuckDBConnection, table_name: str = "tokens"):
        self.conn = conn
        self.table_name = table_name

    def _nodes(self):
        return self.conn.query(f"SELECT DISTINCT token FROM {self.table_name} ORDER BY token").column("token").to_pylist()

    def _edges(self):
        return self.conn.query(f"""
            WITH pairs AS (
                SELECT token AS source, lead(token) OVER (ORDER BY pos) AS target
                FROM {self.table_name}
            )
            SELECT source, target, COUNT(*) AS weight
            FROM pairs WHERE target IS NOT NULL
            GROUP BY 1, 2 ORDER BY 1, 2
        """).to_pylist()

    def build(self) -> Graph:
        if not self.conn.table_exists(self.table_name):
            raise ValueError(f"Token table '{self.table_name}' not found; call load_tokens() first.")
        graph = Graph.from_edges(self._nodes(), self._edges())
        logger.info("Built word graph with %d nodes and %d edges", len(graph), graph.num_edges)
        return graph

def build_graph(tokens: Any, conn: Optional[DuckDBConnection] = None, **kwargs) -> Graph:
    """One-shot build from a token sequence or dataframe.

    Uses a throwaway in-memory connection unless ``conn`` is given.
    """
    if conn is not None:
        load_tokens(conn, tokens, **kwargs)
        return GraphBuilder(conn, table_name=kwargs.get("table_name", "tokens")).build()
    with DuckDBConnection() as tmp:
        load_tokens(tmp, tokens, **kwargs)
        return GraphBuilder(tmp, table_name=kwargs.get("table_name", "tokens")).build()
