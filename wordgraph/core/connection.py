from __future__ import annotations
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Union
import duckdb
import pyarrow as pa

logger = logging.getLogger(__name__)

class DuckDBConnection:
    """DuckDB session holding the staged token stream and its edge queries."""
    def __init__(
        self,
        database: Union[str, Path] = ":memory:",
        memory_limit: Optional[str] = None,
        threads: Optional[int] = None,
    ):
        self._database = str(database)
        self.conn = duckdb.connect(self._database)
        logger.debug("Opened DuckDB database %s", self._database)

        if memory_limit:
            self.conn.execute(f"SET memory_limit='{memory_limit}'")
        if threads:
            self.conn.execute(f"SET threads={threads}")

    def execute(self, query: str, params: Optional[Union[list, dict]] = None) -> duckdb.DuckDBPyConnection:
        return self.conn.execute(query, params)

    def query(self, query: str, params: Optional[Union[list, dict]] = None) -> pa.Table:
        return self.execute(query, params).fetch_arrow_table()

    def count_rows(self, table_name: str) -> int:
        return self.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()[0]

    def table_exists(self, table_name: str) -> bool:
        try:
            self.conn.execute(f"SELECT 1 FROM {table_name} LIMIT 0")
            return True
        except duckdb.Error:
            return False

    def register(self, name: str, data: Any):
        self.conn.register(name, data)

    def unregister(self, name: str):
        self.conn.unregister(name)

    @contextmanager
    def staged(self, name: str, data: Any) -> Iterator[str]:
        """Expose ``data`` as view ``name`` for the duration of the block."""
        self.register(name, data)
        try:
            yield name
        finally:
            self.unregister(name)

    def close(self):
        self.conn.close()
        logger.debug("Closed DuckDB database %s", self._database)

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def __repr__(self) -> str:
        return f"DuckDBConnection(database={self._database!r})"
