"""Tests for DuckDB connection management."""

import pytest
import pyarrow as pa
from unittest.mock import MagicMock, patch

from wordgraph.core.connection import DuckDBConnection


class TestDuckDBConnection:

    def test_in_memory_connection(self):
        conn = DuckDBConnection()
        assert conn.execute("SELECT 42 AS answer").fetchone()[0] == 42
        conn.close()

    def test_context_manager(self):
        with DuckDBConnection() as conn:
            assert conn.execute("SELECT 1+1").fetchone()[0] == 2

    def test_query_returns_arrow(self):
        with DuckDBConnection() as conn:
            table = conn.query("SELECT 'the' AS token, 2 AS weight")
            assert isinstance(table, pa.Table)
            assert table.to_pylist() == [{"token": "the", "weight": 2}]

    def test_query_table_passthrough(self):
        with DuckDBConnection() as conn:
            mock_result = MagicMock()
            mock_table = pa.Table.from_pydict({"a": [1]})
            mock_result.fetch_arrow_table.return_value = mock_table
            with patch.object(conn, "execute", return_value=mock_result):
                assert conn.query("SELECT 1") == mock_table
            mock_result.arrow.assert_not_called()

    def test_count_rows(self):
        with DuckDBConnection() as conn:
            conn.execute("CREATE TABLE tokens AS SELECT * FROM range(3)")
            assert conn.count_rows("tokens") == 3

    def test_staged_view_is_scoped(self):
        with DuckDBConnection() as conn:
            with conn.staged("_view", pa.table({"token": ["a", "b"]})) as name:
                assert name == "_view"
                assert conn.count_rows(name) == 2
            assert conn.table_exists("_view") is False

    def test_staged_view_removed_on_error(self):
        with DuckDBConnection() as conn:
            with pytest.raises(RuntimeError):
                with conn.staged("_view", pa.table({"token": ["a"]})):
                    raise RuntimeError("boom")
            assert conn.table_exists("_view") is False

    def test_table_exists(self):
        with DuckDBConnection() as conn:
            assert conn.table_exists("tokens") is False
            conn.execute("CREATE TABLE tokens (pos BIGINT, token VARCHAR)")
            assert conn.table_exists("tokens") is True

    def test_register_and_unregister_arrow(self):
        with DuckDBConnection() as conn:
            conn.register("words", pa.Table.from_pydict({"token": ["a", "b"]}))
            assert conn.execute("SELECT COUNT(*) FROM words").fetchone()[0] == 2
            conn.unregister("words")
            assert conn.table_exists("words") is False

    def test_settings(self):
        conn = DuckDBConnection(memory_limit="512MB", threads=1)
        assert str(conn.execute("SELECT current_setting('threads')").fetchone()[0]) == "1"
        conn.close()

    def test_repr(self):
        with DuckDBConnection() as conn:
            assert ":memory:" in repr(conn)

    def test_persistent_database(self, tmp_path):
        db_path = str(tmp_path / "words.duckdb")
        with DuckDBConnection(database=db_path) as conn:
            conn.execute("CREATE TABLE t (v INT)")
            conn.execute("INSERT INTO t VALUES (99)")
        with DuckDBConnection(database=db_path) as conn:
            assert conn.execute("SELECT v FROM t").fetchone()[0] == 99
