from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union
import pyarrow as pa
import narwhals as nw
from wordgraph.core.connection import DuckDBConnection

logger = logging.getLogger(__name__)

TOKEN_SCHEMA = pa.schema([("pos", pa.int64()), ("token", pa.string())])

def load_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a corpus file; line breaks are treated like any other separator."""
    p = Path(path)
    text = p.read_text(encoding=encoding)
    logger.info("Read %d characters from %s", len(text), p)
    return text

def _tokens_to_arrow(tokens: Sequence[str]) -> pa.Table:
    return pa.Table.from_pydict({"pos": list(range(len(tokens))), "token": list(tokens)}, schema=TOKEN_SCHEMA)

def _frame_to_arrow(source: Any, token_col: str, pos_col: Optional[str]) -> pa.Table:
    df = nw.from_native(source, eager_only=True, allow_series=True)
    if isinstance(df, nw.Series):
        return _tokens_to_arrow([str(t) for t in df.drop_nulls().to_list()])
    schema = df.columns
    if token_col not in schema: raise ValueError(f"Missing token column '{token_col}'")
    if pos_col:
        if pos_col not in schema: raise ValueError(f"Missing position column '{pos_col}'")
        df = df.sort(pos_col)
    df = df.select(nw.col(token_col).alias("token")).drop_nulls()
    return _tokens_to_arrow([str(t) for t in df.get_column("token").to_list()])

def load_tokens(
    conn: DuckDBConnection,
    source: Any,
    token_col: str = "token",
    pos_col: Optional[str] = None,
    table_name: str = "tokens",
) -> int:
    """Stage a token stream as ``(pos, token)`` rows and return the row count.

    ``source`` is either a sequence of strings, a series of tokens, or any
    eager dataframe narwhals understands (pandas, polars, pyarrow) holding
    ``token_col``. When
    ``pos_col`` is given the rows are ordered by it, otherwise row order is
    the stream order. Tokens are lowercased.
    """
    if isinstance(source, str):
        raise TypeError("Expected a token sequence or dataframe, got str; tokenize the text first")
    if isinstance(source, (list, tuple)):
        arrow = _tokens_to_arrow([str(t) for t in source])
    else:
        arrow = _frame_to_arrow(source, token_col, pos_col)

    with conn.staged("_tmp_tokens", arrow) as view:
        conn.execute(f"CREATE OR REPLACE TABLE {table_name} AS SELECT pos::BIGINT AS pos, lower(token)::VARCHAR AS token FROM {view} WHERE token <> ''")
    count = conn.count_rows(table_name)
    logger.debug("Staged %d tokens into %s", count, table_name)
    return count
