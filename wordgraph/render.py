from __future__ import annotations
import logging
import subprocess
from pathlib import Path
from typing import Sequence, Union
from wordgraph.exceptions import RenderError
from wordgraph.graph import Graph

logger = logging.getLogger(__name__)

def describe(graph: Graph) -> str:
    """One ``source -> target: weight`` line per edge, sorted."""
    return "\n".join(f"{r['source']} -> {r['target']}: {r['weight']}" for r in graph.edges().to_pylist())

def _quote(word: str) -> str:
    return '"' + word.replace("\\", "\\\\").replace('"', '\\"') + '"'

def to_dot(graph: Graph) -> str:
    """Export to Graphviz DOT; edge labels carry the weights."""
    lines = ["digraph G {", "    rankdir=LR;", "    node [shape=circle, style=filled, fillcolor=lightblue];", "    edge [fontsize=10];", ""]
    edges = graph.edges().to_pylist()
    linked = {r["source"] for r in edges} | {r["target"] for r in edges}
    lines.extend(f"    {_quote(n)};" for n in sorted(graph) if n not in linked)
    lines.extend(f"    {_quote(r['source'])} -> {_quote(r['target'])} [label=\"{r['weight']}\"];" for r in edges)
    lines.append("}")
    return "\n".join(lines) + "\n"

def render_png(graph: Graph, path: Union[str, Path], dot_executable: str = "dot", timeout: float = 60) -> Path:
    """Render through the Graphviz ``dot`` executable."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        result = subprocess.run(
            [dot_executable, "-Tpng", "-o", str(out)],
            input=to_dot(graph), capture_output=True, text=True, timeout=timeout,
        )
    except FileNotFoundError as e:
        raise RenderError(f"Graphviz executable '{dot_executable}' not found; is Graphviz installed and on PATH?") from e
    except subprocess.TimeoutExpired as e:
        raise RenderError(f"Graphviz timed out after {timeout}s") from e
    if result.returncode != 0:
        raise RenderError(f"Graphviz failed with exit code {result.returncode}: {result.stderr.strip()}")
    logger.info("Rendered graph to %s", out)
    return out

def save_walk(path: Union[str, Path], walk: Sequence[str]) -> Path:
    """Write a walk as space separated words."""
    out = Path(path)
    out.write_text(" ".join(walk), encoding="utf-8")
    logger.info("Saved %d-node walk to %s", len(walk), out)
    return out
