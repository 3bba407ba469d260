from __future__ import annotations
import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Set, Tuple
import numpy as np
from wordgraph.exceptions import EmptyGraphError
from wordgraph.graph import Graph

logger = logging.getLogger(__name__)

WALK_DELAY = 0.5

def random_walk(
    graph: Graph,
    cancel: Optional[threading.Event] = None,
    rng: Optional[np.random.Generator] = None,
    delay: float = WALK_DELAY,
) -> List[str]:
    """
    Follow uniformly chosen outgoing edges from a uniformly chosen start node.

    The walk ends at a node without outgoing edges, when it draws an edge it
    has already traversed (that step is not recorded), or when ``cancel`` is
    set. Cancellation is checked before each step; ``delay`` seconds pass
    between steps and the wait ends early on cancellation.
    """
    if graph.is_empty: raise EmptyGraphError("Cannot walk an empty graph.")
    if delay < 0: raise ValueError("delay must be non-negative")
    if rng is None:
        rng = np.random.default_rng()

    nodes = sorted(graph.nodes)
    current = nodes[int(rng.integers(len(nodes)))]
    path = [current]
    traversed: Set[Tuple[str, str]] = set()

    while not (cancel is not None and cancel.is_set()):
        successors = sorted(graph.successors(current))
        if not successors:
            logger.debug("Walk stopped at dead end %r", current)
            break
        nxt = successors[int(rng.integers(len(successors)))]
        if (current, nxt) in traversed:
            logger.debug("Walk stopped on repeated edge %r -> %r", current, nxt)
            break
        traversed.add((current, nxt))
        path.append(nxt)
        current = nxt
        if delay:
            if cancel is not None: cancel.wait(delay)
            else: time.sleep(delay)
    return path

class WalkHandle:
    """A random walk running on a worker thread; ``stop()`` cancels it cooperatively."""
    def __init__(self, graph: Graph, rng: Optional[np.random.Generator] = None, delay: float = WALK_DELAY):
        self.graph, self.rng, self.delay = graph, rng, delay
        self._cancel = threading.Event()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future: Optional[Future] = None

    def start(self) -> WalkHandle:
        if self._future is not None: raise RuntimeError("Walk already started.")
        if self.graph.is_empty: raise EmptyGraphError("Cannot walk an empty graph.")
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="random-walk")
        self._future = self._executor.submit(random_walk, self.graph, self._cancel, self.rng, self.delay)
        return self

    def stop(self):
        self._cancel.set()

    @property
    def cancelled(self) -> bool: return self._cancel.is_set()

    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def result(self, timeout: Optional[float] = None) -> List[str]:
        if self._future is None: raise RuntimeError("Call start() first.")
        path = self._future.result(timeout)
        self._executor.shutdown(wait=False)
        return path

    def __enter__(self): return self.start() if self._future is None else self

    def __exit__(self, *_):
        self.stop()
        if self._executor is not None: self._executor.shutdown(wait=True)

def start_walk(graph: Graph, rng: Optional[np.random.Generator] = None, delay: float = WALK_DELAY) -> WalkHandle:
    return WalkHandle(graph, rng=rng, delay=delay).start()
