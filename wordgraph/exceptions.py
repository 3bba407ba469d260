class EmptyGraphError(ValueError):
    """Raised when an operation needs at least one node."""

class RenderError(RuntimeError):
    """Raised when Graphviz cannot render the graph."""
