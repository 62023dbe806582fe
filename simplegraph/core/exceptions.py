"""
Custom exceptions for the simplegraph package.
"""


class GraphError(Exception):
    """Base exception class for graph errors."""
    pass


class VertexIndexError(GraphError):
    """Raised when a vertex index cannot be used by an operation."""

    def __init__(self, message: str, index: int = None):
        super().__init__(message)
        self.index = index


class NegativeIndexError(VertexIndexError, ValueError):
    """Raised when a vertex index is negative."""

    def __init__(self, index: int = None):
        super().__init__("Vertex index should not be a negative number.", index)


class NoSuchVertexError(VertexIndexError, LookupError):
    """Raised when no vertex exists with the given index."""

    def __init__(self, index: int):
        super().__init__(f"Vertex with {index} index does not exist.", index)


class UnsupportedMutationError(GraphError, TypeError):
    """Raised when a read-only view is modified."""
    pass


class GraphFormatError(GraphError, ValueError):
    """Raised when a graph definition cannot be parsed."""

    def __init__(self, message: str, source: str = None, line_number: int = None):
        if line_number is not None:
            message = f"{source or '<lines>'}:{line_number}: {message}"
        super().__init__(message)
        self.source = source
        self.line_number = line_number
