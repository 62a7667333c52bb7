"""Custom exceptions for propgraph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class ValidationError(GraphError):
    """Raised when a graph, query or configuration fails validation."""


class InvalidMotifError(ValidationError):
    """Raised when a motif pattern cannot be parsed."""


class ConvergenceError(GraphError):
    """Raised when an iterative algorithm exhausts its iteration cap."""
