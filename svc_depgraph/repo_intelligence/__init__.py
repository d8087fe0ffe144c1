"""Repository intelligence module for internal dependency analysis."""

from .references import ReferenceExtractor, extract_references, leading_segment
from .dependency_graph import DependencyGraph, DependencyGraphError, SourceReadError

__all__ = [
    "ReferenceExtractor",
    "extract_references",
    "leading_segment",
    "DependencyGraph",
    "DependencyGraphError",
    "SourceReadError",
]
