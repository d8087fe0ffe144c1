"""
svc-depgraph - internal dependency inventory for go-svc consumers

Scans a set of repositories and the packages of the local repository for
references into the shared go-svc namespace and renders both dependency
graphs as one PlantUML diagram.
"""

__version__ = "0.1.0"

from .config import GraphConfig, RepositoryConfig, default_config
from .repo_intelligence import (
    DependencyGraph,
    DependencyGraphError,
    ReferenceExtractor,
    SourceReadError,
    extract_references,
)
from .rendering import render
from .pipeline import PipelineResult, build_diagram, run_pipeline
from .observability import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Configuration
    "GraphConfig",
    "RepositoryConfig",
    "default_config",
    # Repo Intelligence
    "DependencyGraph",
    "DependencyGraphError",
    "ReferenceExtractor",
    "SourceReadError",
    "extract_references",
    # Rendering
    "render",
    # Pipeline
    "PipelineResult",
    "build_diagram",
    "run_pipeline",
    # Observability
    "configure_logging",
    "get_logger",
]
