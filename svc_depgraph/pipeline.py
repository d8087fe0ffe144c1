"""
Pipeline driver: scan, render, write.
"""

import traceback
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .config import GraphConfig
from .observability import ScanLogger
from .rendering import render
from .repo_intelligence import DependencyGraph


class PipelineResult(BaseModel):
    """Outcome of one dependency graph run."""
    success: bool
    diagram: str = ""
    output_path: str | None = None
    summary: dict[str, Any] = {}
    error: str | None = None
    stack_trace: str | None = None


def build_diagram(config: GraphConfig) -> tuple[str, DependencyGraph]:
    """
    Scan everything the config names and render the diagram.

    Errors propagate to the caller.

    Returns:
        Tuple of (diagram text, populated graph)
    """
    graph = DependencyGraph(config)
    graph.build_graph()

    diagram = render(
        graph.modules,
        graph.repo_dependencies,
        graph.package_dependencies,
        title=config.diagram_title,
    )
    return diagram, graph


def run_pipeline(config: GraphConfig) -> PipelineResult:
    """
    Run the full pipeline and write the diagram to config.output_path.

    This is the only place failures are caught. On failure nothing is
    written and the result carries the error and its traceback.

    Args:
        config: Run configuration

    Returns:
        PipelineResult describing success or failure
    """
    logger = ScanLogger("pipeline")
    output_path = Path(config.output_path)

    try:
        diagram, graph = build_diagram(config)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(diagram, encoding="utf-8")
        logger.log_diagram_written(output_path, len(diagram.encode("utf-8")))
    except Exception as e:
        logger.log_error(e, {"output_path": str(output_path)})
        return PipelineResult(
            success=False,
            error=f"{type(e).__name__}: {e}",
            stack_trace=traceback.format_exc(),
        )

    return PipelineResult(
        success=True,
        diagram=diagram,
        output_path=str(output_path),
        summary=graph.get_summary(),
    )
