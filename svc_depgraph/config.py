"""
Static configuration for the dependency inventory.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path


NAMESPACE_PREFIX = "github.com/gesundheitscloud/go-svc/pkg"


@dataclass(frozen=True)
class RepositoryConfig:
    """A repository to scan: filesystem root plus the name shown in the diagram."""
    path: str
    name: str


DEFAULT_REPOSITORIES = (
    RepositoryConfig(path="../../research-pillars", name="ResearchPillars"),
    RepositoryConfig(path="../../data-dispatcher", name="DataDispatcher"),
    RepositoryConfig(path="../../data-receiver", name="DataReceiver"),
)


@dataclass
class GraphConfig:
    """Configuration for one dependency graph run."""
    namespace_prefix: str = NAMESPACE_PREFIX
    repositories: tuple[RepositoryConfig, ...] = DEFAULT_REPOSITORIES
    scan_dirs: tuple[str, ...] = ("pkg", "internal", "cmd")
    source_extension: str = ".go"
    package_root: Path = field(default_factory=lambda: Path("..") / "pkg")
    output_path: Path = field(default_factory=lambda: Path("dependencies.plantuml"))
    diagram_title: str = "Dependencies"

    def with_output(self, output_path: Path | str) -> "GraphConfig":
        """Return a copy writing the diagram to another location."""
        return replace(self, output_path=Path(output_path))


def default_config() -> GraphConfig:
    """Return the compiled-in configuration."""
    return GraphConfig()
