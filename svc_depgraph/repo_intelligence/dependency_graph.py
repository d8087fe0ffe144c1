"""
Dependency graph extraction across repositories and local packages.
"""

from pathlib import Path
from typing import Any

from ..config import GraphConfig
from ..observability import ScanLogger
from .file_tree import list_child_directories, list_source_files, read_source
from .references import ReferenceExtractor, leading_segment


class DependencyGraphError(Exception):
    """Base exception for dependency graph errors."""
    pass


class SourceReadError(DependencyGraphError):
    """Raised when a source file cannot be read."""
    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = str(path)


class DependencyGraph:
    """
    Accumulates internal-namespace references for repositories and packages.

    Holds three structures, all created fresh per instance:
    - modules: every module name observed by either pass
    - repo_dependencies: repository display name -> referenced modules
    - package_dependencies: local package name -> referenced modules,
      minus references into the package itself
    """

    def __init__(self, config: GraphConfig):
        """
        Initialize dependency graph builder.

        Args:
            config: Repositories, namespace prefix and paths to scan
        """
        self.config = config
        self.extractor = ReferenceExtractor(config.namespace_prefix)
        self.logger = ScanLogger("dependency_graph")

        self.modules: set[str] = set()
        self.repo_dependencies: dict[str, set[str]] = {
            repo.name: set() for repo in config.repositories
        }
        self.package_dependencies: dict[str, set[str]] = {}
        self.files_scanned = 0

    def _references_in(self, path: Path) -> list[str]:
        """Read one source file and extract its references."""
        try:
            content = read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, str(e)) from e

        references = self.extractor.extract(content)
        self.files_scanned += 1
        self.logger.log_file_scanned(path, len(references))
        return references

    def scan_repositories(self) -> None:
        """
        Collect the modules referenced by each configured repository.

        Only the configured scan directories of each repository are walked;
        a scan directory that does not exist contributes nothing.
        """
        for repo in self.config.repositories:
            deps = self.repo_dependencies.setdefault(repo.name, set())
            files = 0

            for scan_dir in self.config.scan_dirs:
                root = Path(repo.path) / scan_dir
                for file_path in list_source_files(root, self.config.source_extension):
                    files += 1
                    for module in self._references_in(file_path):
                        self.modules.add(module)
                        deps.add(module)

            self.logger.log_repository_scanned(repo.name, files, len(deps))

    def scan_local_packages(self) -> None:
        """
        Collect the modules referenced by each package under the package root.

        A reference whose leading path segment equals the package name is a
        self-reference and is dropped.
        """
        base_path = Path(self.config.package_root)

        for package in list_child_directories(base_path):
            self.modules.add(package)
            deps = self.package_dependencies.setdefault(package, set())
            files = 0
            dropped = 0

            for file_path in list_source_files(base_path / package, self.config.source_extension):
                files += 1
                for module in self._references_in(file_path):
                    if leading_segment(module) == package:
                        dropped += 1
                        continue
                    self.modules.add(module)
                    deps.add(module)

            self.logger.log_package_scanned(package, files, len(deps), dropped)

    def build_graph(self) -> None:
        """Run the repository pass followed by the local package pass."""
        self.scan_repositories()
        self.scan_local_packages()

    def get_dependencies(self, name: str) -> list[str]:
        """
        Get modules that a repository or local package depends on.

        Args:
            name: Repository display name or local package name

        Returns:
            Sorted module names; empty if the name is unknown
        """
        deps = self.repo_dependencies.get(name)
        if deps is None:
            deps = self.package_dependencies.get(name, set())
        return sorted(deps)

    def get_dependents(self, module_name: str) -> list[str]:
        """
        Get repositories and local packages that reference a module.

        Args:
            module_name: Module to find dependents for

        Returns:
            Sorted names of everything referencing this module
        """
        dependents = {
            name
            for graph in (self.repo_dependencies, self.package_dependencies)
            for name, deps in graph.items()
            if module_name in deps
        }
        return sorted(dependents)

    def to_dict(self) -> dict[str, Any]:
        """Convert graph to dictionary representation."""
        return {
            "modules": sorted(self.modules),
            "repositories": {
                name: sorted(deps) for name, deps in self.repo_dependencies.items()
            },
            "packages": {
                name: sorted(deps) for name, deps in self.package_dependencies.items()
            },
        }

    def get_summary(self) -> dict[str, Any]:
        """Get summary statistics of the dependency graph."""
        most_used = max(
            sorted(self.modules),
            key=lambda m: len(self.get_dependents(m)),
            default=None,
        )

        return {
            "repositories": len(self.repo_dependencies),
            "packages": len(self.package_dependencies),
            "modules": len(self.modules),
            "repository_edges": sum(len(d) for d in self.repo_dependencies.values()),
            "package_edges": sum(len(d) for d in self.package_dependencies.values()),
            "files_scanned": self.files_scanned,
            "most_used_module": most_used,
        }
