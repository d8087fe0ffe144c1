"""
PlantUML rendering of the dependency graphs.
"""

from collections.abc import Callable, Iterable, Mapping


REPOSITORY_EDGE = "-->"
PACKAGE_EDGE = "-[dotted]-|>"


def _sorted_block(items: Iterable[str], line: Callable[[str], str]) -> list[str]:
    """Render one line per item in sorted order, plus a blank separator if any."""
    lines = [line(item) for item in sorted(items)]
    if lines:
        lines.append("")
    return lines


def render(
    modules: Iterable[str],
    repo_dependencies: Mapping[str, Iterable[str]],
    package_dependencies: Mapping[str, Iterable[str]],
    title: str = "Dependencies",
) -> str:
    """
    Render the dependency graphs as a PlantUML document.

    Repositories become class nodes kept together in mapping order, modules
    become object nodes in sorted order. Repository edges are solid, package
    edges are dotted. The output depends only on the inputs' contents, never
    on set iteration order.

    Args:
        modules: Every module name to declare as a node
        repo_dependencies: Repository name -> referenced modules
        package_dependencies: Package name -> referenced modules
        title: Diagram name after @startuml

    Returns:
        The PlantUML text, newline-terminated
    """
    lines = [f"@startuml {title}", "", "together {"]
    lines.extend(f"class {name}" for name in repo_dependencies)
    lines.extend(["}", ""])

    lines.extend(_sorted_block(set(modules), lambda m: f"object {m}"))

    for name, deps in repo_dependencies.items():
        lines.extend(_sorted_block(set(deps), lambda m: f"{name} {REPOSITORY_EDGE} {m}"))

    for name, deps in package_dependencies.items():
        lines.extend(_sorted_block(set(deps), lambda m: f"{name} {PACKAGE_EDGE} {m}"))

    lines.extend(["@enduml", ""])
    return "\n".join(lines)
