"""Diagram rendering."""

from .plantuml import render, REPOSITORY_EDGE, PACKAGE_EDGE

__all__ = [
    "render",
    "REPOSITORY_EDGE",
    "PACKAGE_EDGE",
]
