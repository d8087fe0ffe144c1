"""
Extraction of internal-namespace references from raw source text.
"""

import re


class ReferenceExtractor:
    """
    Finds quoted ``"<prefix>/<module>"`` literals in source text.

    Matching is purely textual: no parsing of the source language, so the
    literal is found wherever it appears (import blocks, strings, comments).
    """

    def __init__(self, prefix: str):
        """
        Initialize the extractor.

        Args:
            prefix: Namespace prefix, matched literally (e.g. "github.com/org/repo/pkg")
        """
        self.prefix = prefix.rstrip("/")
        self.pattern = re.compile(r'"' + re.escape(self.prefix) + r'/([^"\n]+)"')

    def extract(self, text: str) -> list[str]:
        """
        Extract every module reference in the text.

        Args:
            text: Raw source text

        Returns:
            Module names in source order, duplicates included
        """
        return self.pattern.findall(text)


def extract_references(text: str, prefix: str) -> list[str]:
    """Extract module references from text using a one-off extractor."""
    return ReferenceExtractor(prefix).extract(text)


def leading_segment(module_name: str) -> str:
    """Return the first path segment of a module name ("storage/kv" -> "storage")."""
    return module_name.split("/", 1)[0]
