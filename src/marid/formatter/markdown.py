"""Mermaid diagram wrapped in a Markdown code block."""

from marid.formatter.base import RenderData
from marid.formatter.mermaid import MermaidFormatter

__all__ = ["MarkdownFormatter"]


class MarkdownFormatter(MermaidFormatter):
    """Mermaid output fenced for documents that render ```mermaid blocks."""

    name = "markdown"
    media_type = "text/markdown"

    def render(self, data: RenderData) -> str:
        diagram = super().render(data)
        return f"```mermaid\n{diagram}```\n"
