"""
HTML Renderer
=============

Convert the document model into HTML markup.
Text and attribute values are emitted verbatim; nothing is escaped.
"""

from typing import Any

from markupgen.config.logging import get_logger
from markupgen.models.html import Attribute, ElementNode, Node, TextNode

logger = get_logger(__name__)


class HTMLRenderer:
    """Stateless renderer for the HTML model."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(renderer="html")  # structlog.BoundLoggerBase

    def render(self, node: Node) -> str:
        """
        Render a node tree to HTML.

        Args:
            node: Root node

        Returns:
            HTML string
        """
        html = self.render_node(node)
        self.logger.debug("HTML rendering completed", root=node.kind, html_length=len(html))
        return html

    def render_node(self, node: Node) -> str:
        if isinstance(node, TextNode):
            return node.text
        if isinstance(node, ElementNode):
            children_html = "".join(self.render_node(child) for child in node.children)
            return f"{self._open_tag(node)}{children_html}</{node.tag}>"
        raise TypeError(f"Unsupported node: {type(node).__name__}")

    def render_attribute(self, attribute: Attribute) -> str:
        """Render ``name="value"``, or the bare name for a toggle attribute."""
        if attribute.value is None:
            return attribute.name
        return f'{attribute.name}="{attribute.value}"'

    def _open_tag(self, node: ElementNode) -> str:
        if not node.attributes:
            return f"<{node.tag}>"
        attrs_str = " ".join(self.render_attribute(a) for a in node.attributes)
        return f"<{node.tag} {attrs_str}>"


def render_html(node: Node) -> str:
    """
    Render a node tree to HTML.

    Args:
        node: Root node

    Returns:
        HTML string
    """
    return HTMLRenderer().render(node)
