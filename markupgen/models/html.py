"""
HTML Models
===========

Typed structure of an HTML document: attributes and nodes.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Optional, Tuple, Union

from pydantic import BeforeValidator

from markupgen.models.base import MarkupModel, Variant, untag


class Attribute(MarkupModel):
    """Element attribute; ``value=None`` is a boolean toggle such as ``disabled``."""
    name: str
    value: Optional[str] = None

    @classmethod
    def valued(cls, name: str, value: str) -> "Attribute":
        return cls(name=name, value=value)

    @classmethod
    def toggle(cls, name: str) -> "Attribute":
        return cls(name=name)


class TextNode(Variant):
    """Literal text, emitted without escaping."""
    kind: Literal["Text"] = "Text"
    text: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("text",)


class ElementNode(Variant):
    """Element with attributes and child nodes; always emits a closing tag."""
    kind: Literal["Element"] = "Element"
    tag: str
    attributes: Tuple[Attribute, ...] = ()
    children: Tuple[Node, ...] = ()

    positional_fields: ClassVar[Tuple[str, ...]] = ("tag", "attributes", "children")


Node = Annotated[
    Union[TextNode, ElementNode],
    BeforeValidator(untag([TextNode, ElementNode])),
]


def text(value: str) -> TextNode:
    """Build a text node."""
    return TextNode(text=value)


def element(
    tag: str,
    attributes: Optional[list] = None,
    children: Optional[list] = None,
) -> ElementNode:
    """Build an element node from plain lists."""
    return ElementNode(tag=tag, attributes=attributes or (), children=children or ())


ElementNode.model_rebuild()
