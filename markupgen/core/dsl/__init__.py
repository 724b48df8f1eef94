"""
DSL Boundary Module
===================

Entry points used by a scripting runtime or serialized documents to build
the typed models.

Components:
- adapter: generic value to typed model deserialization
- loader: JSON/YAML source loading and end-to-end rendering
"""

from markupgen.core.dsl.adapter import deserialize_into, deserialize_node, deserialize_rule_set
from markupgen.core.dsl.loader import (
    SourceLoaderFactory,
    load_source,
    make_css,
    make_html,
    render_css_source,
    render_html_source,
    validate_source_syntax,
)

__all__ = [
    "SourceLoaderFactory",
    "deserialize_into",
    "deserialize_node",
    "deserialize_rule_set",
    "load_source",
    "make_css",
    "make_html",
    "render_css_source",
    "render_html_source",
    "validate_source_syntax",
]
