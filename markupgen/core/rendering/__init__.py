"""
Rendering Module
===============

Canonical text output for the stylesheet and document models.

Components:
- css_renderer: Rule sets, rules, selectors and media queries to CSS
- html_renderer: Nodes and attributes to HTML
"""

from markupgen.core.rendering.css_renderer import CSSRenderer, render_css
from markupgen.core.rendering.html_renderer import HTMLRenderer, render_html

__all__ = ["CSSRenderer", "HTMLRenderer", "render_css", "render_html"]
