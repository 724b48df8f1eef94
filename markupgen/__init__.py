"""
markupgen
=========

Canonical CSS and HTML output for in-memory stylesheet and document trees.

This package provides:
- Frozen Pydantic models for CSS rule sets and HTML node trees
- A deserialization adapter from generic runtime values to those models
- Deterministic CSS and HTML renderers
- JSON/YAML document loading and a small command line front end
"""

__version__ = "1.0.0"
__author__ = "markupgen Team"
