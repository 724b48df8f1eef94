"""
Core Logic
==========

Core modules for building and rendering the stylesheet and document models.

Modules:
- dsl: generic value deserialization and source loading
- rendering: CSS and HTML text output
- errors: boundary exception types
"""
