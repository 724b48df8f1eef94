"""
Test Suite
==========

Test suite matching the markupgen/ directory structure.

Test Categories:
- unit: Unit tests for models, adapter, loaders, renderers and CLI
"""
