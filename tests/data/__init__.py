"""
Test Data Package
================

Sample generic values and their expected rendered output.
"""
