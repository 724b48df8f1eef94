"""
Data Models
===========

Pydantic data models for the stylesheet and document trees.

Models:
- base: frozen model base and tagged-variant support
- css: declarations, selectors, rules, media queries and rule sets
- html: attributes and nodes
"""

from markupgen.models.css import (
    AndCondition,
    AttributeContainsSelector,
    AttributeSelector,
    AttributeValueSelector,
    BasicValue,
    ChainSelector,
    ClassSelector,
    Combinator,
    CombinatorSelector,
    Declaration,
    DeclarationValue,
    FunctionValue,
    GroupSelector,
    IdSelector,
    LoneCondition,
    MediaCondition,
    MediaConstraint,
    MediaFeature,
    MediaQuery,
    NotCondition,
    OrCondition,
    PseudoClassSelector,
    PseudoElementSelector,
    Rule,
    RuleSet,
    Selector,
    TagSelector,
    UniversalSelector,
)
from markupgen.models.html import Attribute, ElementNode, Node, TextNode

__all__ = [
    "AndCondition",
    "Attribute",
    "AttributeContainsSelector",
    "AttributeSelector",
    "AttributeValueSelector",
    "BasicValue",
    "ChainSelector",
    "ClassSelector",
    "Combinator",
    "CombinatorSelector",
    "Declaration",
    "DeclarationValue",
    "ElementNode",
    "FunctionValue",
    "GroupSelector",
    "IdSelector",
    "LoneCondition",
    "MediaCondition",
    "MediaConstraint",
    "MediaFeature",
    "MediaQuery",
    "Node",
    "NotCondition",
    "OrCondition",
    "PseudoClassSelector",
    "PseudoElementSelector",
    "Rule",
    "RuleSet",
    "Selector",
    "TagSelector",
    "TextNode",
    "UniversalSelector",
]
