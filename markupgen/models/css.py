"""
CSS Models
==========

Typed structure of a stylesheet: declarations, selectors, rules with
preprocessor-style nesting, media queries and rule sets.
All models are frozen and compare by structure.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, Optional, Tuple, Union

from pydantic import BeforeValidator, field_validator

from markupgen.models.base import MarkupModel, Variant, untag


# Enums
class Combinator(str, Enum):
    """Structural relationship between two selectors."""
    DESCENDANT = "Descendant"
    CHILD = "Child"
    ADJACENT_SIBLING = "AdjacentSibling"
    GENERAL_SIBLING = "GeneralSibling"


class MediaConstraint(str, Enum):
    """Optional media query prefix."""
    NONE = "None"
    ONLY = "Only"
    NOT = "Not"


# Declaration Models
class BasicValue(Variant):
    """Plain value, quoted on output when it contains a space."""
    kind: Literal["Basic"] = "Basic"
    value: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("value",)


class FunctionValue(Variant):
    """Functional notation such as ``rgb(200,200,200)``."""
    kind: Literal["Function"] = "Function"
    name: str
    arguments: Tuple[str, ...] = ()

    positional_fields: ClassVar[Tuple[str, ...]] = ("name", "arguments")


DeclarationValue = Annotated[
    Union[BasicValue, FunctionValue],
    BeforeValidator(untag([BasicValue, FunctionValue])),
]


class Declaration(MarkupModel):
    """A single ``property:value;`` pair."""
    property: str
    value: DeclarationValue


# Selector Models
class UniversalSelector(Variant):
    kind: Literal["Universal"] = "Universal"


class TagSelector(Variant):
    kind: Literal["Tag"] = "Tag"
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name",)


class ClassSelector(Variant):
    kind: Literal["Class"] = "Class"
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name",)


class IdSelector(Variant):
    kind: Literal["Id"] = "Id"
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name",)


class CombinatorSelector(Variant):
    """Two selectors joined by a combinator symbol, with no spacing."""
    kind: Literal["Combinator"] = "Combinator"
    left: Selector
    op: Combinator
    right: Selector

    positional_fields: ClassVar[Tuple[str, ...]] = ("left", "op", "right")


class PseudoClassSelector(Variant):
    kind: Literal["PseudoClass"] = "PseudoClass"
    base: Selector
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("base", "name")


class PseudoElementSelector(Variant):
    kind: Literal["PseudoElement"] = "PseudoElement"
    base: Selector
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("base", "name")


class AttributeSelector(Variant):
    kind: Literal["Attribute"] = "Attribute"
    name: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name",)


class AttributeValueSelector(Variant):
    kind: Literal["AttributeValue"] = "AttributeValue"
    name: str
    value: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name", "value")


class AttributeContainsSelector(Variant):
    kind: Literal["AttributeContains"] = "AttributeContains"
    name: str
    value: str

    positional_fields: ClassVar[Tuple[str, ...]] = ("name", "value")


class ChainSelector(Variant):
    """Compound selector, e.g. ``p.note[title]``. Members are not reordered."""
    kind: Literal["Chain"] = "Chain"
    selectors: Tuple[Selector, ...] = ()

    positional_fields: ClassVar[Tuple[str, ...]] = ("selectors",)


class GroupSelector(Variant):
    """Selector list, e.g. ``body,h1,p``."""
    kind: Literal["Group"] = "Group"
    selectors: Tuple[Selector, ...] = ()

    positional_fields: ClassVar[Tuple[str, ...]] = ("selectors",)


SELECTOR_VARIANTS = (
    UniversalSelector,
    TagSelector,
    ClassSelector,
    IdSelector,
    CombinatorSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    AttributeSelector,
    AttributeValueSelector,
    AttributeContainsSelector,
    ChainSelector,
    GroupSelector,
)

Selector = Annotated[
    Union[
        UniversalSelector,
        TagSelector,
        ClassSelector,
        IdSelector,
        CombinatorSelector,
        PseudoClassSelector,
        PseudoElementSelector,
        AttributeSelector,
        AttributeValueSelector,
        AttributeContainsSelector,
        ChainSelector,
        GroupSelector,
    ],
    BeforeValidator(untag(SELECTOR_VARIANTS)),
]


# Rule Models
class Rule(MarkupModel):
    """A selector with its declarations and nested rules.

    ``sub_rules`` are flattened on output into sibling blocks whose selector
    is the ancestor chain joined with ``>``.
    """
    selector: Selector
    declarations: Tuple[Declaration, ...] = ()
    sub_rules: Tuple[Rule, ...] = ()


# Media Query Models
class MediaFeature(MarkupModel):
    """A ``(property:value)`` media feature test."""
    property: str
    value: str


class LoneCondition(Variant):
    kind: Literal["Lone"] = "Lone"
    feature: MediaFeature

    positional_fields: ClassVar[Tuple[str, ...]] = ("feature",)


class AndCondition(Variant):
    kind: Literal["And"] = "And"
    first: MediaFeature
    second: MediaFeature

    positional_fields: ClassVar[Tuple[str, ...]] = ("first", "second")


class OrCondition(Variant):
    kind: Literal["Or"] = "Or"
    first: MediaFeature
    second: MediaFeature

    positional_fields: ClassVar[Tuple[str, ...]] = ("first", "second")


class NotCondition(Variant):
    kind: Literal["Not"] = "Not"
    first: MediaFeature
    second: MediaFeature

    positional_fields: ClassVar[Tuple[str, ...]] = ("first", "second")


MediaCondition = Annotated[
    Union[LoneCondition, AndCondition, OrCondition, NotCondition],
    BeforeValidator(untag([LoneCondition, AndCondition, OrCondition, NotCondition])),
]


class MediaQuery(MarkupModel):
    """``@media`` activation predicate.

    At most one condition is allowed in ``features``; several features are
    combined inside a single And/Or/Not condition instead.
    """
    media_type: str
    constraint: MediaConstraint = MediaConstraint.NONE
    features: Tuple[MediaCondition, ...] = ()

    @field_validator("features")
    @classmethod
    def validate_features(cls, v: Tuple[MediaCondition, ...]) -> Tuple[MediaCondition, ...]:
        """Reject feature lists that would render without a connective."""
        if len(v) > 1:
            raise ValueError(
                f"A media query takes at most one condition, got {len(v)}; "
                "combine features with an And, Or or Not condition"
            )
        return v


class RuleSet(MarkupModel):
    """Top-level group of rules, optionally scoped by a media query.

    ``sub_sets`` only group output; a sub set without its own media query is
    emitted inline and never inherits the parent's query.
    """
    media_query: Optional[MediaQuery] = None
    rules: Tuple[Rule, ...] = ()
    sub_sets: Tuple[RuleSet, ...] = ()


CombinatorSelector.model_rebuild()
PseudoClassSelector.model_rebuild()
PseudoElementSelector.model_rebuild()
ChainSelector.model_rebuild()
GroupSelector.model_rebuild()
Rule.model_rebuild()
RuleSet.model_rebuild()
