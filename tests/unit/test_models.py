"""
Unit Tests for Models
=====================

Unit tests for construction, immutability, equality and validation of the
CSS and HTML models.
"""

import pytest
from pydantic import ValidationError

from markupgen.models.css import (
    AndCondition,
    BasicValue,
    ChainSelector,
    ClassSelector,
    Combinator,
    CombinatorSelector,
    Declaration,
    LoneCondition,
    MediaConstraint,
    MediaFeature,
    MediaQuery,
    Rule,
    RuleSet,
    TagSelector,
)
from markupgen.models.html import Attribute, ElementNode, TextNode


class TestModelDefaults:
    """Test optional fields default to empty or absent."""

    def test_rule_defaults(self):
        rule = Rule(selector=TagSelector(name="p"))
        assert rule.declarations == ()
        assert rule.sub_rules == ()

    def test_rule_set_defaults(self):
        rule_set = RuleSet()
        assert rule_set.media_query is None
        assert rule_set.rules == ()
        assert rule_set.sub_sets == ()

    def test_media_query_defaults(self):
        query = MediaQuery(media_type="screen")
        assert query.constraint == MediaConstraint.NONE
        assert query.features == ()

    def test_attribute_defaults_to_toggle(self):
        assert Attribute(name="disabled").value is None
        assert Attribute.toggle("disabled") == Attribute(name="disabled", value=None)


class TestModelImmutability:
    """Test models cannot be changed after construction."""

    def test_declaration_is_frozen(self):
        d = Declaration(property="color", value=BasicValue(value="blue"))
        with pytest.raises(ValidationError):
            d.property = "background"

    def test_node_is_frozen(self):
        node = ElementNode(tag="p")
        with pytest.raises(ValidationError):
            node.tag = "div"

    def test_lists_are_stored_as_tuples(self):
        chain = ChainSelector(selectors=[TagSelector(name="p"), ClassSelector(name="x")])
        assert isinstance(chain.selectors, tuple)


class TestModelEquality:
    """Test structural equality and hashing."""

    def test_structural_equality(self):
        a = CombinatorSelector(
            left=TagSelector(name="ul"), op=Combinator.CHILD, right=TagSelector(name="li")
        )
        b = CombinatorSelector(left=TagSelector(name="ul"), op="Child", right={"Tag": "li"})
        assert a == b
        assert hash(a) == hash(b)

    def test_different_variants_are_not_equal(self):
        assert TagSelector(name="x") != ClassSelector(name="x")

    def test_nodes_compare_by_structure(self):
        a = ElementNode(tag="p", children=[TextNode(text="hi")])
        b = ElementNode(tag="p", children=[{"Text": "hi"}])
        assert a == b


class TestModelValidation:
    """Test construction-time validation."""

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Rule(selector=TagSelector(name="p"), style="x")

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Declaration(property="color")

    def test_unknown_combinator_rejected(self):
        with pytest.raises(ValidationError):
            CombinatorSelector(left=TagSelector(name="a"), op="Parent", right=TagSelector(name="b"))

    def test_single_media_condition_accepted(self):
        feature = MediaFeature(property="max-width", value="600px")
        query = MediaQuery(media_type="screen", features=[LoneCondition(feature=feature)])
        assert len(query.features) == 1

    def test_multiple_media_conditions_rejected(self):
        """Test several list entries must be combined in one condition."""
        width = MediaFeature(property="max-width", value="600px")
        height = MediaFeature(property="max-height", value="400px")
        with pytest.raises(ValidationError) as exc_info:
            MediaQuery(
                media_type="screen",
                features=[LoneCondition(feature=width), LoneCondition(feature=height)],
            )
        assert "at most one condition" in str(exc_info.value)

    def test_combined_condition_accepted(self):
        width = MediaFeature(property="max-width", value="600px")
        height = MediaFeature(property="max-height", value="400px")
        query = MediaQuery(media_type="screen", features=[AndCondition(first=width, second=height)])
        assert query.features[0].kind == "And"
