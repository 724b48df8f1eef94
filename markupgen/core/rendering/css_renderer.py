"""
CSS Renderer
============

Convert the stylesheet model into canonical CSS text.
Output carries no optional whitespace: every separator is part of the
contract and two equal rule sets always render to the same string.
"""

from typing import Any, Iterator, List, Tuple

from markupgen.config.logging import get_logger
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

logger = get_logger(__name__)

COMBINATOR_SYMBOLS = {
    Combinator.DESCENDANT: "",
    Combinator.CHILD: ">",
    Combinator.ADJACENT_SIBLING: "+",
    Combinator.GENERAL_SIBLING: "~",
}

CONSTRAINT_PREFIXES = {
    MediaConstraint.NONE: "",
    MediaConstraint.ONLY: "only ",
    MediaConstraint.NOT: "not ",
}

# Joins a nested rule's selector onto its ancestors.
NESTING_COMBINATOR = COMBINATOR_SYMBOLS[Combinator.CHILD]


class CSSRenderer:
    """Stateless renderer for the CSS model."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(renderer="css")  # structlog.BoundLoggerBase

    def render(self, rule_set: RuleSet) -> str:
        """
        Render a rule set, including nested sets, to CSS text.

        Args:
            rule_set: Rule set to render

        Returns:
            CSS string
        """
        css = self.render_rule_set(rule_set)
        self.logger.debug(
            "CSS rendering completed",
            rule_count=len(rule_set.rules),
            sub_set_count=len(rule_set.sub_sets),
            css_length=len(css),
        )
        return css

    # ---- declarations ----

    def render_value(self, value: DeclarationValue) -> str:
        """Render a declaration value; basic values containing a space are quoted."""
        if isinstance(value, BasicValue):
            if " " in value.value:
                return f'"{value.value}"'
            return value.value
        if isinstance(value, FunctionValue):
            return f"{value.name}({','.join(value.arguments)})"
        raise TypeError(f"Unsupported declaration value: {type(value).__name__}")

    def render_declaration(self, declaration: Declaration) -> str:
        return f"{declaration.property}:{self.render_value(declaration.value)};"

    # ---- selectors ----

    def render_selector(self, selector: Selector) -> str:
        """Render a selector tree. No reordering or validation is performed."""
        if isinstance(selector, UniversalSelector):
            return "*"
        elif isinstance(selector, TagSelector):
            return selector.name
        elif isinstance(selector, ClassSelector):
            return f".{selector.name}"
        elif isinstance(selector, IdSelector):
            return f"#{selector.name}"
        elif isinstance(selector, CombinatorSelector):
            return (
                self.render_selector(selector.left)
                + COMBINATOR_SYMBOLS[selector.op]
                + self.render_selector(selector.right)
            )
        elif isinstance(selector, PseudoClassSelector):
            return f"{self.render_selector(selector.base)}:{selector.name}"
        elif isinstance(selector, PseudoElementSelector):
            return f"{self.render_selector(selector.base)}::{selector.name}"
        elif isinstance(selector, AttributeSelector):
            return f"[{selector.name}]"
        elif isinstance(selector, AttributeValueSelector):
            return f'[{selector.name}="{selector.value}"]'
        elif isinstance(selector, AttributeContainsSelector):
            return f'[{selector.name}~="{selector.value}"]'
        elif isinstance(selector, ChainSelector):
            return "".join(self.render_selector(s) for s in selector.selectors)
        elif isinstance(selector, GroupSelector):
            return ",".join(self.render_selector(s) for s in selector.selectors)
        raise TypeError(f"Unsupported selector: {type(selector).__name__}")

    # ---- rules ----

    def flatten_rule(self, rule: Rule) -> List[Tuple[str, Tuple[Declaration, ...]]]:
        """
        Flatten a rule and its nested rules into (selector, declarations) pairs.

        Nested rules are visited depth-first, left to right: a child's whole
        subtree is emitted before its next sibling. Each nesting level joins
        the child selector onto its ancestors with the child combinator.

        Args:
            rule: Rule to flatten

        Returns:
            Ordered list of composed selector text and declarations
        """
        return list(self._walk_rule(rule, ""))

    def _walk_rule(
        self, rule: Rule, prefix: str
    ) -> Iterator[Tuple[str, Tuple[Declaration, ...]]]:
        selector = prefix + self.render_selector(rule.selector)
        yield selector, rule.declarations
        for sub_rule in rule.sub_rules:
            yield from self._walk_rule(sub_rule, selector + NESTING_COMBINATOR)

    def render_block(self, selector: str, declarations: Tuple[Declaration, ...]) -> str:
        body = "".join(self.render_declaration(d) for d in declarations)
        return f"{selector}{{{body}}}"

    def render_rule(self, rule: Rule) -> str:
        """Render a rule as one or more flat ``selector{declarations}`` blocks."""
        return "".join(
            self.render_block(selector, declarations)
            for selector, declarations in self.flatten_rule(rule)
        )

    # ---- media queries ----

    def render_feature(self, feature: MediaFeature) -> str:
        return f"({feature.property}:{feature.value})"

    def render_condition(self, condition: MediaCondition) -> str:
        if isinstance(condition, LoneCondition):
            return self.render_feature(condition.feature)
        if isinstance(condition, AndCondition):
            connective = "and"
        elif isinstance(condition, OrCondition):
            connective = "or"
        elif isinstance(condition, NotCondition):
            connective = "not"
        else:
            raise TypeError(f"Unsupported media condition: {type(condition).__name__}")
        return (
            f"{self.render_feature(condition.first)} {connective} "
            f"{self.render_feature(condition.second)}"
        )

    def render_media_query(self, media_query: MediaQuery) -> str:
        """Render the ``@media`` prelude, without the block body."""
        prelude = f"@media {CONSTRAINT_PREFIXES[media_query.constraint]}{media_query.media_type}"
        if media_query.features:
            # Validated models hold at most one condition; no connective is
            # inserted between entries.
            prelude += " and " + "".join(
                self.render_condition(c) for c in media_query.features
            )
        return prelude

    # ---- rule sets ----

    def render_rule_set(self, rule_set: RuleSet) -> str:
        body = "".join(self.render_rule(rule) for rule in rule_set.rules)
        body += "".join(self.render_rule_set(sub_set) for sub_set in rule_set.sub_sets)
        if rule_set.media_query is None:
            return body
        return f"{self.render_media_query(rule_set.media_query)}{{{body}}}"


def render_css(rule_set: RuleSet) -> str:
    """
    Render a rule set to CSS text.

    Args:
        rule_set: Rule set to render

    Returns:
        CSS string
    """
    return CSSRenderer().render(rule_set)
