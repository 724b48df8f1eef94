"""
Test Configuration
==================

Pytest configuration with fixtures shared by all tests.
Provides test settings, renderers and sample model trees.
"""

import json
import pytest
import yaml

from markupgen.config import settings as settings_module
from markupgen.config.settings import Settings
from markupgen.core.rendering.css_renderer import CSSRenderer
from markupgen.core.rendering.html_renderer import HTMLRenderer
from markupgen.models.css import (
    BasicValue,
    Declaration,
    Rule,
    RuleSet,
    TagSelector,
)
from markupgen.models.html import Attribute, ElementNode, TextNode

from tests.data.sample_documents import NESTED_RULE_SET, PAGE_NODE


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"
    default_source_format: str = "auto"


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings, monkeypatch: pytest.MonkeyPatch):
    """Override application settings for testing."""
    monkeypatch.setattr(settings_module, "settings", test_settings)
    yield test_settings


@pytest.fixture
def css_renderer() -> CSSRenderer:
    """CSS renderer instance."""
    return CSSRenderer()


@pytest.fixture
def html_renderer() -> HTMLRenderer:
    """HTML renderer instance."""
    return HTMLRenderer()


@pytest.fixture
def body_rule() -> Rule:
    """Single ``body{color:blue;}`` rule."""
    return Rule(
        selector=TagSelector(name="body"),
        declarations=[Declaration(property="color", value=BasicValue(value="blue"))],
    )


@pytest.fixture
def body_rule_set(body_rule: Rule) -> RuleSet:
    """Rule set holding only the body rule, without a media query."""
    return RuleSet(rules=[body_rule])


@pytest.fixture
def page_node() -> ElementNode:
    """Small document tree with valued and toggle attributes."""
    return ElementNode(
        tag="body",
        attributes=[Attribute.valued("class", "page")],
        children=[
            ElementNode(tag="h1", children=[TextNode(text="Heading")]),
            TextNode(text="Some text"),
            ElementNode(
                tag="input",
                attributes=[Attribute.valued("type", "checkbox"), Attribute.toggle("disabled")],
            ),
        ],
    )


@pytest.fixture
def nested_rule_set_json() -> str:
    """JSON source for the three-level nested rule set."""
    return json.dumps(NESTED_RULE_SET)


@pytest.fixture
def nested_rule_set_yaml() -> str:
    """YAML source for the three-level nested rule set."""
    return yaml.dump(NESTED_RULE_SET)


@pytest.fixture
def page_node_json() -> str:
    """JSON source for the sample page."""
    return json.dumps(PAGE_NODE)


@pytest.fixture
def invalid_json() -> str:
    """JSON with a missing closing brace."""
    return '{"rules": [{"selector": {"Tag": "body"}}]'
