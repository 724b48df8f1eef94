"""
Source Loader
=============

Read JSON or YAML documents holding the generic value for a rule set or
node tree, then build and render the typed models. This is the glue that
stands in for a scripting runtime when the value is already serialized.
"""

from typing import Any, Optional
import json
import yaml  # type: ignore[import-untyped]
from abc import ABC, abstractmethod

from markupgen.config.logging import get_logger
from markupgen.config.settings import get_settings
from markupgen.core.dsl.adapter import deserialize_node, deserialize_rule_set
from markupgen.core.errors import SourceLoadError
from markupgen.core.rendering.css_renderer import render_css
from markupgen.core.rendering.html_renderer import render_html
from markupgen.models.css import RuleSet
from markupgen.models.html import Node

logger = get_logger(__name__)


class BaseSourceLoader(ABC):
    """Abstract base class for source loaders."""

    @abstractmethod
    def load(self, content: str) -> Any:
        """Load source text into a generic value."""
        pass

    @abstractmethod
    def validate_syntax(self, content: str) -> bool:
        """Check that source text is well formed without building models."""
        pass


class JSONSourceLoader(BaseSourceLoader):
    """JSON source loader."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(loader="json")  # structlog.BoundLoggerBase

    def load(self, content: str) -> Any:
        """
        Load JSON source text.

        Args:
            content: Raw JSON text

        Returns:
            Generic value

        Raises:
            SourceLoadError: If the text is not valid JSON
        """
        try:
            self.logger.info("Loading JSON source")
            return json.loads(content)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON syntax at line {e.lineno}, column {e.colno}: {e.msg}"
            self.logger.error("JSON loading failed", error=error_msg)
            raise SourceLoadError(error_msg, line=e.lineno, column=e.colno) from e

    def validate_syntax(self, content: str) -> bool:
        try:
            json.loads(content)
            return True
        except json.JSONDecodeError:
            return False


class YAMLSourceLoader(BaseSourceLoader):
    """YAML source loader."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(loader="yaml")  # structlog.BoundLoggerBase

    def load(self, content: str) -> Any:
        """
        Load YAML source text.

        Args:
            content: Raw YAML text

        Returns:
            Generic value

        Raises:
            SourceLoadError: If the text is not valid YAML or is empty
        """
        try:
            self.logger.info("Loading YAML source")
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML syntax: {e}"
            self.logger.error("YAML loading failed", error=error_msg)
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                raise SourceLoadError(error_msg, line=mark.line + 1, column=mark.column + 1) from e
            raise SourceLoadError(error_msg) from e

        if raw_data is None:
            raise SourceLoadError("Empty YAML document")
        return raw_data

    def validate_syntax(self, content: str) -> bool:
        try:
            yaml.safe_load(content)
            return True
        except yaml.YAMLError:
            return False


class SourceLoaderFactory:
    """Factory for creating source loaders based on content type."""

    _loaders = {
        "json": JSONSourceLoader,
        "yaml": YAMLSourceLoader,
    }

    @classmethod
    def create_loader(cls, loader_type: str) -> BaseSourceLoader:
        """
        Create a source loader instance.

        Args:
            loader_type: Type of loader ("json", "yaml")

        Returns:
            Source loader instance

        Raises:
            ValueError: If loader type is not supported
        """
        if loader_type not in cls._loaders:
            raise ValueError(f"Unsupported source format: {loader_type}")

        return cls._loaders[loader_type]()

    @classmethod
    def detect_loader_type(cls, content: str) -> str:
        """
        Detect source format from content.

        Args:
            content: Raw source text

        Returns:
            Detected loader type
        """
        content = content.strip()
        if content.startswith(("{", "[")):
            return "json"
        elif content.startswith(("---", "- ")) or "\n-" in content[:100]:
            return "yaml"
        else:
            # Try to parse as JSON first, fallback to YAML
            try:
                json.loads(content)
                return "json"
            except json.JSONDecodeError:
                return "yaml"


def _resolve_format(content: str, source_format: Optional[str]) -> str:
    if not source_format:
        source_format = get_settings().default_source_format
    if source_format == "auto":
        return SourceLoaderFactory.detect_loader_type(content)
    return source_format


def load_source(content: str, source_format: Optional[str] = None) -> Any:
    """
    Load source text into a generic value.

    Args:
        content: Raw source text
        source_format: "json", "yaml" or "auto"; defaults to the configured format

    Returns:
        Generic value

    Raises:
        SourceLoadError: If the content is empty, unreadable or of an unknown format
    """
    if not content or not content.strip():
        raise SourceLoadError("Empty source content provided")

    try:
        loader = SourceLoaderFactory.create_loader(_resolve_format(content, source_format))
    except ValueError as e:
        raise SourceLoadError(str(e)) from e
    return loader.load(content)


def validate_source_syntax(content: str, source_format: Optional[str] = None) -> bool:
    """
    Validate source syntax without building models.

    Args:
        content: Raw source text
        source_format: Optional format override

    Returns:
        True if syntax is valid, False otherwise
    """
    if not content or not content.strip():
        return False

    try:
        loader = SourceLoaderFactory.create_loader(_resolve_format(content, source_format))
        return loader.validate_syntax(content)
    except ValueError:
        return False


def make_css(content: str, source_format: Optional[str] = None) -> RuleSet:
    """Load source text and build a ``RuleSet``."""
    return deserialize_rule_set(load_source(content, source_format))


def make_html(content: str, source_format: Optional[str] = None) -> Node:
    """Load source text and build an HTML ``Node``."""
    return deserialize_node(load_source(content, source_format))


def render_css_source(content: str, source_format: Optional[str] = None) -> str:
    """Load, build and render a stylesheet document."""
    return render_css(make_css(content, source_format))


def render_html_source(content: str, source_format: Optional[str] = None) -> str:
    """Load, build and render an HTML document."""
    return render_html(make_html(content, source_format))
