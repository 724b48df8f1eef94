"""
Unit Tests for Command Line Interface
=====================================

Unit tests for argument handling, input/output files and error reporting.
"""

import io
import json

import pytest

from markupgen.cli import build_parser, main

from tests.data.sample_documents import (
    NESTED_RULE_SET_CSS,
    NESTED_RULE_SET_YAML,
    PAGE_NODE,
    PAGE_NODE_HTML,
)


class TestArgumentParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["css"])
        assert args.target == "css"
        assert args.input == "-"
        assert args.source_format is None
        assert args.output is None

    def test_unknown_target(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["svg"])


class TestMain:
    """Test end-to-end command runs."""

    def test_render_css_file(self, tmp_path, capsys):
        source = tmp_path / "styles.yaml"
        source.write_text(NESTED_RULE_SET_YAML, encoding="utf-8")

        assert main(["css", str(source)]) == 0
        assert capsys.readouterr().out == NESTED_RULE_SET_CSS

    def test_render_html_to_output_file(self, tmp_path):
        source = tmp_path / "page.json"
        source.write_text(json.dumps(PAGE_NODE), encoding="utf-8")
        output = tmp_path / "page.html"

        assert main(["html", str(source), "--output", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == PAGE_NODE_HTML

    def test_render_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"Text": "hi"}'))

        assert main(["html", "--format", "json"]) == 0
        assert capsys.readouterr().out == "hi"

    def test_missing_file(self, tmp_path, capsys):
        assert main(["css", str(tmp_path / "missing.json")]) == 1
        assert "error: " in capsys.readouterr().err

    def test_shape_mismatch(self, tmp_path, capsys):
        source = tmp_path / "bad.json"
        source.write_text('{"Comment": "x"}', encoding="utf-8")

        assert main(["html", str(source)]) == 1
        assert "unknown variant 'Comment'" in capsys.readouterr().err
