"""Tests for the LSP server: diagnostic generation."""

from __future__ import annotations

from pathlib import Path

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from cinder.config import LexerOptions
from cinder.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.cn") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="cinder", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Lex errors -> Error severity
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_undefined_token(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("x = 1 $ 2")
        _validate(ls, "file:///test.cn")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "$" in d.message
        assert d.source == "cinder"
        assert d.range.start.line == 0
        assert d.range.start.character == 6
        assert d.range.end.character == 7

    def test_unterminated_string(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('a = "open\nstill open')
        _validate(ls, "file:///test.cn")

        d = published[0].diagnostics[0]
        assert "unterminated" in d.message
        assert d.range.start.line == 0
        assert d.range.start.character == 4

    def test_only_first_error_reported(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("$ @ #")
        _validate(ls, "file:///test.cn")

        assert len(published[0].diagnostics) == 1


# ---------------------------------------------------------------------------
# Clean document -> empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('import io;\nmatch x { "a" }')
        _validate(ls, "file:///test.cn")

        assert len(published) == 1
        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_explicit_options(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("1+2")
        _validate(ls, "file:///test.cn", LexerOptions(strict_operators=True))

        d = published[0].diagnostics[0]
        assert d.range.start.character == 1

    def test_config_beside_document(self, lsp_env, tmp_path: Path) -> None:
        ls, published, put = lsp_env
        (tmp_path / "cinder.toml").write_text("[lexer]\nstrict_operators = true\n")
        uri = (tmp_path / "doc.cn").as_uri()
        put("1+2", uri)
        _validate(ls, uri)

        assert len(published[0].diagnostics) == 1

    def test_broken_config_falls_back_to_defaults(self, lsp_env, tmp_path: Path) -> None:
        ls, published, put = lsp_env
        (tmp_path / "cinder.toml").write_text("[lexer\n")
        uri = (tmp_path / "doc.cn").as_uri()
        put("1+2", uri)
        _validate(ls, uri)

        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Position conversion (1-based line -> 0-based)
# ---------------------------------------------------------------------------


class TestPositionConversion:
    def test_error_on_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("valid first line\n  @ oops")
        _validate(ls, "file:///test.cn")

        d = published[0].diagnostics[0]
        assert d.range.start.line == 1
        assert d.range.start.character == 2

    def test_column_counts_utf16_units(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('"\U0001F600" $')
        _validate(ls, "file:///test.cn")

        d = published[0].diagnostics[0]
        assert d.range.start.character == 5
        assert d.range.end.character == 6

    def test_astral_offending_character_spans_two_units(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("a \U0001F600")
        _validate(ls, "file:///test.cn")

        d = published[0].diagnostics[0]
        assert d.range.start.character == 2
        assert d.range.end.character == 4
