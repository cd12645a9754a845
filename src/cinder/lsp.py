"""Minimal LSP server for Cinder, lexical diagnostics only."""

from __future__ import annotations

import logging
from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.uris import to_fs_path

from cinder import __version__
from cinder.config import ConfigError, LexerOptions, load_options
from cinder.errors import LexError
from cinder.lexer import Lexer

logger = logging.getLogger(__name__)

server = LanguageServer(
    "cinder-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _options_for(uri: str) -> LexerOptions:
    """Load options from a cinder.toml beside the document, if it is a local file."""
    path = to_fs_path(uri)
    if path is None:
        return LexerOptions()
    try:
        return load_options(None, Path(path).parent)
    except (ConfigError, OSError, ValueError) as exc:
        # tomllib.TOMLDecodeError is a ValueError
        logger.warning("ignoring config for %s: %s", uri, exc)
        return LexerOptions()


def _utf16_range(source: str, line: int, column: int) -> tuple[int, int]:
    """Convert a code-point column to an LSP (UTF-16) range over one character."""
    lines = source.split("\n")
    text = lines[line - 1] if 0 < line <= len(lines) else ""
    start = len(text[:column].encode("utf-16-le")) // 2
    end = len(text[: column + 1].encode("utf-16-le")) // 2
    return start, max(end, start + 1)


def _validate(ls: LanguageServer, uri: str, options: LexerOptions | None = None) -> None:
    """Lex the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    if options is None:
        options = _options_for(uri)
    diagnostics: list[Diagnostic] = []

    try:
        for _ in Lexer(doc.source, options):
            pass
    except LexError as exc:
        line = exc.position.line - 1
        start_char, end_char = _utf16_range(doc.source, exc.position.line, exc.position.column)
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=start_char),
                    end=Position(line=line, character=end_char),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="cinder",
            )
        )
    logger.info("validated %s: %d diagnostic(s)", uri, len(diagnostics))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
