"""Cinder lexical analyzer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cinder.config import LexerOptions
    from cinder.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, options: LexerOptions | None = None) -> list[Token]:
    """Lex Cinder source into a list of tokens."""
    from cinder.lexer import tokenize as _tokenize

    return _tokenize(source, options)
