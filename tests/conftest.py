"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from cinder.config import LexerOptions
from cinder.lexer import tokenize
from cinder.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source with optional lexer options."""

    def _lex(source: str, **options: bool) -> list[Token]:
        return tokenize(source, LexerOptions(**options))

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def offsets(tokens: list[Token]) -> list[int]:
    """Return the start offset of each token."""
    return [t.position.offset for t in tokens]
