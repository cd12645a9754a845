"""Human-readable token dump for debugging."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from cinder.tokens import Token


def format_token(token: Token) -> str:
    """Render a token as ``line:column TYPE value``."""
    pos = token.position
    head = f"{pos.line}:{pos.column} {token.type.name}"
    if token.value is None:
        return head
    return f"{head} {token.value!r}"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for token in tokens:
        file.write(format_token(token) + "\n")
