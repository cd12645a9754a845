"""Cinder lexer: converts source text into a lazy token stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cinder.config import LexerOptions
from cinder.errors import (
    LexError,
    MalformedLiteralError,
    UndefinedTokenError,
    UnterminatedStringError,
)
from cinder.tokens import (
    BLANKS,
    OPERATORS,
    SINGLE_CHAR,
    Position,
    Token,
    TokenType,
    is_digit,
    is_ident_char,
    is_ident_start,
    match_keyword,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Cursor:
    """Mutable scan position. ``offset`` is authoritative; line/column follow it."""

    line: int = 1
    column: int = 0
    offset: int = 0

    def advance(self) -> None:
        self.offset += 1
        self.column += 1

    def newline(self) -> None:
        """Move to the start of the next line (call after advancing past ``\\n``)."""
        self.line += 1
        self.column = 0

    def position(self) -> Position:
        return Position(self.line, self.column, self.offset)


class Lexer:
    """Pull tokens one at a time from Cinder source text.

    The lexer is an iterator: each ``next()`` scans exactly one token.
    Lexical errors are raised from the pull that hits them.
    """

    def __init__(self, source: str, options: LexerOptions | None = None) -> None:
        self._source = source
        self._options = options if options is not None else LexerOptions()
        self._cursor = Cursor()

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok is None:
            raise StopIteration
        return tok

    @property
    def position(self) -> Position:
        """Snapshot of the current cursor."""
        return self._cursor.position()

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def peek(self, k: int = 0) -> str:
        """Return the character ``k`` places past the cursor, or "" if out of range."""
        idx = self._cursor.offset + k
        if 0 <= idx < len(self._source):
            return self._source[idx]
        return ""

    def advance(self) -> None:
        """Move the cursor forward by exactly one character."""
        self._cursor.advance()

    def _emit(self, tt: TokenType, value: int | float | str | None, start: Position) -> Token:
        raw = self._source[start.offset : self._cursor.offset]
        return Token(tt, value, raw, start)

    def _error(
        self,
        cls: type[LexError],
        message: str,
        pos: Position | None = None,
        **extra: str,
    ) -> LexError:
        if pos is None:
            pos = self._cursor.position()
        logger.debug("lex error at %d:%d: %s", pos.line, pos.column, message)
        return cls(message, pos, self._source, **extra)

    # ------------------------------------------------------------------
    # Production step
    # ------------------------------------------------------------------

    def next_token(self) -> Token | None:
        """Scan and return the next token, or None at end of input."""
        ch = self._skip_whitespace()

        if not ch:
            logger.debug("end of input at offset %d", self._cursor.offset)
            return None

        if ch in SINGLE_CHAR:
            start = self._cursor.position()
            self.advance()
            return self._emit(SINGLE_CHAR[ch], None, start)

        if ch in OPERATORS:
            return self._lex_operator(ch)

        if is_digit(ch):
            return self._lex_number()

        if ch == '"':
            return self._lex_string()

        if is_ident_start(ch):
            return self._lex_identifier()

        raise self._error(UndefinedTokenError, f"undefined token {ch!r}")

    def _skip_whitespace(self) -> str:
        """Consume blanks and newlines; return the first other character or ""."""
        while True:
            ch = self.peek()
            if ch == "\n":
                self.advance()
                self._cursor.newline()
            elif ch in BLANKS:
                self.advance()
            else:
                return ch

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _lex_operator(self, ch: str) -> Token:
        start = self._cursor.position()
        single, doubles = OPERATORS[ch]
        nxt = self.peek(1)

        if nxt in doubles:
            self.advance()
            self.advance()
            return self._emit(doubles[nxt], None, start)

        if self._options.strict_operators and nxt and nxt not in BLANKS:
            raise self._error(UndefinedTokenError, f"undefined token {ch + nxt!r}", start)

        self.advance()
        return self._emit(single, None, start)

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _lex_number(self) -> Token:
        start = self._cursor.position()
        is_float = False
        while True:
            ch = self.peek()
            if is_digit(ch):
                self.advance()
            elif ch == "." and not is_float and is_digit(self.peek(1)):
                # A dot only belongs to the number when a digit follows
                is_float = True
                self.advance()
            else:
                break

        text = self._source[start.offset : self._cursor.offset]
        try:
            value: int | float = float(text) if is_float else int(text)
        except ValueError as exc:
            raise self._error(
                MalformedLiteralError,
                f"malformed numeric literal {text!r}: {exc}",
                start,
                text=text,
            ) from exc

        return self._emit(TokenType.FLOAT if is_float else TokenType.INTEGER, value, start)

    def _lex_string(self) -> Token:
        start = self._cursor.position()
        self.advance()  # consume opening quote

        while True:
            ch = self.peek()
            if not ch:
                raise self._error(UnterminatedStringError, "unterminated string literal", start)
            self.advance()
            if ch == '"':
                break
            if ch == "\n":
                self._cursor.newline()

        raw = self._source[start.offset : self._cursor.offset]
        return Token(TokenType.STRING, raw[1:-1], raw, start)

    def _lex_identifier(self) -> Token:
        start = self._cursor.position()
        allow_digits = self._options.identifier_digits
        while is_ident_char(self.peek(), allow_digits):
            self.advance()

        text = self._source[start.offset : self._cursor.offset]
        tt = match_keyword(text)
        return self._emit(tt, text if tt is TokenType.IDENT else None, start)


def tokenize(source: str, options: LexerOptions | None = None) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return list(Lexer(source, options))
