"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Operators
    PERCENT = auto()  # %
    PLUS = auto()  # +
    MINUS = auto()  # -
    SLASH = auto()  # /
    ASTERISK = auto()  # *
    EQUAL = auto()  # =
    DOUBLE_EQUAL = auto()  # ==
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    PERIOD = auto()  # .
    SEMICOLON = auto()  # ;
    AMPERSAND = auto()  # &
    AND = auto()  # &&
    BAR = auto()  # |
    OR = auto()  # ||
    PLUS_EQUAL = auto()  # +=
    MINUS_EQUAL = auto()  # -=
    SLASH_EQUAL = auto()  # /=
    ASTERISK_EQUAL = auto()  # *=

    # Literals: value is int, float or str
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()  # text between the quotes, no escape processing

    # Identifiers and keywords
    IDENT = auto()
    MATCH = auto()
    IMPORT = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 1-based line, 0-based column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its payload and original source text."""

    type: TokenType
    value: int | float | str | None
    raw: str
    position: Position

    @property
    def end_offset(self) -> int:
        return self.position.offset + len(self.raw)


KEYWORDS: dict[str, TokenType] = {
    "match": TokenType.MATCH,
    "import": TokenType.IMPORT,
}

# Characters that always form a token on their own.
SINGLE_CHAR: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "%": TokenType.PERCENT,
    ";": TokenType.SEMICOLON,
    ".": TokenType.PERIOD,
}

# Operators that may extend into a two-character form:
# char -> (single-char type, {second char -> two-char type})
OPERATORS: dict[str, tuple[TokenType, dict[str, TokenType]]] = {
    "!": (TokenType.BANG, {"=": TokenType.BANG_EQUAL}),
    "=": (TokenType.EQUAL, {"=": TokenType.DOUBLE_EQUAL}),
    "|": (TokenType.BAR, {"|": TokenType.OR}),
    "&": (TokenType.AMPERSAND, {"&": TokenType.AND}),
    "+": (TokenType.PLUS, {"=": TokenType.PLUS_EQUAL}),
    "-": (TokenType.MINUS, {"=": TokenType.MINUS_EQUAL}),
    "/": (TokenType.SLASH, {"=": TokenType.SLASH_EQUAL}),
    "*": (TokenType.ASTERISK, {"=": TokenType.ASTERISK_EQUAL}),
}

# Horizontal whitespace; newline is tracked separately.
BLANKS = frozenset(" \t\r")

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")


def match_keyword(text: str) -> TokenType:
    """Return the keyword type for *text*, or IDENT if it is not reserved."""
    return KEYWORDS.get(text, TokenType.IDENT)


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier (ASCII letter or underscore)."""
    return ch in _LETTERS


def is_ident_char(ch: str, allow_digits: bool = False) -> bool:
    """Return True if ch may continue an identifier."""
    return ch in _LETTERS or (allow_digits and ch in _DIGITS)
