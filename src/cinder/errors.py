"""Error types with formatted source context."""

from __future__ import annotations

from cinder.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        # Split only on "\n", the same way the cursor counts lines
        lines = self.source.split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * col
        carets = "^" * self._underline_len(source_line)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col + 1}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )

    def _underline_len(self, source_line: str) -> int:
        return 1


class UndefinedTokenError(LexError):
    """No token rule matches the character (or character pair) at the position."""


class UnterminatedStringError(LexError):
    """End of input reached inside a string literal; position is the opening quote."""

    def _underline_len(self, source_line: str) -> int:
        # Underline from the opening quote to the end of its line
        return max(1, len(source_line) - self.position.column)


class MalformedLiteralError(LexError):
    """Scanned numeric text failed to parse. Indicates a lexer bug, not bad input."""

    def __init__(self, message: str, position: Position, source: str, text: str) -> None:
        self.text = text
        super().__init__(message, position, source)

    def _underline_len(self, source_line: str) -> int:
        return max(1, len(self.text))
