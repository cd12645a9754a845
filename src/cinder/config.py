"""Lexer options and TOML config loading."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "cinder.toml"


class ConfigError(Exception):
    """Raised when a config file holds a value of the wrong type."""


@dataclass(frozen=True, slots=True)
class LexerOptions:
    """Switches for the lexer's open policy choices.

    Attributes:
        strict_operators: Only allow a one-character operator (``+``, ``=``, ...)
            when it is followed by a blank or end of input; anything else is
            an undefined token. Off by default, so ``1+2`` lexes.
        identifier_digits: Allow digits after the first character of an
            identifier (``foo1``). Off by default.
    """

    strict_operators: bool = False
    identifier_digits: bool = False

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> LexerOptions:
        """Build options from the ``[lexer]`` table of a loaded config.

        Unknown keys are ignored; a missing table gives the defaults.
        """
        table = config.get("lexer")
        if not isinstance(table, dict):
            return cls()

        values: dict[str, bool] = {}
        for f in fields(cls):
            if f.name not in table:
                continue
            value = table[f.name]
            if not isinstance(value, bool):
                raise ConfigError(
                    f"lexer.{f.name} must be true or false, got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def load_options(config_path: Path | None, search_dir: Path) -> LexerOptions:
    """Load a config file and return the lexer options it selects."""
    return LexerOptions.from_dict(load_config(config_path, search_dir))
