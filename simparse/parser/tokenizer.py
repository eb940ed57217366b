# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw command line into tokens with shell-like quoting rules.

The tokenizer is a small state machine driven one character at a time:

- `NORMAL`: whitespace separates tokens, quotes open a quoted section and a
  backslash in front of `"`, `'` or `\\` escapes that character.
- `SINGLE_QUOTE`: fully literal until the closing `'`.
- `DOUBLE_QUOTE`: literal until the closing `"`, except `\\"` which adds a quote
  character through `ESCAPE`.
- `ESCAPE`: appends the next character as-is and always returns to `NORMAL`.
  After `\\"` inside double quotes the quoted section is therefore over: the
  escaped quote is kept, and the rest of the line is scanned unquoted.

Malformed input never raises. An unterminated quote simply runs to the end of the
line and whatever was collected becomes the last token.
"""
from __future__ import annotations

from enum import Enum

WHITESPACE = frozenset(" \t")
ESCAPABLE = frozenset("\"'\\")


class TokenizerState(Enum):
    """Scanner states used by `tokenize`."""

    NORMAL = "normal"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    ESCAPE = "escape"


def tokenize(line: str) -> list[str]:
    """
    Split `line` into tokens, resolving quotes and escapes.

    Empty tokens are never emitted, so `'""'` on its own produces no token.

    Args:
        line (str): Raw command line.

    Returns:
        list[str]: Tokens in input order.
    """
    tokens: list[str] = []
    current: list[str] = []
    state = TokenizerState.NORMAL

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    for index, char in enumerate(line):
        next_char = line[index + 1] if index + 1 < len(line) else ""

        match state:
            case TokenizerState.NORMAL:
                if char == "\\" and next_char in ESCAPABLE:
                    state = TokenizerState.ESCAPE
                elif char == '"':
                    state = TokenizerState.DOUBLE_QUOTE
                elif char == "'":
                    state = TokenizerState.SINGLE_QUOTE
                elif char in WHITESPACE:
                    flush()
                else:
                    current.append(char)
            case TokenizerState.ESCAPE:
                current.append(char)
                state = TokenizerState.NORMAL
            case TokenizerState.SINGLE_QUOTE:
                if char == "'":
                    state = TokenizerState.NORMAL
                else:
                    current.append(char)
            case TokenizerState.DOUBLE_QUOTE:
                if char == "\\" and next_char == '"':
                    state = TokenizerState.ESCAPE
                elif char == '"':
                    state = TokenizerState.NORMAL
                else:
                    current.append(char)

    flush()
    return tokens
