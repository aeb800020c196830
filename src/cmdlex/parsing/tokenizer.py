"""
Tokenizer for redis-cli style command strings.

This module splits a raw command string into argument tokens. Words are
separated by tabs, spaces and newlines, except inside double-quoted spans
(literal text) and curly-brace spans (expressions substituted later).

The scan is a single forward pass driven by an explicit ScanState; one
virtual end-of-input event closes the pending word or reports which
delimiter was left open.
"""

import logging
from enum import Enum

from attrs import frozen

from cmdlex.exceptions.core import (
    UnterminatedBraceError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)

logger = logging.getLogger(__name__)

# Carriage return is not a splitter; it is ordinary token content
SPLIT_WHITESPACE = frozenset("\t \n")
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"


class ScanState(Enum):
    """State of the tokenizer between two characters."""

    WORD = "word"  # Inside an unquoted word, or right after a closed span
    SPLIT_MARKER = "split_marker"  # Between tokens
    DOUBLE_QUOTE = "double_quote"  # Inside an open double quote
    ESCAPED_DOUBLE_QUOTE = "escaped_double_quote"  # After a backslash in a quote
    BRACED = "braced"  # Inside an open brace span


class TokenKind(Enum):
    """How a token was delimited in the source text."""

    WORD = "word"
    QUOTED = "quoted"
    BRACED = "braced"


@frozen
class Token:
    """A single command argument.

    Params:
        text: Token content with delimiters stripped and escapes kept verbatim
        quoted: Token was delimited by double quotes
        braced: Token was delimited by curly braces
    """

    text: str
    quoted: bool = False
    braced: bool = False

    def __attrs_post_init__(self):
        if self.quoted and self.braced:
            raise ValueError(
                f"Token {self.text!r} cannot be both quoted and braced"
            )

    @property
    def kind(self) -> TokenKind:
        if self.quoted:
            return TokenKind.QUOTED
        if self.braced:
            return TokenKind.BRACED
        return TokenKind.WORD

    @property
    def is_expression(self) -> bool:
        """Check if this token should be evaluated rather than used literally."""
        return self.braced


class Tokenizer:
    """Finite-state scanner for command strings."""

    def tokenize(self, text: str) -> list[Token]:
        """
        Split a command string into tokens.

        Params:
            text: The raw command text

        Returns:
            Tokens in input order; empty for empty or whitespace-only input

        Raises:
            UnterminatedQuoteError: If a double quote is never closed
            UnterminatedEscapeError: If a quoted span ends with a backslash
            UnterminatedBraceError: If a curly brace is never closed
        """
        tokens: list[Token] = []
        state = ScanState.SPLIT_MARKER
        chars: list[str] = []
        quoted = False
        braced = False
        # Opening delimiter of the current span, and the most recent backslash
        span_start = 0
        escape_start = 0

        for position, char in enumerate(text):
            if state is ScanState.SPLIT_MARKER:
                if char in SPLIT_WHITESPACE:
                    continue
                if char == DOUBLE_QUOTE:
                    quoted = True
                    span_start = position
                    state = ScanState.DOUBLE_QUOTE
                elif char == OPEN_BRACE:
                    braced = True
                    span_start = position
                    state = ScanState.BRACED
                else:
                    chars.append(char)
                    state = ScanState.WORD

            elif state is ScanState.WORD:
                if char in SPLIT_WHITESPACE:
                    tokens.append(Token("".join(chars), quoted, braced))
                    chars = []
                    quoted = braced = False
                    state = ScanState.SPLIT_MARKER
                else:
                    chars.append(char)

            elif state is ScanState.DOUBLE_QUOTE:
                if char == DOUBLE_QUOTE:
                    state = ScanState.WORD
                elif char == BACKSLASH:
                    escape_start = position
                    state = ScanState.ESCAPED_DOUBLE_QUOTE
                else:
                    chars.append(char)

            elif state is ScanState.ESCAPED_DOUBLE_QUOTE:
                chars.append(BACKSLASH)
                chars.append(char)
                state = ScanState.DOUBLE_QUOTE

            elif state is ScanState.BRACED:
                if char == CLOSE_BRACE:
                    state = ScanState.WORD
                else:
                    chars.append(char)

        # End of input
        if state is ScanState.WORD:
            tokens.append(Token("".join(chars), quoted, braced))
        elif state is ScanState.DOUBLE_QUOTE:
            raise UnterminatedQuoteError(text, span_start, len(tokens))
        elif state is ScanState.ESCAPED_DOUBLE_QUOTE:
            raise UnterminatedEscapeError(text, escape_start, len(tokens))
        elif state is ScanState.BRACED:
            raise UnterminatedBraceError(text, span_start, len(tokens))

        logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
        return tokens


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize a command string.

    Params:
        text: The command string to split

    Returns:
        Tokens in input order

    Raises:
        TokenizeError: If a quote, escape or brace is left unterminated
    """
    return Tokenizer().tokenize(text)
