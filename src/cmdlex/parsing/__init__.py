"""
cmdlex parsing components.

This package provides the finite-state tokenizer that splits command strings
into quoted, braced and bare-word tokens.
"""

from cmdlex.parsing.tokenizer import (
    SPLIT_WHITESPACE,
    ScanState,
    Token,
    TokenKind,
    Tokenizer,
    tokenize,
)

__all__ = [
    "SPLIT_WHITESPACE",
    "ScanState",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
]
