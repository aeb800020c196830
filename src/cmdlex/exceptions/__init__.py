"""
cmdlex exception classes.

This package provides all exception types used throughout cmdlex for
consistent error handling and reporting.
"""

from cmdlex.exceptions.core import (
    CmdLexError,
    ErrorContext,
    ErrorLevel,
    ExpressionSubstitutionError,
    TokenizeError,
    UnterminatedBraceError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)

__all__ = [
    "CmdLexError",
    "ErrorContext",
    "ErrorLevel",
    "ExpressionSubstitutionError",
    "TokenizeError",
    "UnterminatedBraceError",
    "UnterminatedEscapeError",
    "UnterminatedQuoteError",
]
