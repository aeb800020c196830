"""
cmdlex - Build client commands from redis-cli style command strings

cmdlex splits command text into quoted, braced and bare-word tokens and turns
them into command objects, substituting braced expressions from a namespace.
"""

from importlib.metadata import version

from cmdlex.commands.builder import Command, CommandBuilder, build_command
from cmdlex.exceptions.core import (
    CmdLexError,
    ExpressionSubstitutionError,
    TokenizeError,
    UnterminatedBraceError,
    UnterminatedEscapeError,
    UnterminatedQuoteError,
)
from cmdlex.parsing.tokenizer import Token, Tokenizer, tokenize

__version__ = version("cmdlex")

__all__ = [
    "__version__",
    "Command",
    "CommandBuilder",
    "build_command",
    "Token",
    "Tokenizer",
    "tokenize",
    "CmdLexError",
    "TokenizeError",
    "UnterminatedQuoteError",
    "UnterminatedEscapeError",
    "UnterminatedBraceError",
    "ExpressionSubstitutionError",
]
