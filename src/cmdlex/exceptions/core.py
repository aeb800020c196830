"""
Exception classes for cmdlex command processing.

This module defines specific exception types for the error conditions that can
occur while splitting a command string into tokens and while substituting
braced expressions into a command.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Command line and caret only
    DEVELOPER = "developer"  # Adds raw character and token indices


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where in the command text an error was detected so it can be
    rendered as the original line with a caret under the offending character.

    Params:
        command_text: The original command text that caused the error
        position: Character index the error refers to
        token_index: Index of the token being built when the error occurred
    """

    command_text: str | None = None
    position: int | None = None
    token_index: int | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.command_text is not None:
            # Newlines and tabs would break caret alignment
            flat = self.command_text.replace("\n", " ").replace("\t", " ")
            lines.append(f"  command: {flat}")
            if self.position is not None:
                lines.append("           " + " " * self.position + "^")

        if error_level == ErrorLevel.DEVELOPER:
            if self.position is not None:
                lines.append(f"  at index {self.position}")
            if self.token_index is not None:
                lines.append(f"  in token {self.token_index}")

        return "\n".join(lines)


class CmdLexError(Exception):
    """Base exception for all cmdlex errors."""

    pass


class TokenizeError(CmdLexError):
    """Raised when a command string cannot be split into tokens."""

    delimiter_description = "delimiter"

    def __init__(
        self,
        command_text: str,
        position: int,
        token_index: int | None = None,
    ):
        """
        Initialize the exception.

        Params:
            command_text: The full input that failed to tokenize
            position: Index of the character that opened the unterminated construct
            token_index: Index of the token that was being accumulated
        """
        self.command_text = command_text
        self.position = position
        self.context = ErrorContext(
            command_text=command_text,
            position=position,
            token_index=token_index,
        )
        super().__init__(
            f"Unterminated {self.delimiter_description} starting at index {position}"
        )

    def format(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """Render the message followed by the location block."""
        location = self.context.format_location(error_level)
        if not location:
            return str(self)
        return f"{self}\n{location}"


class UnterminatedQuoteError(TokenizeError):
    """Raised when a double quote is opened and never closed."""

    delimiter_description = "double quote"


class UnterminatedEscapeError(TokenizeError):
    """Raised when a quoted span ends with a backslash and nothing after it."""

    delimiter_description = "escape sequence"


class UnterminatedBraceError(TokenizeError):
    """Raised when a curly brace is opened and never closed."""

    delimiter_description = "brace"


class ExpressionSubstitutionError(CmdLexError):
    """Raised when a braced expression cannot be compiled or evaluated."""

    def __init__(self, expression: str, reason: str, token_index: int | None = None):
        """
        Initialize the exception.

        Params:
            expression: Source text of the braced expression
            reason: The underlying reason for the failure
            token_index: Position of the token within the command
        """
        self.expression = expression
        self.reason = reason
        self.token_index = token_index
        super().__init__(f"Cannot substitute expression '{{{expression}}}': {reason}")
