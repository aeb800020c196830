"""
Command construction from tokenized command strings.

Each token maps to one argument: quoted and bare-word tokens become literal
strings, braced tokens are compiled as Python expressions and evaluated
against a caller-supplied namespace. The first argument names the command.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from cmdlex.exceptions.core import ExpressionSubstitutionError
from cmdlex.parsing.tokenizer import Token, Tokenizer

logger = logging.getLogger(__name__)


class Command(BaseModel):
    """
    A command ready to be handed to a client.

    The name and arguments are kept apart so that callers can inspect the
    command; `to_args` gives the flat form expected by
    `execute_command(*args)` style client APIs.
    """

    model_config = ConfigDict(frozen=True)

    name: Any
    args: tuple[Any, ...] = ()

    def arg(self, value: Any) -> "Command":
        """Return a copy of this command with one more argument appended."""
        return Command(name=self.name, args=(*self.args, value))

    def to_args(self) -> tuple[Any, ...]:
        return (self.name, *self.args)

    def __str__(self) -> str:
        """
        Render the command as a single display line.

        Arguments containing whitespace are wrapped in double quotes without
        escaping, so the result is for logs and messages only and does not
        always tokenize back to the same arguments.
        """
        return " ".join(_render(value) for value in self.to_args())


def _render(value: Any) -> str:
    text = str(value)
    if not text or any(char.isspace() for char in text):
        return '"' + text + '"'
    return text


class CommandBuilder:
    """
    Builds `Command` objects from command strings.

    Braced expressions are evaluated with Python `eval` against the namespace.
    The namespace and the command text are trusted caller input: builtins are
    hidden from expressions, but this is not a sandbox, and an expression can
    still reach arbitrary objects through attribute access. Never build
    commands from untrusted text.
    """

    def __init__(self, namespace: Mapping[str, Any] | None = None):
        self.namespace = dict(namespace or {})
        self.tokenizer = Tokenizer()

    def build(self, text: str) -> Command | None:
        """
        Tokenize a command string and map every token to an argument.

        Params:
            text: Command text, e.g. 'SET "my key" {value}'

        Returns:
            The built command, or None when the text holds no tokens

        Raises:
            TokenizeError: If a quote, escape or brace is left unterminated
            ExpressionSubstitutionError: If a braced expression fails
        """
        tokens = self.tokenizer.tokenize(text)
        if not tokens:
            return None

        values = [
            self.map_token(token, token_index) for token_index, token in enumerate(tokens)
        ]
        command = Command(name=values[0], args=tuple(values[1:]))
        logger.debug("Built command %r with %d arguments", command.name, len(command.args))
        return command

    def map_token(self, token: Token, token_index: int | None = None) -> Any:
        """
        Convert a single token into a command argument.

        Params:
            token: Token produced by the tokenizer
            token_index: Position of the token, used in error messages

        Returns:
            The token text for literal tokens, the evaluated value for braced ones
        """
        if not token.is_expression:
            return token.text
        return self._evaluate(token.text, token_index)

    def _evaluate(self, expression: str, token_index: int | None) -> Any:
        """
        Evaluate a braced expression against the namespace.

        Namespace names are passed as globals so that lambdas and
        comprehensions see them too. Not a sandbox; see CommandBuilder.
        """
        source = expression.strip()
        if not source:
            raise ExpressionSubstitutionError(expression, "empty expression", token_index)

        try:
            code = compile(source, "<command>", "eval")
        except SyntaxError as e:
            raise ExpressionSubstitutionError(
                expression, f"invalid syntax: {e.msg}", token_index
            ) from e

        try:
            return eval(code, {**self.namespace, "__builtins__": {}})
        except Exception as e:
            raise ExpressionSubstitutionError(
                expression, f"{type(e).__name__}: {e}", token_index
            ) from e


def build_command(
    text: str, namespace: Mapping[str, Any] | None = None
) -> Command | None:
    """
    Convenience function to build a command from a string.

    Params:
        text: The command string
        namespace: Names visible to braced expressions

    Returns:
        The built command, or None for empty input

    Raises:
        TokenizeError: If the command text is malformed
        ExpressionSubstitutionError: If a braced expression fails
    """
    builder = CommandBuilder(namespace)
    return builder.build(text)
