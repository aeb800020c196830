"""Command construction from tokenized command strings."""

from cmdlex.commands.builder import Command, CommandBuilder, build_command

__all__ = ["Command", "CommandBuilder", "build_command"]
