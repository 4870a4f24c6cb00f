"""taskman - command parser for the task-management shell."""

from .core import Command, CommandParser, Instruction, TokenBuffer, is_whitespace, parse, parse_line

__version__ = "0.1.0"

__all__ = ["Command", "CommandParser", "Instruction", "TokenBuffer", "is_whitespace", "parse", "parse_line"]
