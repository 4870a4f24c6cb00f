"""Core command parsing for taskman."""

from .grammar import DEFAULT_GRAMMAR, Grammar
from .lifecycle import (
    initialize_command,
    initialize_instruction,
    initialize_tokens,
    release_command,
    release_instruction,
    release_tokens,
)
from .parser import CommandParser, parse, parse_line
from .text import is_whitespace
from .tokens import MAXARGS, MAXLINE, TokenBuffer
from .types import Command, Instruction

__all__ = [
    "DEFAULT_GRAMMAR",
    "MAXARGS",
    "MAXLINE",
    "Command",
    "CommandParser",
    "Grammar",
    "Instruction",
    "TokenBuffer",
    "initialize_command",
    "initialize_instruction",
    "initialize_tokens",
    "is_whitespace",
    "parse",
    "parse_line",
    "release_command",
    "release_instruction",
    "release_tokens",
]
