"""Shell input line parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from taskman.core.fields import FILE_TOKEN_INDEX, ID_TOKEN_INDEX, extract_file, extract_id
from taskman.core.grammar import DEFAULT_GRAMMAR, Grammar
from taskman.core.lifecycle import initialize_command, initialize_instruction, release_tokens
from taskman.core.tokens import MAXARGS, MAXLINE, TokenBuffer
from taskman.core.types import Command, Instruction
from taskman.errors import ConfigurationError, InvalidArgumentError

if TYPE_CHECKING:
    from taskman.config import Settings


class CommandParser:
    """Turn one input line into an instruction and its raw tokens."""

    def __init__(
        self,
        grammar: Grammar = DEFAULT_GRAMMAR,
        *,
        max_line: int = MAXLINE,
        max_args: int = MAXARGS,
    ) -> None:
        if max_line < 1:
            raise ConfigurationError(f"max_line must be positive, got {max_line}")
        if max_args < 2:
            raise ConfigurationError(f"max_args must be at least 2, got {max_args}")
        self.grammar = grammar
        self.max_line = max_line
        self.max_args = max_args

    @classmethod
    def from_settings(cls, settings: Settings, grammar: Grammar = DEFAULT_GRAMMAR) -> CommandParser:
        return cls(grammar, max_line=settings.max_line, max_args=settings.max_args)

    def parse(self, line: str | None, instruction: Instruction | None, argv: TokenBuffer | None) -> None:
        """Parse ``line`` into the caller's destinations.

        Malformed ids and missing arguments leave the matching fields at their
        defaults. When the name is a recognized instruction the token buffer is
        released; otherwise it stays populated so the caller can run the line
        as an external command.
        """

        if instruction is None or argv is None:
            raise InvalidArgumentError("instruction and token buffer destinations are required")
        if line is None:
            return

        initialize_instruction(instruction)
        count = argv.tokenize(line, max_line=self.max_line)
        if count == 0:
            logger.debug("parse.empty line={!r}", line)
            return

        instruction.name = argv.get(0)

        command_id, has_id = extract_id(argv.get(ID_TOKEN_INDEX), instruction.name, self.grammar)
        if has_id:
            instruction.id = command_id

        file, has_file = extract_file(argv.get(FILE_TOKEN_INDEX), instruction.name, self.grammar)
        if has_file:
            instruction.file = file

        builtin = self.grammar.is_recognized(instruction.name)
        if builtin:
            release_tokens(argv)
        logger.debug(
            "parse.done name={} id={} file={} builtin={} argc={}",
            instruction.name,
            instruction.id,
            instruction.file,
            builtin,
            len(argv),
        )

    def parse_line(self, line: str) -> Command:
        command = initialize_command(Instruction(), TokenBuffer(self.max_args))
        self.parse(line, command.instruction, command.argv)
        return command


_default_parser = CommandParser()


def parse(line: str | None, instruction: Instruction | None, argv: TokenBuffer | None) -> None:
    _default_parser.parse(line, instruction, argv)


def parse_line(line: str) -> Command:
    return _default_parser.parse_line(line)
