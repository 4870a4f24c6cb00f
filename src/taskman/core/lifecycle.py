"""Initialize and release instructions and token buffers."""

from __future__ import annotations

from taskman.core.tokens import TokenBuffer
from taskman.core.types import Command, Instruction
from taskman.errors import InvalidArgumentError


def initialize_instruction(instruction: Instruction | None) -> Instruction:
    if instruction is None:
        raise InvalidArgumentError("instruction destination is required")
    instruction.reset()
    return instruction


def initialize_tokens(argv: TokenBuffer | None) -> TokenBuffer:
    if argv is None:
        raise InvalidArgumentError("token buffer destination is required")
    argv.initialize()
    return argv


def initialize_command(instruction: Instruction | None, argv: TokenBuffer | None) -> Command:
    """Initialize both destinations, failing before touching either if one is missing."""

    if instruction is None or argv is None:
        raise InvalidArgumentError("instruction and token buffer destinations are required")
    return Command(instruction=initialize_instruction(instruction), argv=initialize_tokens(argv))


def release_instruction(instruction: Instruction | None) -> None:
    if instruction is not None:
        instruction.reset()


def release_tokens(argv: TokenBuffer | None) -> None:
    if argv is not None:
        argv.release()


def release_command(instruction: Instruction | None, argv: TokenBuffer | None) -> None:
    release_instruction(instruction)
    release_tokens(argv)
