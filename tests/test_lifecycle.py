import pytest

import taskman.core as core
from taskman.core.lifecycle import (
    initialize_command,
    initialize_instruction,
    initialize_tokens,
    release_command,
    release_instruction,
    release_tokens,
)
from taskman.core.tokens import TokenBuffer
from taskman.core.types import Instruction
from taskman.errors import InvalidArgumentError


def test_initialize_resets_structures() -> None:
    instruction = Instruction(name="log", id=2, file="x")
    argv = TokenBuffer()
    argv.tokenize("a b")
    command = initialize_command(instruction, argv)
    assert command.instruction is instruction
    assert command.argv is argv
    assert instruction == Instruction()
    assert argv == []


def test_initialize_rejects_missing_destinations() -> None:
    with pytest.raises(InvalidArgumentError):
        initialize_instruction(None)
    with pytest.raises(InvalidArgumentError):
        initialize_tokens(None)

    instruction = Instruction(name="run")
    with pytest.raises(InvalidArgumentError):
        initialize_command(instruction, None)
    assert instruction.name == "run"


def test_release_is_idempotent() -> None:
    instruction = Instruction(name="bg", id=1, file="a.sh")
    argv = TokenBuffer()
    argv.tokenize("/bin/true")
    release_command(instruction, argv)
    release_command(instruction, argv)
    assert instruction == Instruction()
    assert argv == []


def test_release_accepts_missing_structures() -> None:
    release_instruction(None)
    release_tokens(None)
    release_command(None, None)


def test_helpers_are_exported_from_core() -> None:
    assert core.initialize_command is initialize_command
    assert core.release_command is release_command
