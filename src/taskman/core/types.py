"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from taskman.core.tokens import TokenBuffer


@dataclass
class Instruction:
    """Structured result of parsing one input line."""

    name: str | None = None
    id: int = 0
    file: str | None = None

    def reset(self) -> None:
        self.name = None
        self.id = 0
        self.file = None

    @property
    def is_empty(self) -> bool:
        return self.name is None


@dataclass
class Command:
    """An instruction together with the raw tokens left for the caller."""

    instruction: Instruction = field(default_factory=Instruction)
    argv: TokenBuffer = field(default_factory=TokenBuffer)

    def release(self) -> None:
        self.instruction.reset()
        self.argv.release()

    def __enter__(self) -> Command:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.release()
