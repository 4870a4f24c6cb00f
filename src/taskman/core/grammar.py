"""Instruction grammar tables."""

from __future__ import annotations

from dataclasses import dataclass

FULL: frozenset[str] = frozenset(
    {"help", "quit", "tasks", "delete", "run", "bg", "cancel", "log", "output", "suspend", "resume"}
)
ID_BEARING: frozenset[str] = frozenset({"delete", "run", "bg", "cancel", "log", "output", "suspend", "resume"})
FILE_BEARING: frozenset[str] = frozenset({"run", "bg", "log"})


@dataclass(frozen=True)
class Grammar:
    """Read-only instruction name sets consulted by the parser.

    Membership is exact string equality: no prefix matching and no case folding.
    """

    full: frozenset[str] = FULL
    id_bearing: frozenset[str] = ID_BEARING
    file_bearing: frozenset[str] = FILE_BEARING

    def is_recognized(self, name: str | None) -> bool:
        return name is not None and name in self.full

    def takes_id(self, name: str | None) -> bool:
        return name is not None and name in self.id_bearing

    def takes_file(self, name: str | None) -> bool:
        return name is not None and name in self.file_bearing


DEFAULT_GRAMMAR = Grammar()
