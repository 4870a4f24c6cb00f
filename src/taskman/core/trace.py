"""Debug dump of a parse result."""

from __future__ import annotations

from loguru import logger

from taskman.core.tokens import TokenBuffer
from taskman.core.types import Instruction

RULE = "-----------------------"


def format_parse(
    line: str | None,
    instruction: Instruction | None,
    argv: TokenBuffer | None,
    location: str | None = None,
) -> list[str]:
    """Render the parse state as the lines of a framed debug block."""

    lines = [RULE]
    if location:
        lines.extend([f"- {location}", RULE])
    if line:
        lines.append(f"cmdline     = {line}")
    if instruction is not None:
        lines.append(f"instruction = {instruction.name}")
        if instruction.id:
            lines.append(f"buffer ID   = {instruction.id}")
        else:
            lines.append("buffer ID   = (default)")
        if instruction.file:
            lines.append(f"file        = {instruction.file}")
    if argv is not None:
        lines.extend(f"argv[{index}] == {token}" for index, token in enumerate(argv))
    lines.append(RULE)
    return lines


def log_parse(
    line: str | None,
    instruction: Instruction | None,
    argv: TokenBuffer | None,
    location: str | None = None,
) -> None:
    for entry in format_parse(line, instruction, argv, location):
        logger.debug(entry)
