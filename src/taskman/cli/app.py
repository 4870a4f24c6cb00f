"""CLI main module for taskman."""

from __future__ import annotations

import json

import typer

from taskman.config import Settings, get_settings
from taskman.core.parser import CommandParser
from taskman.core.text import is_whitespace
from taskman.core.trace import log_parse
from taskman.core.types import Command
from taskman.errors import TaskmanError
from taskman.logging_utils import configure_logging

from .render import Renderer

QUIT_INSTRUCTION = "quit"

app = typer.Typer(
    name="taskman",
    help="Parse task-management shell input lines.",
    add_completion=False,
    rich_markup_mode="rich",
)


def create_renderer() -> Renderer:
    return Renderer()


def _load(renderer: Renderer) -> tuple[Settings, CommandParser]:
    try:
        settings = get_settings()
        return settings, CommandParser.from_settings(settings)
    except TaskmanError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc


def _command_payload(command: Command) -> dict[str, object]:
    instruction = command.instruction
    return {
        "instruction": instruction.name,
        "id": instruction.id,
        "file": instruction.file,
        "argv": list(command.argv),
    }


@app.command("parse")
def parse_command(
    line: str = typer.Argument(..., help="One shell input line"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    trace: bool = typer.Option(False, "--trace", help="Dump the parse state to stderr"),
) -> None:
    """Parse one line and show the instruction and leftover arguments."""

    renderer = create_renderer()
    _, parser = _load(renderer)
    if trace:
        configure_logging(profile="trace", level="DEBUG")

    with parser.parse_line(line) as command:
        if trace:
            log_parse(line, command.instruction, command.argv, "parse")
        if as_json:
            typer.echo(json.dumps(_command_payload(command)))
        else:
            renderer.command(command)


@app.command("shell")
def shell() -> None:
    """Read lines interactively and show how each one parses."""

    renderer = create_renderer()
    settings, parser = _load(renderer)
    renderer.welcome()
    while True:
        try:
            line = renderer.get_user_input(settings.prompt)
        except (EOFError, KeyboardInterrupt):
            break
        if is_whitespace(line):
            continue

        with parser.parse_line(line) as command:
            renderer.command(command)
            if command.instruction.name == QUIT_INSTRUCTION:
                break
