"""CLI main module for mongosh-clone."""

from __future__ import annotations

from typing import NoReturn

import typer
from loguru import logger

from mongosh_clone.cli.render import Renderer
from mongosh_clone.config import Settings, get_settings
from mongosh_clone.core.parser import parse
from mongosh_clone.core.validator import METHOD_RULES
from mongosh_clone.errors import MongoshCloneError
from mongosh_clone.logging_utils import configure_logging

USAGE_EXAMPLE = 'Example: mongosh-clone parse movies.find({"year": 1999})'

app = typer.Typer(
    name="mongosh-clone",
    help="Parse MongoDB shell-style collection operations.",
    add_completion=False,
    no_args_is_help=True,
)


def _exit_with_error(renderer: Renderer, message: str) -> NoReturn:
    renderer.error(message)
    raise typer.Exit(1)


def _load_settings(renderer: Renderer, **overrides: object) -> Settings:
    try:
        return get_settings(**{key: value for key, value in overrides.items() if value is not None})
    except MongoshCloneError as exc:
        _exit_with_error(renderer, str(exc))


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser steps at DEBUG level"),
) -> None:
    renderer = Renderer()
    settings = _load_settings(renderer)
    configure_logging("DEBUG" if verbose else settings.log_level, profile=settings.log_profile)


@app.command("parse")
def parse_command(
    operation: list[str] | None = typer.Argument(None, help="Operation such as movies.find({})"),  # noqa: B008
    escape_mode: str | None = typer.Option(None, "--escape-mode", help="single or parity"),
) -> None:
    """Parse one `collection.method(args)` operation and print it as JSON."""

    renderer = Renderer()
    settings = _load_settings(renderer, escape_mode=escape_mode)
    renderer = Renderer(indent=settings.output_indent)

    if not operation:
        renderer.error("Please provide a database operation")
        renderer.info(USAGE_EXAMPLE)
        raise typer.Exit(1)

    # the shell may have split an unquoted operation on spaces
    raw = " ".join(operation)
    try:
        call = parse(raw, escape_mode=settings.escape_mode)
    except MongoshCloneError as exc:
        logger.debug("cli.parse.error kind={}", type(exc).__name__)
        _exit_with_error(renderer, str(exc))
    renderer.json(call.to_dict())


@app.command("methods")
def methods_command() -> None:
    """List supported operations and their arguments."""

    Renderer().method_table(list(METHOD_RULES.values()))
