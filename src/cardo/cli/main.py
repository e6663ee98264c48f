from __future__ import annotations

import os
from typing import Annotated

import typer

from cardo.common import LoggingConfig, create_logger, get_global_config_path, setup_cli_logging
from cardo.config import load_config_or_default
from cardo.settings import settings

from .commands import dependencies as dependency_commands
from .commands import project as project_commands

logger = create_logger("cli")

app = typer.Typer(
    help="Manage Markdown files as dependencies.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("init")(project_commands.init)
app.command("fetch")(dependency_commands.fetch)
app.command("update")(dependency_commands.update)
app.command("list")(dependency_commands.list_dependencies)
app.command("clean")(dependency_commands.clean)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    config = load_config_or_default(get_global_config_path(settings.paths)).unwrap_or(None)
    logging_config = config.logging if config else LoggingConfig()

    if logging_config.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            paths=settings.paths,
        )
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the cardo CLI."""
    _setup_logging()
    app()
