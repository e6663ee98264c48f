"""CLI command for creating a new manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from cardo.common import create_logger, resolve_working_directory
from cardo.manifest import render_template
from cardo.settings import settings

logger = create_logger("cli.project")

WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory the manifest is created in.",
    ),
]


def init(
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Project name (default: current directory name)"),
    ] = None,
    working_dir: WorkingDirOption = None,
) -> None:
    """Initialize a new project with an empty manifest.

    Examples:

        cardo init

        cardo init --name my-docs
    """
    base_dir = resolve_working_directory(working_dir)
    manifest_path = base_dir / settings.paths.manifest_filename

    if manifest_path.exists():
        typer.secho(f"error: {manifest_path.name} already exists", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    project_name = name or base_dir.name or "my-project"

    try:
        manifest_path.write_text(render_template(project_name), encoding="utf-8")
    except OSError as e:
        typer.secho(f"error: failed to write {manifest_path.name}: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from e

    logger.info("Manifest created", path=str(manifest_path), name=project_name)
    typer.secho(f"Created {manifest_path.name}", fg=typer.colors.GREEN)
