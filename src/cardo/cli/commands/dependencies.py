"""CLI commands for fetching and inspecting dependencies."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from cardo.common import create_logger, find_manifest, get_global_config_path, resolve_working_directory
from cardo.config import CardoConfig, ConfigError, load_config_or_default
from cardo.dependency import (
    BaseDependencyError,
    DependencySource,
    InvalidFormatError,
    InvalidGitHubUrlError,
    MissingFieldError,
    describe,
)
from cardo.fetcher import Fetcher, FetchResult, FetchSummary, clean_output_dir
from cardo.manifest import Manifest, ManifestError, ManifestNotFoundError, load_manifest
from cardo.settings import settings
from cardo.transport import HttpClient

logger = create_logger("cli.dependencies")

ForceOption = Annotated[
    bool,
    typer.Option("--force", "-f", help="Force re-download even if files exist"),
]

WorkingDirOption = Annotated[
    Path | None,
    typer.Option(
        "--working-dir",
        hidden=True,
        help="Override working directory used to locate the manifest and output directory.",
    ),
]


def fetch(force: ForceOption = False, working_dir: WorkingDirOption = None) -> None:
    """Fetch all dependencies declared in markdown.toml.

    Examples:

        cardo fetch

        # Re-download files that already exist
        cardo fetch --force
    """
    base_dir = resolve_working_directory(working_dir)
    config = _load_config()
    manifest = _load_manifest(base_dir)
    dependencies = _parse_dependencies(manifest)

    if not dependencies:
        typer.echo(f"No dependencies found in {settings.paths.manifest_filename}")
        return

    fetch_config = config.fetch
    output_dir = base_dir / fetch_config.output_dir

    typer.echo(f"Fetching {len(dependencies)} dependencies...")
    with HttpClient(
        settings.github_token,
        timeout=fetch_config.timeout,
        retry_not_found=fetch_config.retry_not_found,
    ) as client:
        fetcher = Fetcher(
            client,
            output_dir,
            max_retries=fetch_config.max_retries,
            max_workers=fetch_config.max_workers,
        )
        results = fetcher.fetch_all(dependencies, force=force)

    _report(results)

    if not FetchSummary.from_results(results).ok:
        raise typer.Exit(code=1)


def update(force: ForceOption = False, working_dir: WorkingDirOption = None) -> None:
    """Update dependencies (same as fetch)."""
    fetch(force=force, working_dir=working_dir)


def list_dependencies(working_dir: WorkingDirOption = None) -> None:
    """List all dependencies declared in markdown.toml."""
    base_dir = resolve_working_directory(working_dir)
    manifest = _load_manifest(base_dir)
    dependencies = _parse_dependencies(manifest)

    if not dependencies:
        typer.echo(f"No dependencies found in {settings.paths.manifest_filename}")
        return

    typer.secho("Dependencies:", bold=True)
    for name in sorted(dependencies):
        typer.echo(f"  {name}: {describe(dependencies[name])}")


def clean(working_dir: WorkingDirOption = None) -> None:
    """Remove every fetched file from the output directory."""
    base_dir = resolve_working_directory(working_dir)
    config = _load_config()
    output_dir = base_dir / config.fetch.output_dir

    try:
        clean_output_dir(output_dir)
    except OSError as e:
        typer.secho(f"error: failed to clean {output_dir}: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from e

    typer.secho(f"Cleaned {config.fetch.output_dir}/ directory", fg=typer.colors.GREEN)


def _load_config() -> CardoConfig:
    match load_config_or_default(get_global_config_path(settings.paths)):
        case Ok(config):
            return config
        case Err(error):
            _handle_config_error(error)
            raise typer.Exit(code=1)


def _load_manifest(base_dir: Path) -> Manifest:
    manifest_path = find_manifest(base_dir, settings.paths)
    if manifest_path is None:
        manifest_path = base_dir / settings.paths.manifest_filename

    match load_manifest(manifest_path):
        case Ok(manifest):
            return manifest
        case Err(error):
            _handle_manifest_error(error)
            raise typer.Exit(code=1)


def _parse_dependencies(manifest: Manifest) -> dict[str, DependencySource]:
    match manifest.parse_dependencies():
        case Ok(dependencies):
            return dependencies
        case Err(error):
            _handle_dependency_error(error)
            raise typer.Exit(code=1)


def _report(results: list[FetchResult]) -> None:
    for result in sorted(results, key=lambda r: r.name):
        if result.success:
            typer.secho(f"  ✓ {result.name} -> {result.path}", fg=typer.colors.GREEN)
        else:
            typer.secho(f"  ✗ {result.name}: {result.error or 'Unknown error'}", fg=typer.colors.RED)

    summary = FetchSummary.from_results(results)
    typer.echo(f"\nSummary: {summary.succeeded} succeeded, {summary.failed} failed")


def _handle_manifest_error(error: ManifestError) -> None:
    match error:
        case ManifestNotFoundError():
            typer.secho(
                f"error: {settings.paths.manifest_filename} not found",
                err=True,
                fg=typer.colors.RED,
            )
            typer.secho("hint: use 'cardo init' to create one", err=True, fg=typer.colors.CYAN)
        case _:
            typer.secho(f"error: {error.message} ({error.path})", err=True, fg=typer.colors.RED)


def _handle_dependency_error(error: BaseDependencyError) -> None:
    typer.secho(f"error: invalid dependency {error.describe()}", err=True, fg=typer.colors.RED)
    match error:
        case InvalidGitHubUrlError() | InvalidFormatError():
            typer.secho("hint: valid formats are:", err=True, fg=typer.colors.CYAN)
            typer.secho('  - "github:owner/repo/path/to/file.md"', err=True)
            typer.secho('  - "https://example.com/file.md"', err=True)
            typer.secho('  - { git = "github:owner/repo/path/to/file.md", tag = "v1.0" }', err=True)
        case MissingFieldError(field=field):
            typer.secho(f"hint: add a '{field}' key to the dependency table", err=True, fg=typer.colors.CYAN)


def _handle_config_error(error: ConfigError) -> None:
    message = error.message
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
