"""Fetch orchestration: one download per declared dependency."""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from result import Err, Ok

from cardo.common import create_logger
from cardo.constants import DEFAULT_MAX_RETRIES
from cardo.dependency import DependencySource, fetch_url, output_path

from .models import FetchResult
from .protocol import TextFetcher

logger = create_logger("fetcher")


class Fetcher:
    """Downloads declared dependencies into an output directory.

    Every dependency produces exactly one FetchResult. A failure is recorded
    on that dependency's result and never stops the rest of the batch.
    """

    def __init__(
        self,
        client: TextFetcher,
        output_dir: Path,
        *,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_workers: int = 1,
    ) -> None:
        self._client = client
        self._output_dir = Path(output_dir)
        self._max_retries = max_retries
        self._max_workers = max(1, max_workers)

    def fetch_all(
        self,
        dependencies: Mapping[str, DependencySource],
        force: bool = False,
    ) -> list[FetchResult]:
        logger.info(
            "Fetching dependencies",
            count=len(dependencies),
            force=force,
            workers=self._max_workers,
        )

        if self._max_workers == 1 or len(dependencies) <= 1:
            results = [self.fetch_one(name, source, force) for name, source in dependencies.items()]
        else:
            results = self._fetch_concurrently(dependencies, force)

        failed = sum(1 for result in results if not result.success)
        logger.info("Fetch finished", succeeded=len(results) - failed, failed=failed)
        return results

    def fetch_one(self, name: str, source: DependencySource, force: bool = False) -> FetchResult:
        destination = self._output_dir / output_path(source)

        if not destination.resolve().is_relative_to(self._output_dir.resolve()):
            return _failure(name, destination, f"Refusing to write outside {self._output_dir}: {destination}")

        if not force and destination.exists():
            logger.debug("Skipping existing file", name=name, path=str(destination))
            return _success(name, destination)

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return _failure(name, destination, f"Failed to create directory: {e}")

        url = fetch_url(source)
        logger.debug("Downloading dependency", name=name, url=url, path=str(destination))

        match self._client.fetch_with_retry(url, self._max_retries):
            case Ok(content):
                try:
                    destination.write_text(content, encoding="utf-8", newline="")
                except OSError as e:
                    return _failure(name, destination, f"Failed to write file: {e}")
                logger.debug("Dependency saved", name=name, path=str(destination))
                return _success(name, destination)
            case Err(error):
                return _failure(name, destination, error.message)

    def clean(self) -> None:
        clean_output_dir(self._output_dir)

    def _fetch_concurrently(
        self,
        dependencies: Mapping[str, DependencySource],
        force: bool,
    ) -> list[FetchResult]:
        results: list[FetchResult] = []

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [
                executor.submit(self.fetch_one, name, source, force) for name, source in dependencies.items()
            ]
            for future in as_completed(futures):
                results.append(future.result())

        return results


def clean_output_dir(output_dir: Path) -> None:
    """Remove the output directory and everything in it, then recreate it empty."""
    if output_dir.exists():
        logger.info("Removing output directory", path=str(output_dir))
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)


def _success(name: str, destination: Path) -> FetchResult:
    return FetchResult(name=name, path=str(destination), success=True)


def _failure(name: str, destination: Path, message: str) -> FetchResult:
    logger.error("Failed to fetch dependency", name=name, path=str(destination), error=message)
    return FetchResult(name=name, path=str(destination), success=False, error=message)
