from __future__ import annotations

import io
import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

import cardo
from cardo.common import (
    AppInfo,
    AppPaths,
    LoggingConfig,
    disable_library_logging,
    enable_library_logging,
    resolve_log_file,
    setup_cli_logging,
)
from cardo.dependency import parse_dependencies


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    yield
    logger.remove()
    logger.configure(extra={})
    disable_library_logging()


def _log_from_cardo() -> None:
    # Emits a DEBUG record from inside the cardo package
    parse_dependencies({"guide": "github:o/r/docs/guide.md"})


def test_setup_cli_logging_writes_json_under_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    config = LoggingConfig(log_level="DEBUG", format="json")

    handler_id = setup_cli_logging(AppInfo(environment="test"), config, AppPaths())
    _log_from_cardo()
    logger.remove(handler_id)

    log_file = tmp_path / "data" / "cardo" / "logs" / "cardo.log"
    records = [json.loads(line)["record"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    parsed = next(record for record in records if record["message"] == "Parsed dependency declarations")
    assert parsed["level"]["name"] == "DEBUG"
    assert parsed["extra"]["scope"] == "dependency.sources"
    assert parsed["extra"]["count"] == 1
    assert parsed["extra"]["env"] == "test"


def test_setup_cli_logging_text_to_configured_file(tmp_path: Path) -> None:
    log_file = tmp_path / "custom" / "cardo.log"
    config = LoggingConfig(log_level="DEBUG", log_file=log_file)

    handler_id = setup_cli_logging(AppInfo(environment="test"), config, AppPaths())
    _log_from_cardo()
    logger.remove(handler_id)

    content = log_file.read_text(encoding="utf-8")
    assert "dependency.sources:parse_dependencies" in content
    assert "Parsed dependency declarations" in content


def test_setup_cli_logging_respects_level(tmp_path: Path) -> None:
    log_file = tmp_path / "cardo.log"
    config = LoggingConfig(log_level="WARNING", log_file=log_file)

    handler_id = setup_cli_logging(AppInfo(environment="test"), config, AppPaths())
    _log_from_cardo()
    logger.remove(handler_id)

    assert "Parsed dependency declarations" not in log_file.read_text(encoding="utf-8")


def test_resolve_log_file_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = LoggingConfig.model_validate({"log_file": "~/logs/cardo.log"})

    assert resolve_log_file(config, AppPaths()) == tmp_path / "logs" / "cardo.log"


def test_resolve_log_file_defaults_to_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert resolve_log_file(LoggingConfig(), AppPaths()) == tmp_path / "cardo" / "logs" / "cardo.log"


def test_library_logging_is_silent_by_default() -> None:
    sink = io.StringIO()
    logger.add(sink, level="DEBUG")
    disable_library_logging()

    _log_from_cardo()

    assert sink.getvalue() == ""


def test_enable_logging_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    cardo.enable_logging("DEBUG")

    _log_from_cardo()

    assert "Parsed dependency declarations" in capsys.readouterr().err


def test_enable_library_logging_writes_to_sink_at_level() -> None:
    sink = io.StringIO()

    enable_library_logging("WARNING", sink=sink)
    _log_from_cardo()
    assert sink.getvalue() == ""

    enable_library_logging("DEBUG", sink=sink)
    _log_from_cardo()
    output = sink.getvalue()
    assert "dependency.sources:parse_dependencies:" in output
    assert "Parsed dependency declarations" in output
