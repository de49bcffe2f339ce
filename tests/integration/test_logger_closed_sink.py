from __future__ import annotations

import logging
from pathlib import Path

import pytest

from neologger.core.errors import LogStatus
from neologger.core.models import LogLevel
from neologger.services.logger import Logger, LoggerState


@pytest.fixture()
def unwritable_path(tmp_path: Path) -> Path:
    return tmp_path / "missing-dir" / "app.log"


@pytest.mark.integration
def test_construction_reports_open_failure(unwritable_path: Path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="neologger"):
        logger = Logger(unwritable_path)

    assert logger.state is LoggerState.CLOSED
    assert not logger.is_open
    assert any("Open file error" in r.getMessage() for r in caplog.records)


@pytest.mark.integration
def test_closed_sink_still_prints_to_console(unwritable_path: Path, fixed_clock, capsys, caplog) -> None:
    logger = Logger(unwritable_path, clock=fixed_clock)
    caplog.clear()

    with caplog.at_level(logging.ERROR, logger="neologger"):
        status = logger.log(LogLevel.INFO, "x", to_console=True, to_file=True)

    assert status is LogStatus.OPEN_ERROR
    assert not unwritable_path.exists()
    assert capsys.readouterr().out == "[2024-01-15 09:30:00] [INFO]: x\n"
    assert [r.getMessage() for r in caplog.records] == [f"Open file error: {unwritable_path}"]


@pytest.mark.integration
def test_coupled_sinks_suppress_console(unwritable_path: Path, fixed_clock, capsys) -> None:
    logger = Logger(unwritable_path, clock=fixed_clock, couple_console_to_file=True)

    status = logger.log(LogLevel.INFO, "x", to_console=True, to_file=True)

    assert status is LogStatus.OPEN_ERROR
    assert not unwritable_path.exists()
    assert capsys.readouterr().out == ""


@pytest.mark.integration
def test_console_only_ignores_closed_file(unwritable_path: Path, fixed_clock, capsys) -> None:
    logger = Logger(unwritable_path, clock=fixed_clock, couple_console_to_file=True)

    status = logger.log(LogLevel.ERROR, "console only", to_console=True, to_file=False)

    assert status is LogStatus.OK
    assert capsys.readouterr().out == "[2024-01-15 09:30:00] [ERROR]: console only\n"


@pytest.mark.integration
def test_closed_sink_skips_identity_when_nothing_is_written(unwritable_path: Path, identity) -> None:
    logger = Logger(
        unwritable_path,
        template="%login% %message%",
        identity=identity,
        couple_console_to_file=True,
    )

    assert logger.log(LogLevel.INFO, "x", to_console=True) is LogStatus.OPEN_ERROR
    assert identity.login_calls == 0
