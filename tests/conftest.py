from __future__ import annotations

from datetime import datetime

import pytest

from neologger.core.models import LogTimestamp


class CountingIdentity:
    """Identity provider fake that records how often it is asked."""

    def __init__(self, login: str = "alice", device: str = "workstation-01") -> None:
        self._login = login
        self._device = device
        self.login_calls = 0
        self.device_calls = 0

    def login(self) -> str:
        self.login_calls += 1
        return self._login

    def device(self) -> str:
        self.device_calls += 1
        return self._device


@pytest.fixture()
def fixed_timestamp() -> LogTimestamp:
    return LogTimestamp.from_datetime(datetime(2024, 1, 15, 9, 30, 0))


@pytest.fixture()
def fixed_clock(fixed_timestamp: LogTimestamp):
    return lambda: fixed_timestamp


@pytest.fixture()
def identity() -> CountingIdentity:
    return CountingIdentity()
