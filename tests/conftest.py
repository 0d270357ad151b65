from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from kamu_bootstrap.config import get_settings


@dataclass
class RecordingRunner:
    executable: str = "kamu"
    fail_on_call: Optional[int] = None
    fail_status: int = 1
    calls: List[List[str]] = field(default_factory=list)
    workspace_seen: List[bool] = field(default_factory=list)

    def run(self, args: Sequence[str], cwd: Path) -> int:
        self.calls.append([self.executable, *args])
        self.workspace_seen.append((cwd / ".kamu").exists())
        if args[:1] == ["init"]:
            (cwd / ".kamu").mkdir()
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            return self.fail_status
        return 0


class SteppingClock:
    def __init__(self, start: datetime) -> None:
        self.current = start
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        moment = self.current
        self.current = self.current + timedelta(seconds=1)
        return moment


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for var in ("KAMU_BIN", "KAMU_WORKSPACE", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2024, 5, 1, 10, 15, 30, tzinfo=timezone.utc))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
