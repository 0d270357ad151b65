from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol, Sequence

from .errors import ExecutableNotFoundError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Runs one invocation of the external tool and returns its exit status."""

    executable: str

    def run(self, args: Sequence[str], cwd: Path) -> int:
        ...


@dataclass(slots=True)
class SubprocessRunner:
    """Blocks on the child process; its stdout and stderr pass straight through."""

    executable: str = "kamu"

    def run(self, args: Sequence[str], cwd: Path) -> int:
        argv = [self.executable, *args]
        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except FileNotFoundError as exc:
            # A missing cwd is reported the same way; only the executable maps to 127.
            if exc.filename not in (None, self.executable):
                raise
            raise ExecutableNotFoundError(self.executable) from exc
        return completed.returncode


@dataclass(slots=True)
class DryRunRunner:
    """Prints each command instead of executing it."""

    executable: str = "kamu"
    calls: List[List[str]] = field(default_factory=list)

    def run(self, args: Sequence[str], cwd: Path) -> int:  # noqa: ARG002
        argv = [self.executable, *args]
        self.calls.append(argv)
        print(shlex.join(argv))
        return 0
