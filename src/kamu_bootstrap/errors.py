"""Exception types raised while bootstrapping a workspace."""

from __future__ import annotations

from typing import Sequence

SHELL_NOT_FOUND_STATUS = 127


class BootstrapError(Exception):
    """Base class for bootstrap failures."""

    exit_code: int = 1


class PlanError(BootstrapError):
    exit_code = 2


class CommandFailedError(BootstrapError):
    def __init__(self, step: str, argv: Sequence[str], returncode: int) -> None:
        self.step = step
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"Step '{step}' failed with exit status {returncode}: {' '.join(self.argv)}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Children killed by a signal report -N; a shell would exit with 128 + N.
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode or 1


class ExecutableNotFoundError(BootstrapError):
    exit_code = SHELL_NOT_FOUND_STATUS

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"Executable '{executable}' not found on PATH")


class WorkspaceError(BootstrapError):
    exit_code = 2
