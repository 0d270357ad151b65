from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass, field
from typing import List

from .config import DEMO_PLAN, BootstrapPlan
from .errors import CommandFailedError
from .logging_utils import log_with_extra
from .runner import CommandRunner
from .steps import Clock, Step, build_steps, local_now
from .workspace import Workspace

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StepResult:
    name: str
    argv: List[str]
    returncode: int


@dataclass(slots=True)
class BootstrapResult:
    workspace: Workspace
    reset: bool
    steps: List[StepResult] = field(default_factory=list)


class BootstrapSequencer:
    """Resets the workspace, then runs each step in order and stops at the first failure."""

    def __init__(
        self,
        workspace: Workspace,
        runner: CommandRunner,
        plan: BootstrapPlan = DEMO_PLAN,
        clock: Clock = local_now,
        reset_workspace: bool = True,
    ) -> None:
        self.workspace = workspace
        self.runner = runner
        self.plan = plan
        self.reset_workspace = reset_workspace
        self.steps: List[Step] = build_steps(plan, clock=clock)

    def run(self) -> BootstrapResult:
        self.workspace.ensure_root()
        reset = self.workspace.reset() if self.reset_workspace else False
        result = BootstrapResult(workspace=self.workspace, reset=reset)

        for index, step in enumerate(self.steps, start=1):
            args = step.args()
            argv = [self.runner.executable, *args]
            log_with_extra(
                logger,
                logging.INFO,
                f"[{index}/{len(self.steps)}] {step.name}: {shlex.join(argv)}",
                step=step.name,
                argv=argv,
            )
            returncode = self.runner.run(args, cwd=self.workspace.root)
            if returncode != 0:
                raise CommandFailedError(step.name, argv, returncode)
            log_with_extra(
                logger,
                logging.DEBUG,
                f"{step.name} finished with exit status {returncode}",
                step=step.name,
                returncode=returncode,
            )
            result.steps.append(StepResult(name=step.name, argv=argv, returncode=returncode))

        logger.info("Bootstrap of %s completed in %s steps", self.workspace.root, len(result.steps))
        return result
