"""Ordered invocations of the external tool that make up a bootstrap."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List

from .config import BootstrapPlan

Clock = Callable[[], datetime]


def local_now() -> datetime:
    return datetime.now().astimezone()


def iso_timestamp(moment: datetime) -> str:
    """Seconds precision with a UTC offset, e.g. ``2024-05-01T10:15:30+02:00``."""

    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.isoformat(timespec="seconds")


@dataclass(slots=True, frozen=True)
class Step:
    """One external invocation.

    Arguments are produced by ``build_args`` when the step is executed, so a
    step that embeds the current time reads the clock at that moment.
    """

    name: str
    build_args: Callable[[], List[str]]

    def args(self) -> List[str]:
        return self.build_args()


def _fixed(*args: str) -> Callable[[], List[str]]:
    frozen = list(args)
    return lambda: list(frozen)


def _with_watermark(dataset: str, clock: Clock) -> Callable[[], List[str]]:
    def _build() -> List[str]:
        return ["pull", "--set-watermark", iso_timestamp(clock()), dataset]

    return _build


def build_steps(plan: BootstrapPlan, clock: Clock = local_now) -> List[Step]:
    steps = [Step("init", _fixed("init"))]
    for name, url in zip(plan.remote_datasets, plan.remote_urls()):
        steps.append(Step(f"pull-remote:{name}", _fixed("pull", url)))
    if plan.definitions:
        steps.append(Step("add", _fixed("add", *plan.definitions)))
    if plan.pull_together:
        steps.append(Step("pull-local", _fixed("pull", *plan.pull_together)))
    for dataset in plan.watermark_targets:
        steps.append(Step(f"pull-watermark:{dataset}", _with_watermark(dataset, clock)))
    steps.append(Step("pull-all", _fixed("pull", "--all")))
    return steps
