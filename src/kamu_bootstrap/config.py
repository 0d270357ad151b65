from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import PlanError

S3_BASE_URL = "https://s3.us-west-2.amazonaws.com/datasets.kamu.dev/odf/v1/contrib/"


@dataclass(slots=True, frozen=True)
class BootstrapPlan:
    """Datasets the bootstrap pulls, registers and executes.

    Attributes:
        remote_base_url: Prefix joined with each remote dataset name.
        remote_datasets: Remote datasets pulled one after the other.
        definitions: Dataset definition files registered with a single ``add``.
        pull_together: Local datasets pulled together in one invocation.
        watermark_targets: Local datasets pulled with a fresh watermark each.
    """

    remote_base_url: str = S3_BASE_URL
    remote_datasets: Tuple[str, ...] = (
        "net.rocketpool.reth.mint-burn",
        "com.cryptocompare.ohlcv.eth-usd",
    )
    definitions: Tuple[str, ...] = (
        "datasets/account.tokens.portfolio.yaml",
        "datasets/account.tokens.portfolio.market-value.yaml",
        "datasets/account.tokens.portfolio.usd.yaml",
        "datasets/account.tokens.transfers.yaml",
        "datasets/account.transactions.yaml",
    )
    pull_together: Tuple[str, ...] = ("account.transactions", "account.tokens.transfers")
    watermark_targets: Tuple[str, ...] = ("account.transactions", "account.tokens.transfers")

    def remote_urls(self) -> List[str]:
        return [f"{self.remote_base_url}{name}" for name in self.remote_datasets]


DEMO_PLAN = BootstrapPlan()

_LIST_KEYS = ("remote_datasets", "definitions", "pull_together", "watermark_targets")


def _parse_names(key: str, raw: Any) -> Tuple[str, ...]:
    if not isinstance(raw, (list, tuple)) or not all(isinstance(item, str) for item in raw):
        raise PlanError(f"Plan key '{key}' must be a list of strings")
    return tuple(raw)


def parse_plan(raw: Dict[str, Any], base: BootstrapPlan = DEMO_PLAN) -> BootstrapPlan:
    """Overlay the keys present in ``raw`` on ``base``."""

    overrides: Dict[str, Any] = {}
    if "remote_base_url" in raw:
        if not isinstance(raw["remote_base_url"], str):
            raise PlanError("Plan key 'remote_base_url' must be a string")
        overrides["remote_base_url"] = raw["remote_base_url"]
    for key in _LIST_KEYS:
        if key in raw:
            overrides[key] = _parse_names(key, raw[key])

    unknown = sorted(set(raw) - set(_LIST_KEYS) - {"remote_base_url"})
    if unknown:
        raise PlanError(f"Unknown plan keys: {', '.join(unknown)}")
    return replace(base, **overrides)


def load_plan(plan_path: Optional[Path]) -> BootstrapPlan:
    if plan_path is None:
        return DEMO_PLAN
    if not plan_path.exists():
        raise PlanError(f"Plan file not found at {plan_path}")

    try:
        with plan_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise PlanError(f"Plan file {plan_path} is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise PlanError(f"Plan file {plan_path} must contain a mapping")
    return parse_plan(raw)


class Settings(BaseSettings):
    kamu_bin: str = Field(default="kamu")
    kamu_workspace: Path = Field(default_factory=Path.cwd)
    log_level: str = Field(default="INFO")
    log_format: Literal["plain", "json"] = Field(default="plain")

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_log_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
