from __future__ import annotations

from datetime import datetime, timedelta, timezone

from kamu_bootstrap.config import DEMO_PLAN
from kamu_bootstrap.steps import build_steps, iso_timestamp, local_now


def test_iso_timestamp_matches_date_iso_8601_seconds():
    moment = datetime(2024, 5, 1, 10, 15, 30, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert iso_timestamp(moment) == "2024-05-01T10:15:30+02:00"


def test_iso_timestamp_attaches_local_offset_to_naive_values():
    stamp = iso_timestamp(datetime(2024, 5, 1, 10, 15, 30))
    assert stamp.startswith("2024-05-01T10:15:30")
    assert stamp[19] in "+-"


def test_local_now_is_timezone_aware():
    assert local_now().tzinfo is not None


def test_demo_plan_builds_eight_steps():
    steps = build_steps(DEMO_PLAN)
    assert [step.name for step in steps] == [
        "init",
        "pull-remote:net.rocketpool.reth.mint-burn",
        "pull-remote:com.cryptocompare.ohlcv.eth-usd",
        "add",
        "pull-local",
        "pull-watermark:account.transactions",
        "pull-watermark:account.tokens.transfers",
        "pull-all",
    ]


def test_watermark_args_are_recomputed_on_every_call():
    moments = iter(
        [
            datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
            datetime(2024, 1, 1, 0, 0, 5, tzinfo=timezone.utc),
        ]
    )
    step = build_steps(DEMO_PLAN, clock=lambda: next(moments))[5]

    assert step.args()[2] == "2024-01-01T00:00:00+00:00"
    assert step.args()[2] == "2024-01-01T00:00:05+00:00"
