"""Tests for deferred on/off actions."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import pytest

from lumen import (
    ActionState,
    InvalidArgumentError,
    LightService,
    LightStatus,
    NotFoundError,
)
from lumen.scheduler import parse_fire_time


def _iso(moment: datetime) -> str:
    return moment.isoformat()


def test_schedule_fires_after_delay(service: LightService, timers, now: datetime) -> None:
    scheduled = service.schedule_action(1, _iso(now + timedelta(minutes=5)), "on")

    assert len(timers.created) == 1
    assert timers.created[0].started
    assert timers.created[0].delay == pytest.approx(300.0)
    assert scheduled.state is ActionState.PENDING
    assert service.get_light(1).status is LightStatus.OFF

    timers.fire_all()

    assert scheduled.state is ActionState.FIRED
    assert service.get_light(1).status is LightStatus.ON


def test_schedule_fires_only_once(service: LightService, timers, now: datetime) -> None:
    scheduled = service.schedule_action(1, _iso(now + timedelta(seconds=1)), "on")
    timers.fire_all()
    service.turn_off(1)
    timers.fire_all()
    assert scheduled.state is ActionState.FIRED
    assert service.get_light(1).status is LightStatus.OFF


def test_schedule_in_the_past_is_rejected(service: LightService, timers, now: datetime) -> None:
    with pytest.raises(InvalidArgumentError):
        service.schedule_action(1, _iso(now - timedelta(seconds=1)), "on")
    assert timers.created == []
    assert service.get_light(1).status is LightStatus.OFF


def test_schedule_at_current_instant_is_allowed(service: LightService, timers, now: datetime) -> None:
    service.schedule_action(2, _iso(now), "on")
    assert timers.created[0].delay == 0


def test_schedule_beyond_timer_limit_is_rejected(service: LightService, timers) -> None:
    with pytest.raises(InvalidArgumentError, match="too far in the future"):
        service.schedule_action(1, "2500-01-01T00:00:00Z", "on")
    assert timers.created == []


def test_schedule_unknown_light(service: LightService, timers, now: datetime) -> None:
    with pytest.raises(NotFoundError):
        service.schedule_action(12, _iso(now + timedelta(hours=1)), "off")
    assert timers.created == []


def test_schedule_rejects_unparseable_time(service: LightService) -> None:
    with pytest.raises(InvalidArgumentError):
        service.schedule_action(1, "tomorrow at noon", "on")


def test_schedule_rejects_unknown_action(service: LightService, now: datetime) -> None:
    with pytest.raises(InvalidArgumentError):
        service.schedule_action(1, _iso(now + timedelta(hours=1)), "toggle")


def test_deleted_light_is_not_resurrected(service: LightService, timers, now: datetime) -> None:
    scheduled = service.schedule_action(1, _iso(now + timedelta(minutes=1)), "on")
    service.delete_light_from_system(1)

    timers.fire_all()

    assert scheduled.state is ActionState.ABANDONED
    with pytest.raises(NotFoundError):
        service.get_light(1)
    assert sorted(service.list_lights()) == [2]


def test_scheduled_fire_goes_through_light_controller(
    service: LightService, timers, now: datetime, monkeypatch
) -> None:
    applied = []
    original = service.lights.apply

    def recording_apply(command):
        applied.append(command)
        return original(command)

    monkeypatch.setattr(service.lights, "apply", recording_apply)
    service.schedule_action(2, _iso(now + timedelta(minutes=1)), "off")
    timers.fire_all()

    assert len(applied) == 1
    assert applied[0].light_id == 2
    assert applied[0].action is LightStatus.OFF
    assert applied[0].source == "schedule"


def test_parse_fire_time_accepts_zulu_suffix() -> None:
    parsed = parse_fire_time("2030-01-01T12:00:00Z")
    assert parsed == datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_parse_fire_time_keeps_explicit_offset() -> None:
    parsed = parse_fire_time("2030-01-01T14:00:00+02:00")
    assert parsed == datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_parse_fire_time_treats_naive_times_as_local() -> None:
    parsed = parse_fire_time("2030-01-01T12:00:00")
    assert parsed.tzinfo is not None
    assert parsed.replace(tzinfo=None) == datetime(2030, 1, 1, 12, 0)


@pytest.mark.parametrize("value", ["", "   ", "not a time", "2030-13-01T00:00:00"])
def test_parse_fire_time_rejects_garbage(value: str) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_fire_time(value)


def test_daemon_timer_fires_scheduled_action() -> None:
    service = LightService()
    fire_at = datetime.now(timezone.utc) + timedelta(milliseconds=50)
    scheduled = service.schedule_action(1, _iso(fire_at), "on")

    deadline = time.monotonic() + 5
    while scheduled.state is ActionState.PENDING and time.monotonic() < deadline:
        time.sleep(0.01)

    assert scheduled.state is ActionState.FIRED
    assert service.get_light(1).status is LightStatus.ON


def test_daemon_timer_rejects_far_future_before_starting(monkeypatch) -> None:
    failures = []
    monkeypatch.setattr("threading.excepthook", failures.append)
    service = LightService()

    with pytest.raises(InvalidArgumentError):
        service.schedule_action(1, "2500-01-01T00:00:00Z", "on")

    assert failures == []
    assert service.get_light(1).status is LightStatus.OFF
