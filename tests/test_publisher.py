"""Tests for ParameterPublisher registration and refresh."""
import math
from unittest.mock import MagicMock, call

import pytest

from cloudwatcher.parsing.payload import MissingRequiredField, Snapshot, SwitchState
from cloudwatcher.publishing import (
    InMemoryParameterRegistry,
    ParameterPublisher,
    PropertyState,
    WEATHER_PARAMETERS,
)
from cloudwatcher.transports import NetworkError

ALWAYS_ON = {"WEATHER_SAFE", "WEATHER_SWITCH", "WEATHER_SKYTEMP", "WEATHER_TEMP", "WEATHER_SKY_QUALITY"}


def _snapshot(**kwargs) -> Snapshot:
    base = dict(
        timestamp="2023-01-01T00:00:00",
        device_info="SOLO-1",
        clouds=-25.5,
        temperature=10.2,
        sky_quality=19.8,
    )
    base.update(kwargs)
    return Snapshot(**base)


def _full_snapshot() -> Snapshot:
    return _snapshot(
        wind=5.0,
        gust=8.0,
        rain=3100.0,
        humidity=60.0,
        dew_point=2.0,
        abs_pressure=950.0,
        rel_pressure=1013.0,
    )


def test_initialize_registers_always_on_only():
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    registered = publisher.initialize(_snapshot())
    assert registered == ALWAYS_ON
    assert {p.name for p in registry.parameters} == ALWAYS_ON
    assert {p.name for p in registry.critical} == {"WEATHER_SAFE", "WEATHER_SKYTEMP"}


def test_initialize_example_with_wind():
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    registered = publisher.initialize(_snapshot(wind=5.0, safe=True))
    assert registered == ALWAYS_ON | {"WEATHER_WIND"}
    for absent in ("WEATHER_GUST", "WEATHER_RAIN", "WEATHER_HUMIDITY", "WEATHER_DEWPOINT",
                   "WEATHER_ABSPRESS", "WEATHER_RELPRESS"):
        assert absent not in registry
    assert registry.get("WEATHER_WIND").critical


def test_initialize_registers_all_present_optionals():
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    registered = publisher.initialize(_full_snapshot())
    assert registered == {p.name for p in WEATHER_PARAMETERS}
    assert {p.name for p in registry.critical} == {
        "WEATHER_SAFE", "WEATHER_SKYTEMP", "WEATHER_WIND", "WEATHER_GUST", "WEATHER_RAIN"
    }


def test_initialize_uses_catalog_ranges():
    registry = MagicMock()
    publisher = ParameterPublisher(registry)
    publisher.initialize(_snapshot())
    registry.register.assert_has_calls([
        call("WEATHER_SAFE", "Safe", 1, 1, 0),
        call("WEATHER_SWITCH", "Switch", 1, 1, 0),
        call("WEATHER_SKYTEMP", "Sky Temperature [°C]", -100, -20, 10),
        call("WEATHER_TEMP", "Temperature [°C]", -30, 50, 10),
        call("WEATHER_SKY_QUALITY", "Sky Brightness [mag/arcsec^2]", 15, 23, 10),
    ])
    registry.mark_critical.assert_has_calls([call("WEATHER_SAFE"), call("WEATHER_SKYTEMP")])
    assert registry.mark_critical.call_count == 2


def test_initialize_only_once():
    publisher = ParameterPublisher(InMemoryParameterRegistry())
    publisher.initialize(_snapshot())
    with pytest.raises(RuntimeError):
        publisher.initialize(_full_snapshot())


def test_initialize_requires_snapshot():
    publisher = ParameterPublisher(InMemoryParameterRegistry())
    with pytest.raises(ValueError):
        publisher.initialize(None)
    assert not publisher.is_initialized


def test_refresh_before_initialize():
    publisher = ParameterPublisher(InMemoryParameterRegistry())
    with pytest.raises(RuntimeError):
        publisher.refresh(_snapshot())


def test_refresh_pushes_values():
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    publisher.initialize(_snapshot(wind=5.0))
    status = publisher.refresh(_snapshot(wind=7.0, safe=True, switch=SwitchState.OPEN, clouds=-30.0))
    assert status is PropertyState.OK
    assert publisher.state is PropertyState.OK
    assert registry.get("WEATHER_SAFE").value == 1.0
    assert registry.get("WEATHER_SWITCH").value == 1.0
    assert registry.get("WEATHER_SKYTEMP").value == -30.0
    assert registry.get("WEATHER_TEMP").value == 10.2
    assert registry.get("WEATHER_SKY_QUALITY").value == 19.8
    assert registry.get("WEATHER_WIND").value == 7.0


def test_refresh_keeps_registration_when_optional_disappears():
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    publisher.initialize(_snapshot(wind=5.0))
    publisher.refresh(_snapshot(wind=5.0))
    publisher.refresh(_snapshot())
    assert "WEATHER_WIND" in registry
    assert math.isnan(registry.get("WEATHER_WIND").value)
    assert registry.get("WEATHER_WIND").critical


def test_refresh_does_not_add_new_optionals():
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    publisher.initialize(_snapshot())
    publisher.refresh(_full_snapshot())
    assert {p.name for p in registry.parameters} == ALWAYS_ON


def test_refresh_replaces_snapshot():
    publisher = ParameterPublisher(InMemoryParameterRegistry())
    first = _snapshot()
    second = _snapshot(temperature=4.0)
    publisher.initialize(first)
    assert publisher.snapshot is first
    publisher.refresh(second)
    assert publisher.snapshot is second


@pytest.mark.parametrize("failure", [MissingRequiredField("temp"), NetworkError("timed out")])
def test_refresh_failure_keeps_values(failure):
    registry = InMemoryParameterRegistry()
    publisher = ParameterPublisher(registry)
    good = _snapshot(wind=5.0)
    publisher.initialize(good)
    publisher.refresh(good)
    status = publisher.refresh(failure)
    assert status is PropertyState.ALERT
    assert publisher.state is PropertyState.ALERT
    assert publisher.snapshot is good
    assert registry.get("WEATHER_WIND").value == 5.0

    assert publisher.refresh(good) is PropertyState.OK
