from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from cloudwatcher.parsing.payload.fields import PAYLOAD_FIELDS


class SwitchState(IntEnum):
    CLOSED = 0
    OPEN = 1


@dataclass(frozen=True)
class DecodeError:
    """Base for problems found while decoding a payload."""

    @property
    def message(self) -> str:
        return "decode error"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingRequiredField(DecodeError):
    field: str

    @property
    def message(self) -> str:
        return f"Required field {self.field} not found"


@dataclass(frozen=True)
class UnrecognizedField(DecodeError):
    line: str

    @property
    def message(self) -> str:
        return f"Did not understand value: {self.line}"


@dataclass(frozen=True)
class Snapshot:
    """
    One fully decoded set of readings from a single poll.

    Required readings are always populated. Optional readings are ``None``
    when the device did not report them.

    Attributes:
        timestamp: The device-formatted date (``dataGMTTime``).
        device_info: The device information string (``cwinfo``).
        clouds: The sky temperature proxy used for cloud detection.
        temperature: Ambient temperature in °C.
        sky_quality: Sky brightness in mag/arcsec^2 (``lightmpsas``).
        warnings: Lines the decoder did not understand.
    """
    timestamp: str
    device_info: str
    clouds: float
    temperature: float
    sky_quality: float
    wind: Optional[float] = None
    gust: Optional[float] = None
    rain: Optional[float] = None
    switch: SwitchState = SwitchState.CLOSED
    safe: bool = False
    humidity: Optional[float] = None
    dew_point: Optional[float] = None
    raw_ir: Optional[float] = None
    abs_pressure: Optional[float] = None
    rel_pressure: Optional[float] = None
    warnings: tuple[UnrecognizedField, ...] = ()

    @property
    def sky_temperature(self) -> float:
        return self.clouds

    def is_present(self, attr: str) -> bool:
        return getattr(self, attr) is not None

    def as_dict(self) -> dict[str, Any]:
        readings: dict[str, Any] = {}
        for payload_field in PAYLOAD_FIELDS:
            value = getattr(self, payload_field.attr)
            if isinstance(value, SwitchState):
                value = int(value)
            readings[payload_field.key] = value
        return readings
