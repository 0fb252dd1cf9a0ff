"""
Raw readings as read back from the device, before any mapping onto weather
parameters. Two read-only vectors are kept: one for the text readings and one
for all numeric readings, each with its own property state.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from cloudwatcher.parsing.payload.model import Snapshot
from cloudwatcher.publishing.publisher import PropertyState


@dataclass(frozen=True)
class RawNumber:
    name: str
    label: str
    attr: str
    format: str
    minimum: float
    maximum: float
    step: float


RAW_TEXTS: tuple[tuple[str, str, str], ...] = (
    ("RAW_DATE", "dataGMTTime", "timestamp"),
    ("RAW_CWINFO", "cwinfo", "device_info"),
)

RAW_NUMBERS: tuple[RawNumber, ...] = (
    RawNumber("RAW_CLOUDS", "clouds", "clouds", "%.6f", -100, 100, 0.000001),
    RawNumber("RAW_TEMP", "temp", "temperature", "%.6f", -100, 100, 0.000001),
    RawNumber("RAW_WIND", "wind", "wind", "%.0f", 0, 200, 1.0),
    RawNumber("RAW_GUST", "gust", "gust", "%.0f", 0, 200, 1.0),
    RawNumber("RAW_RAIN", "rain", "rain", "%.0f", 0, 65535, 1.0),
    RawNumber("RAW_LIGHTMPSAS", "lightmpsas", "sky_quality", "%.2f", 0.0, 30.0, 0.01),
    RawNumber("RAW_SWITCH", "switch", "switch", "%.0f", 0, 1, 1.0),
    RawNumber("RAW_SAFE", "safe", "safe", "%.0f", 0, 1, 1.0),
    RawNumber("RAW_HUM", "hum", "humidity", "%.0f", 0.0, 100.0, 1.0),
    RawNumber("RAW_DEWP", "dewp", "dew_point", "%.6f", -100.0, 100.0, 0.000001),
    RawNumber("RAW_IR", "ir", "raw_ir", "%.6f", -100.0, 100.0, 0.000001),
    RawNumber("RAW_ABSPRESS", "abspress", "abs_pressure", "%.6f", 0.0, 2000.0, 0.000001),
    RawNumber("RAW_RELPRESS", "relpress", "rel_pressure", "%.6f", 0.0, 2000.0, 0.000001),
)


class RawReadings:
    def __init__(self) -> None:
        self.texts: dict[str, str] = {name: "n/a" for name, _, _ in RAW_TEXTS}
        self.numbers: dict[str, float] = {n.name: math.nan for n in RAW_NUMBERS}
        self.text_state = PropertyState.IDLE
        self.number_state = PropertyState.IDLE

    def _set_state(self, state: PropertyState) -> None:
        self.text_state = state
        self.number_state = state

    def mark_busy(self) -> None:
        self._set_state(PropertyState.BUSY)

    def mark_alert(self) -> None:
        self._set_state(PropertyState.ALERT)

    def update(self, snapshot: Snapshot) -> None:
        for name, _, attr in RAW_TEXTS:
            self.texts[name] = getattr(snapshot, attr)
        for number in RAW_NUMBERS:
            value = getattr(snapshot, number.attr)
            self.numbers[number.name] = math.nan if value is None else float(value)
        self._set_state(PropertyState.OK)

    def formatted(self, name: str) -> str:
        number = next(n for n in RAW_NUMBERS if n.name == name)
        return number.format % self.numbers[name]

    def as_dict(self) -> dict[str, Any]:
        return {
            "RAW_STRING": {
                "state": self.text_state.value,
                "values": [
                    {"name": name, "label": label, "value": self.texts[name]}
                    for name, label, _ in RAW_TEXTS
                ],
            },
            "RAW_FLOAT": {
                "state": self.number_state.value,
                "values": [
                    {
                        "name": n.name,
                        "label": n.label,
                        "value": None if math.isnan(self.numbers[n.name]) else self.numbers[n.name],
                        "display": self.formatted(n.name),
                        "min": n.minimum,
                        "max": n.maximum,
                        "step": n.step,
                    }
                    for n in RAW_NUMBERS
                ],
            },
        }
