from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from cloudwatcher.publishing.publisher import PropertyState


@dataclass
class PublishedParameter:
    name: str
    label: str
    minimum: float
    maximum: float
    step: float
    value: float = math.nan
    critical: bool = False

    @property
    def status(self) -> PropertyState:
        if math.isnan(self.value):
            return PropertyState.IDLE
        if self.minimum <= self.value <= self.maximum:
            return PropertyState.OK
        return PropertyState.ALERT

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "min": self.minimum,
            "max": self.maximum,
            "step": self.step,
            "value": None if math.isnan(self.value) else self.value,
            "critical": self.critical,
            "status": self.status.value,
        }


class InMemoryParameterRegistry:
    """
    Parameter registry kept in process memory.

    Parameters keep their registration order. A parameter is OK while its
    value lies inside ``[minimum, maximum]``; critical parameters outside
    their range make the whole station unsafe.
    """

    def __init__(self) -> None:
        self._parameters: dict[str, PublishedParameter] = {}

    # ---- ParameterRegistry ----
    def register(self, name: str, label: str, minimum: float, maximum: float, step: float) -> None:
        if name in self._parameters:
            raise ValueError(f"Parameter '{name}' is already registered")
        self._parameters[name] = PublishedParameter(
            name=name, label=label, minimum=minimum, maximum=maximum, step=step
        )

    def set_value(self, name: str, value: float) -> None:
        self._require(name).value = value

    def mark_critical(self, name: str) -> None:
        self._require(name).critical = True

    # ---- helpers ----
    def _require(self, name: str) -> PublishedParameter:
        try:
            return self._parameters[name]
        except KeyError:
            raise KeyError(f"Parameter '{name}' is not registered") from None

    def get(self, name: str) -> Optional[PublishedParameter]:
        return self._parameters.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __len__(self) -> int:
        return len(self._parameters)

    @property
    def parameters(self) -> list[PublishedParameter]:
        return list(self._parameters.values())

    @property
    def critical(self) -> list[PublishedParameter]:
        return [p for p in self._parameters.values() if p.critical]

    def safety_status(self) -> PropertyState:
        states = [p.status for p in self.critical]
        if PropertyState.ALERT in states:
            return PropertyState.ALERT
        if not states or PropertyState.IDLE in states:
            return PropertyState.IDLE
        return PropertyState.OK

    def as_dict(self) -> dict[str, Any]:
        return {p.name: p.as_dict() for p in self._parameters.values()}
