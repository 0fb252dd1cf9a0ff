from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterable, Optional, Protocol, Union

from cloudwatcher.parsing.payload.model import DecodeError, Snapshot
from cloudwatcher.publishing.catalog import WEATHER_PARAMETERS, ParameterDefinition

logger = logging.getLogger(__name__)


class PropertyState(str, Enum):
    IDLE = "Idle"
    OK = "Ok"
    BUSY = "Busy"
    ALERT = "Alert"


class ParameterRegistry(Protocol):
    def register(self, name: str, label: str, minimum: float, maximum: float, step: float) -> None:
        ...

    def set_value(self, name: str, value: float) -> None:
        ...

    def mark_critical(self, name: str) -> None:
        ...


def parameter_value(snapshot: Snapshot, definition: ParameterDefinition) -> float:
    """Numeric value of a parameter, NaN when the reading is absent."""
    value = getattr(snapshot, definition.attr)
    if value is None:
        return math.nan
    return float(value)


class ParameterPublisher:
    """
    Maps decoded snapshots onto the published weather parameters.

    Parameters are registered once by ``initialize`` and updated in place by
    every ``refresh``. The publisher owns the latest snapshot; a refresh
    replaces it wholesale.
    """

    def __init__(
        self,
        registry: ParameterRegistry,
        catalog: Iterable[ParameterDefinition] = WEATHER_PARAMETERS,
    ) -> None:
        self.registry = registry
        self.catalog = tuple(catalog)
        self.snapshot: Optional[Snapshot] = None
        self.state = PropertyState.IDLE
        self._registered: Optional[tuple[ParameterDefinition, ...]] = None

    @property
    def is_initialized(self) -> bool:
        return self._registered is not None

    @property
    def registered(self) -> frozenset[str]:
        return frozenset(d.name for d in self._registered or ())

    def initialize(self, first: Snapshot) -> frozenset[str]:
        if first is None:
            raise ValueError("initialize requires a decoded snapshot")
        if self._registered is not None:
            raise RuntimeError("Parameters are already registered")

        selected = [d for d in self.catalog if not d.optional or first.is_present(d.attr)]
        for definition in selected:
            self.registry.register(
                definition.name, definition.label, definition.minimum, definition.maximum, definition.step
            )
        for definition in selected:
            if definition.critical:
                self.registry.mark_critical(definition.name)

        self._registered = tuple(selected)
        self.snapshot = first
        logger.info("Registered weather parameters: %s", ", ".join(d.name for d in selected))
        return self.registered

    def refresh(self, result: Union[Snapshot, DecodeError, Exception]) -> PropertyState:
        """
        Push the values of a new snapshot to every registered parameter.

        Args:
            result: The outcome of the fetch and decode step. Anything other
                than a ``Snapshot`` is an upstream failure.

        Returns:
            ``PropertyState.OK`` after an update, ``PropertyState.ALERT`` when
            the upstream step failed and the last-known values were kept.
        """
        if self._registered is None:
            raise RuntimeError("Parameters have not been initialized")
        if not isinstance(result, Snapshot):
            logger.debug("Keeping last-known values after failure: %s", result)
            self.state = PropertyState.ALERT
            return self.state

        self.snapshot = result
        for definition in self._registered:
            self.registry.set_value(definition.name, parameter_value(result, definition))
        self.state = PropertyState.OK
        return self.state
