from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Union

from cloudwatcher.driver.config_store import AddressStore
from cloudwatcher.driver.raw import RawReadings
from cloudwatcher.parsing.payload import DecodeError, Snapshot, parse_payload
from cloudwatcher.publishing.publisher import ParameterPublisher, ParameterRegistry, PropertyState
from cloudwatcher.transports.http import HttpFetcher, NetworkError

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


class ConfigurationError(ValueError):
    pass


class DeviceNotReadyError(RuntimeError):
    pass


class DeviceState(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONNECTING = "connecting"
    READY = "ready"
    REFRESHING = "refreshing"
    DISCONNECTED = "disconnected"


class CloudwatcherDriver:
    """
    Polls a Cloudwatcher Solo and keeps its weather parameters current.

    The driver owns the readiness state machine. Each cycle fetches the
    payload, decodes it and hands the outcome to the ``ParameterPublisher``.
    Fetch and decode failures never escape a poll; they turn the published
    status to ALERT and leave the last-known values in place.
    """

    default_name = "Cloudwatcher Solo"
    version = (0, 1)

    def __init__(
        self,
        registry: ParameterRegistry,
        store: Optional[AddressStore] = None,
        fetcher: Optional[Fetcher] = None,
        address: Optional[str] = None,
    ) -> None:
        self.store = store
        self.fetcher: Fetcher = fetcher or HttpFetcher()
        self.publisher = ParameterPublisher(registry)
        self.raw = RawReadings()
        self.state = DeviceState.UNCONFIGURED
        self._address = (store.load() if store else None) or address

    # ---- configuration ----
    @property
    def address(self) -> Optional[str]:
        return self._address

    def set_address(self, address: str) -> None:
        address = address.strip()
        self._address = address or None
        if self.store is not None:
            self.store.save(address)
        logger.info("Cloudwatcher address updated")

    # ---- lifecycle ----
    @property
    def is_connected(self) -> bool:
        return self.state in (DeviceState.READY, DeviceState.REFRESHING)

    def connect(self) -> PropertyState:
        if not self._address:
            self.state = DeviceState.UNCONFIGURED
            logger.error("You must set the address first!")
            raise ConfigurationError("No Cloudwatcher address configured")

        self.state = DeviceState.CONNECTING
        result = self._read()
        if not isinstance(result, Snapshot):
            self.state = DeviceState.UNCONFIGURED
            raise DeviceNotReadyError(f"Could not connect to {self.default_name}: {result}") from (
                result if isinstance(result, Exception) else None
            )

        if not self.publisher.is_initialized:
            self.publisher.initialize(result)
        status = self.publisher.refresh(result)
        self.state = DeviceState.READY
        logger.info("%s connected (%s)", self.default_name, result.device_info)
        return status

    def poll(self) -> PropertyState:
        if self.state is not DeviceState.READY:
            raise DeviceNotReadyError(f"{self.default_name} is not connected (state: {self.state.value})")
        self.state = DeviceState.REFRESHING
        try:
            return self.publisher.refresh(self._read())
        finally:
            self.state = DeviceState.READY

    def disconnect(self) -> None:
        self.state = DeviceState.DISCONNECTED
        logger.info("%s disconnected", self.default_name)

    # ---- helpers ----
    def _read(self) -> Union[Snapshot, DecodeError, NetworkError]:
        self.raw.mark_busy()
        try:
            body = self.fetcher(self._address)
        except NetworkError as exc:
            logger.error("%s", exc)
            self.raw.mark_alert()
            return exc

        result = parse_payload(body)
        if isinstance(result, DecodeError):
            logger.error("Could not decode values from device: %s", result)
            self.raw.mark_alert()
            return result

        self.raw.update(result)
        return result
