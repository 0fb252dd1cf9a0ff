from cloudwatcher.driver import CloudwatcherDriver, ConfigurationError, DeviceNotReadyError, DeviceState
from cloudwatcher.parsing.payload import MissingRequiredField, Snapshot, SwitchState, parse_payload
from cloudwatcher.publishing import InMemoryParameterRegistry, ParameterPublisher, PropertyState
from cloudwatcher.transports import HttpFetcher, NetworkError
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CloudwatcherDriver",
    "ConfigurationError",
    "DeviceNotReadyError",
    "DeviceState",
    "MissingRequiredField",
    "Snapshot",
    "SwitchState",
    "parse_payload",
    "InMemoryParameterRegistry",
    "ParameterPublisher",
    "PropertyState",
    "HttpFetcher",
    "NetworkError",
]

try:
    __version__ = version("cloudwatcher")
except PackageNotFoundError:
    __version__ = "0.0.0"
