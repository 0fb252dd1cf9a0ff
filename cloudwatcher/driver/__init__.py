"""
The Cloudwatcher device driver: readiness state machine, raw readings and the
persisted device address.
"""
from cloudwatcher.driver.config_store import AddressStore
from cloudwatcher.driver.device import CloudwatcherDriver, ConfigurationError, DeviceNotReadyError, DeviceState
from cloudwatcher.driver.raw import RAW_NUMBERS, RAW_TEXTS, RawReadings

__all__ = [
    "AddressStore",
    "CloudwatcherDriver",
    "ConfigurationError",
    "DeviceNotReadyError",
    "DeviceState",
    "RAW_NUMBERS",
    "RAW_TEXTS",
    "RawReadings",
]
