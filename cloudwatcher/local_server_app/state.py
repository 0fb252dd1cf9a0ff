import asyncio
import logging
from typing import Optional

from cloudwatcher.driver import AddressStore, CloudwatcherDriver
from cloudwatcher.driver.device import Fetcher
from cloudwatcher.local_server_app.config import ServerSettings
from cloudwatcher.local_server_app.logging import redact
from cloudwatcher.publishing import InMemoryParameterRegistry
from cloudwatcher.transports import HttpFetcher


class LocalServerState:
    def __init__(self, settings: ServerSettings, logger: logging.Logger, fetcher: Optional[Fetcher] = None):
        self.settings = settings
        self.logger = logger
        self.lock = asyncio.Lock()
        self.registry = InMemoryParameterRegistry()
        self.driver = CloudwatcherDriver(
            registry=self.registry,
            store=AddressStore(settings.config_path),
            fetcher=fetcher or HttpFetcher(timeout=settings.fetch_timeout),
            address=settings.device_address,
        )

    def log(self, event: str, details: Optional[dict] = None) -> None:
        self.logger.info(event, extra={"details": redact(details)})

    async def connect(self):
        async with self.lock:
            return await asyncio.to_thread(self.driver.connect)

    async def poll(self):
        async with self.lock:
            return await asyncio.to_thread(self.driver.poll)

    async def disconnect(self) -> None:
        async with self.lock:
            self.driver.disconnect()

    async def configure(self, address: str) -> None:
        async with self.lock:
            self.driver.set_address(address)
