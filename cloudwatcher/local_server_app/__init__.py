"""
A small FastAPI application that hosts a ``CloudwatcherDriver``.

It stands in for an observatory control framework: it persists the device
address, connects and disconnects the driver, runs the periodic poll and
exposes the published weather parameters over HTTP.
"""
import asyncio
import math
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from cloudwatcher.driver import ConfigurationError, DeviceNotReadyError
from cloudwatcher.driver.device import Fetcher
from cloudwatcher.local_server_app.config import ServerSettings, get_settings
from cloudwatcher.local_server_app.jobs import JobManager, poll_job
from cloudwatcher.local_server_app.logging import create_logger, redact_address, ring_buffer
from cloudwatcher.local_server_app.models import (
    ConfigResponse,
    ConfigureRequest,
    LogsResponse,
    ParameterModel,
    ParametersResponse,
    StatusResponse,
)
from cloudwatcher.local_server_app.state import LocalServerState

__all__ = ["create_app", "ServerSettings", "LocalServerState"]


def _json_safe(readings: dict) -> dict:
    return {k: None if isinstance(v, float) and math.isnan(v) else v for k, v in readings.items()}


def create_app(settings: Optional[ServerSettings] = None, fetcher: Optional[Fetcher] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger("cloudwatcher", settings.log_ring_size)
    state = LocalServerState(settings, logger, fetcher=fetcher)
    jobs = JobManager()
    stop_event = asyncio.Event()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.auto_connect and state.driver.address:
            try:
                await state.connect()
                state.log("auto_connect_ok", {"address": state.driver.address})
            except (ConfigurationError, DeviceNotReadyError) as exc:
                state.log("auto_connect_failed", {"error": str(exc)})
        if settings.enable_poll_job:
            jobs.start(poll_job(state, stop_event), name="poll")
        yield
        stop_event.set()
        await jobs.stop()
        await state.disconnect()

    app = FastAPI(title="Cloudwatcher", lifespan=lifespan)
    app.state.cloudwatcher = state

    def _status() -> StatusResponse:
        return StatusResponse(state=state.driver.state.value, status=state.driver.publisher.state.value)

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "ok"

    @app.get("/config", response_model=ConfigResponse)
    async def get_config() -> ConfigResponse:
        return ConfigResponse(address=redact_address(state.driver.address), state=state.driver.state.value)

    @app.post("/configure", response_model=ConfigResponse)
    async def configure(request: ConfigureRequest) -> ConfigResponse:
        await state.configure(request.address)
        state.log("address_configured", {"address": request.address})
        return ConfigResponse(address=redact_address(state.driver.address), state=state.driver.state.value)

    @app.post("/connect", response_model=StatusResponse)
    async def connect() -> StatusResponse:
        try:
            await state.connect()
        except ConfigurationError as exc:
            state.log("connect_rejected", {"error": str(exc)})
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except DeviceNotReadyError as exc:
            state.log("connect_failed", {"error": str(exc)})
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        state.log("connected", {"address": state.driver.address})
        return _status()

    @app.post("/disconnect", response_model=StatusResponse)
    async def disconnect() -> StatusResponse:
        await state.disconnect()
        state.log("disconnected")
        return _status()

    @app.post("/refresh", response_model=StatusResponse)
    async def refresh() -> StatusResponse:
        try:
            await state.poll()
        except DeviceNotReadyError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _status()

    @app.get("/parameters", response_model=ParametersResponse)
    async def parameters() -> ParametersResponse:
        snapshot = state.driver.publisher.snapshot
        return ParametersResponse(
            state=state.driver.state.value,
            status=state.driver.publisher.state.value,
            safety=state.registry.safety_status().value,
            parameters=[ParameterModel(**p.as_dict()) for p in state.registry.parameters],
            snapshot=_json_safe(snapshot.as_dict()) if snapshot else None,
        )

    @app.get("/raw")
    async def raw() -> dict:
        return state.driver.raw.as_dict()

    @app.get("/logs", response_model=LogsResponse)
    async def logs() -> LogsResponse:
        handler = ring_buffer(logger)
        return LogsResponse(events=handler.get_events() if handler else [])

    return app
