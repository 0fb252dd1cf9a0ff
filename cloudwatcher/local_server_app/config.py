from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class ServerSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10290, validation_alias="SERVER_PORT")

    poll_interval: float = Field(60.0, validation_alias="POLL_INTERVAL")
    fetch_timeout: float = Field(10.0, validation_alias="FETCH_TIMEOUT")
    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")

    config_path: str = Field("~/.cloudwatcher/config.json", validation_alias="CONFIG_PATH")
    device_address: Optional[str] = Field(None, validation_alias="DEVICE_ADDRESS")

    enable_poll_job: bool = Field(True, validation_alias="ENABLE_POLL_JOB")
    auto_connect: bool = Field(False, validation_alias="AUTO_CONNECT")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> ServerSettings:
    return ServerSettings()
