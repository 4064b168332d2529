from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from settings.base import BaseSettings


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="logging_")

    service_name: str = Field(default="rest-api-client", title="Service name")
    console: bool = Field(default=True, title="Echo log records to the console")
    min_level: Literal["debug", "info", "error"] = Field(
        default="info", title="Lowest console log level"
    )


logging_settings = LoggingSettings()
