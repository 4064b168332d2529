from pydantic import Field
from pydantic_settings import SettingsConfigDict

from constants import MEDIA_TYPE_JSON
from settings.base import BaseSettings


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="api_client_")

    base_url: str | None = Field(default=None, title="Base endpoint URL")
    verbose: bool = Field(default=False, title="Trace requests and responses")
    timeout: float = Field(default=30.0, title="Transport timeout in seconds")
    accept: str = Field(default=MEDIA_TYPE_JSON, title="Default Accept header")


client_settings = ClientSettings()
