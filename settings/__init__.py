from settings.base import BASE_PATH
from settings.client import ClientSettings, client_settings
from settings.logging import LoggingSettings, logging_settings

__all__ = [
    "BASE_PATH",
    "ClientSettings",
    "LoggingSettings",
    "client_settings",
    "logging_settings",
]
