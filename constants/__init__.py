from constants.encoding import UTF8
from constants.http import (
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    MEDIA_TYPE_JSON,
    URL_SEPARATOR,
)
from constants.logging import LOG_DATETIME_FORMAT

__all__ = [
    "UTF8",
    "HEADER_ACCEPT",
    "HEADER_CONTENT_TYPE",
    "MEDIA_TYPE_JSON",
    "URL_SEPARATOR",
    "LOG_DATETIME_FORMAT",
]
