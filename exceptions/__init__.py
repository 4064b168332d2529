from exceptions.base import BaseError
from exceptions.client import (
    PayloadDecodeError,
    PayloadEncodeError,
    RequestCancelledError,
    ResponseReadError,
    UriResolutionError,
)

__all__ = [
    "BaseError",
    "PayloadDecodeError",
    "PayloadEncodeError",
    "RequestCancelledError",
    "ResponseReadError",
    "UriResolutionError",
]
