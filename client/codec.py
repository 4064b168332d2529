from functools import cached_property
from typing import Any, Generic, Protocol, TypeVar

import httpx
import pydantic_core
from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError, PydanticUndefinedAnnotation

from exceptions import PayloadDecodeError, PayloadEncodeError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PayloadDecoder(Protocol[T_co]):
    def decode(self, response: httpx.Response) -> T_co: ...


class TextDecoder:
    """Return the response body as text, without structured decoding."""

    def decode(self, response: httpx.Response) -> str:
        return response.text


class JsonDecoder(Generic[T]):
    """Decode a JSON response body into the target type with pydantic."""

    def __init__(self, target: type[T] | Any):
        self.target = target

    @cached_property
    def adapter(self) -> TypeAdapter[T]:
        return TypeAdapter(self.target)

    def decode(self, response: httpx.Response) -> T:
        """Validate the buffered response body against the target type.

        Args:
            response: A response whose body has already been read.

        Returns:
            The validated payload.

        Raises:
            PayloadDecodeError: If the body is not valid JSON, does not
                match the target type, or the target type has no schema.

        """
        try:
            adapter = self.adapter
        except (PydanticSchemaGenerationError, PydanticUndefinedAnnotation) as error:
            raise PayloadDecodeError(
                message=f"Cannot decode payloads as {self.target!r}: {error}"
            ) from error

        try:
            return adapter.validate_json(response.content)
        except ValidationError as error:
            raise PayloadDecodeError(
                message=f"Failed to decode payload as {self.target!r}: {error}"
            ) from error


def as_text() -> TextDecoder:
    return TextDecoder()


def as_json(target: type[T] | Any) -> JsonDecoder[T]:
    return JsonDecoder(target=target)


def encode_json(payload: Any) -> bytes:
    """Serialize a request payload to JSON bytes.

    Args:
        payload: A pydantic model, dataclass or JSON-compatible object.

    Returns:
        UTF-8 encoded JSON.

    Raises:
        PayloadEncodeError: If the payload cannot be serialized.

    """
    try:
        return pydantic_core.to_json(payload)
    except pydantic_core.PydanticSerializationError as error:
        raise PayloadEncodeError(
            message=f"Failed to encode {type(payload).__name__} payload: {error}"
        ) from error
