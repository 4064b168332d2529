import httpx
from pydantic import BaseModel, ConfigDict, Field

from constants import HEADER_CONTENT_TYPE
from enums import HttpMethod


class RequestDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(description="HTTP method")
    url: str = Field(description="Absolute URI or path relative to the base URL")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra request headers"
    )
    content: bytes | None = Field(default=None, description="Raw request body")
    content_type: str | None = Field(
        default=None, description="Media type of the request body"
    )

    def build_headers(self) -> httpx.Headers:
        """Merge the extra headers with the body content type.

        Returns:
            Case-insensitive request headers; `content_type` replaces any
            Content-Type given in `headers`.

        """
        headers = httpx.Headers(self.headers)
        if self.content is not None and self.content_type:
            headers[HEADER_CONTENT_TYPE] = self.content_type
        return headers
