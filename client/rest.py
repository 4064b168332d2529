from collections.abc import Awaitable
from types import TracebackType
from typing import Any, Self, TypeVar

import httpx

from client.cancellation import CancellationToken
from client.classifier import classify_exception, classify_response
from client.codec import JsonDecoder, PayloadDecoder, TextDecoder, encode_json
from client.diagnostics import DiagnosticTracer
from client.uri import normalize_base_url, resolve_uri
from constants import HEADER_ACCEPT, MEDIA_TYPE_JSON
from enums import ApiResultStatus, HttpMethod
from exceptions import PayloadEncodeError, ResponseReadError, UriResolutionError
from logger import Logger
from schemas import ApiResult, RequestDescriptor
from settings import ClientSettings, client_settings

T = TypeVar("T")


class RestApiClient:
    """Async REST client that turns every call into an `ApiResult`.

    Transport errors, unexpected status codes and undecodable payloads are
    classified into an `ApiResultStatus` instead of being raised.

    Example:
        ```python
        async with RestApiClient(base_url="https://api.example.com") as client:
            result = await client.get_json("users/1", target=User)
            if result.is_success:
                print(result.item.name)
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        logger: Logger | None = None,
        verbose: bool | None = None,
        settings: ClientSettings = client_settings,
    ):
        """Initialize REST client.

        Args:
            base_url: Base endpoint for relative paths. Falls back to the
                settings, then to the base URL of `http_client`.
            http_client: Transport to use. A client passed in here is never
                closed by `aclose`.
            logger: Logger for diagnostic traces.
            verbose: Enable request/response tracing. Defaults to settings.
            settings: Client settings.

        """
        self._owns_http_client = http_client is None
        self.http_client = http_client or self.create_default_client(settings)

        self.base_url = normalize_base_url(base_url or settings.base_url)
        if self.base_url is None and self.http_client.base_url.is_absolute_url:
            self.base_url = normalize_base_url(str(self.http_client.base_url))

        self.logger = (logger or Logger()).child(name=type(self).__name__)
        self.tracer = DiagnosticTracer(
            logger=self.logger,
            verbose=settings.verbose if verbose is None else verbose,
        )

    @staticmethod
    def create_default_client(settings: ClientSettings) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={HEADER_ACCEPT: settings.accept},
            timeout=httpx.Timeout(settings.timeout),
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    def create_get_request(self, url: str) -> RequestDescriptor:
        return RequestDescriptor(method=HttpMethod.GET, url=url)

    def create_post_request(
        self, url: str, content: bytes, content_type: str
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=HttpMethod.POST, url=url, content=content, content_type=content_type
        )

    async def get(
        self,
        url: str,
        decoder: PayloadDecoder[T],
        cancellation: CancellationToken | None = None,
    ) -> ApiResult[T]:
        """GET request.

        Args:
            url: Absolute URI or path relative to the base URL.
            decoder: Strategy used to decode a successful response.
            cancellation: Optional cancellation token.

        Returns:
            The call result.

        """
        return await self.send_request(
            request=self.create_get_request(url=url),
            decoder=decoder,
            cancellation=cancellation,
        )

    async def get_text(
        self, url: str, cancellation: CancellationToken | None = None
    ) -> ApiResult[str]:
        return await self.get(url=url, decoder=TextDecoder(), cancellation=cancellation)

    async def get_json(
        self,
        url: str,
        target: type[T],
        cancellation: CancellationToken | None = None,
    ) -> ApiResult[T]:
        return await self.get(
            url=url, decoder=JsonDecoder(target=target), cancellation=cancellation
        )

    async def post(
        self,
        url: str,
        dto: Any,
        decoder: PayloadDecoder[T],
        cancellation: CancellationToken | None = None,
    ) -> ApiResult[T]:
        """POST request with a JSON body.

        Args:
            url: Absolute URI or path relative to the base URL.
            dto: Object serialized as the JSON request body.
            decoder: Strategy used to decode a successful response.
            cancellation: Optional cancellation token.

        Returns:
            The call result. INTERNAL_PROBLEM if `dto` cannot be serialized.

        """
        try:
            content = encode_json(dto)
        except PayloadEncodeError as error:
            self.tracer.trace_exception(error)
            return ApiResult(status=ApiResultStatus.INTERNAL_PROBLEM)

        self.tracer.trace_payload(content)
        return await self.post_content(
            url=url,
            content=content,
            content_type=MEDIA_TYPE_JSON,
            decoder=decoder,
            cancellation=cancellation,
        )

    async def post_json(
        self,
        url: str,
        dto: Any,
        target: type[T],
        cancellation: CancellationToken | None = None,
    ) -> ApiResult[T]:
        return await self.post(
            url=url,
            dto=dto,
            decoder=JsonDecoder(target=target),
            cancellation=cancellation,
        )

    async def post_content(
        self,
        url: str,
        content: bytes,
        content_type: str,
        decoder: PayloadDecoder[T],
        cancellation: CancellationToken | None = None,
    ) -> ApiResult[T]:
        """POST request with a caller-built body.

        Args:
            url: Absolute URI or path relative to the base URL.
            content: Raw request body.
            content_type: Media type of the body.
            decoder: Strategy used to decode a successful response.
            cancellation: Optional cancellation token.

        Returns:
            The call result.

        """
        return await self.send_request(
            request=self.create_post_request(
                url=url, content=content, content_type=content_type
            ),
            decoder=decoder,
            cancellation=cancellation,
        )

    async def send_request(
        self,
        request: RequestDescriptor,
        decoder: PayloadDecoder[T],
        cancellation: CancellationToken | None = None,
    ) -> ApiResult[T]:
        """Send a request and classify its outcome.

        Never raises: every failure is reported through the result status.

        Args:
            request: The request to send.
            decoder: Strategy used to decode a successful response.
            cancellation: Optional cancellation token.

        Returns:
            SUCCESS with the decoded item, or a failure status without item.

        """
        try:
            url = resolve_uri(base_url=self.base_url, path=request.url)
        except UriResolutionError as error:
            self.tracer.trace_exception(error)
            return ApiResult(status=ApiResultStatus.INTERNAL_PROBLEM)

        try:
            http_request = self.http_client.build_request(
                method=request.method,
                url=url,
                headers=request.build_headers(),
                content=request.content,
            )
            self.tracer.trace_request(http_request)

            exchange: Awaitable[ApiResult[T]] = self._exchange(
                request=http_request, decoder=decoder
            )
            if cancellation is not None:
                return await cancellation.run(exchange)
            return await exchange
        except Exception as error:
            self.tracer.trace_exception(error)
            return ApiResult(status=classify_exception(error=error))

    async def _exchange(
        self, request: httpx.Request, decoder: PayloadDecoder[T]
    ) -> ApiResult[T]:
        response = await self.http_client.send(request=request, stream=True)
        try:
            status = classify_response(response=response)
            self.tracer.trace_status(response)

            if status != ApiResultStatus.SUCCESS:
                if self.tracer.verbose:
                    try:
                        await self._read_body(response)
                        self.tracer.trace_body(response)
                    except ResponseReadError as error:
                        self.tracer.trace_exception(error)
                return ApiResult(status=status)

            # Read once; tracing and decoding both use the buffered body.
            await self._read_body(response)
            self.tracer.trace_body(response)
        finally:
            await response.aclose()

        return ApiResult(status=ApiResultStatus.SUCCESS, item=decoder.decode(response))

    @staticmethod
    async def _read_body(response: httpx.Response) -> None:
        # The status line has already arrived, so a broken body is not a
        # connectivity failure.
        try:
            await response.aread()
        except httpx.TransportError as error:
            raise ResponseReadError(
                message=f"Failed to read response body: {error}"
            ) from error
