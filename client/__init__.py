from client.cancellation import CancellationToken
from client.classifier import (
    classify,
    classify_exception,
    classify_response,
    classify_status_code,
)
from client.codec import (
    JsonDecoder,
    PayloadDecoder,
    TextDecoder,
    as_json,
    as_text,
    encode_json,
)
from client.diagnostics import DiagnosticTracer
from client.rest import RestApiClient
from client.uri import normalize_base_url, resolve_uri

__all__ = [
    "CancellationToken",
    "DiagnosticTracer",
    "JsonDecoder",
    "PayloadDecoder",
    "RestApiClient",
    "TextDecoder",
    "as_json",
    "as_text",
    "classify",
    "classify_exception",
    "classify_response",
    "classify_status_code",
    "encode_json",
    "normalize_base_url",
    "resolve_uri",
]
