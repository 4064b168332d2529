from http import HTTPStatus

import httpx
import pytest

from enums import ApiResultStatus, LoggerCategory
from tests.base import RecordingSink, build_client
from tests.factories import User


def user_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(status_code=HTTPStatus.OK, json={"id": 1, "name": "a"})


@pytest.mark.asyncio
async def test_verbose_traces_request_and_response(sink: RecordingSink) -> None:
    client = build_client(handler=user_handler, verbose=True, sink=sink)

    await client.get_json("users/1", target=User)

    assert sink.messages[0] == "RestApiClient: GET https://api.example.com/users/1"
    assert sink.messages[1].startswith("RestApiClient: Headers: ")
    assert "RestApiClient: 200 OK" in sink.messages
    assert any('"name"' in message for message in sink.messages[2:])
    assert all(category == LoggerCategory.DEBUG for category, _ in sink.records)


@pytest.mark.asyncio
async def test_verbose_traces_post_payload(sink: RecordingSink) -> None:
    client = build_client(handler=user_handler, verbose=True, sink=sink)

    await client.post_json("users", dto={"id": 1}, target=User)

    assert sink.messages[0] == 'RestApiClient: {"id":1}'
    assert sink.messages[1] == "RestApiClient: POST https://api.example.com/users"


@pytest.mark.asyncio
async def test_verbose_traces_failure_body(sink: RecordingSink) -> None:
    client = build_client(
        handler=lambda request: httpx.Response(
            status_code=HTTPStatus.NOT_FOUND, text="missing"
        ),
        verbose=True,
        sink=sink,
    )

    result = await client.get_json("users/1", target=User)

    assert result.status == ApiResultStatus.INTERNAL_PROBLEM
    assert "RestApiClient: 404 Not Found" in sink.messages
    assert "RestApiClient: missing" in sink.messages


@pytest.mark.asyncio
async def test_verbose_traces_transport_errors(sink: RecordingSink) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = build_client(handler=handler, verbose=True, sink=sink)

    await client.get_text("users")

    assert sink.messages[-1] == "RestApiClient: ConnectError: Connection refused"


@pytest.mark.asyncio
async def test_quiet_client_writes_nothing(sink: RecordingSink) -> None:
    client = build_client(handler=user_handler, sink=sink)

    await client.get_json("users/1", target=User)
    await client.post_json("users", dto={"id": 1}, target=User)

    assert sink.records == []


@pytest.mark.asyncio
async def test_tracing_does_not_change_results() -> None:
    quiet = build_client(handler=user_handler)
    verbose = build_client(handler=user_handler, verbose=True)

    assert await quiet.get_json("users/1", target=User) == await verbose.get_json(
        "users/1", target=User
    )
    assert await quiet.get_text("users/1") == await verbose.get_text("users/1")
