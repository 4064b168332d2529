import json
from dataclasses import asdict
from unittest.mock import patch

import httpx
import pytest

from client import JsonDecoder, TextDecoder, as_json, as_text, encode_json
from exceptions import PayloadDecodeError, PayloadEncodeError
from tests.factories import User, UserFactory, UserRecord, UserRecordFactory


def build_response(content: bytes, content_type: str = "application/json") -> httpx.Response:
    return httpx.Response(
        status_code=200, content=content, headers={"Content-Type": content_type}
    )


def test_text_decoder_returns_body_unmodified() -> None:
    body = '{ "id": 1,   "name": "a" }\n'

    with patch.object(JsonDecoder, "decode") as json_decode:
        result = as_text().decode(build_response(body.encode()))

    assert result == body
    json_decode.assert_not_called()


def test_text_decoder_uses_response_charset() -> None:
    response = build_response("héllo".encode("latin-1"), "text/plain; charset=latin-1")

    assert TextDecoder().decode(response) == "héllo"


def test_json_decoder_builds_pydantic_model() -> None:
    user = UserFactory.build()

    result = as_json(User).decode(build_response(user.model_dump_json().encode()))

    assert result == user


def test_json_decoder_builds_dataclass() -> None:
    record = UserRecordFactory.build()

    result = as_json(UserRecord).decode(build_response(json.dumps(asdict(record)).encode()))

    assert result == record


def test_json_decoder_supports_generic_targets() -> None:
    users = UserFactory.build_batch(3)
    body = json.dumps([user.model_dump() for user in users]).encode()

    assert as_json(list[User]).decode(build_response(body)) == users


def test_json_decoder_reports_target_without_schema() -> None:
    class Unschemable:
        pass

    decoder = as_json(Unschemable)

    with pytest.raises(PayloadDecodeError):
        decoder.decode(build_response(b"{}"))


@pytest.mark.parametrize(
    "body",
    [b"not json", b'{"id": 1}', b'{"id": "abc", "name": "a"}', b""],
)
def test_json_decoder_reports_decode_failure(body: bytes) -> None:
    with pytest.raises(PayloadDecodeError):
        as_json(User).decode(build_response(body))


def test_encode_json_serializes_models_and_dicts() -> None:
    user = UserFactory.build(id=1, name="a")

    assert json.loads(encode_json(user)) == {"id": 1, "name": "a"}
    assert json.loads(encode_json({"id": 1})) == {"id": 1}
    assert json.loads(encode_json(UserRecord(id=2, name="b"))) == {"id": 2, "name": "b"}


def test_encode_json_reports_unserializable_payload() -> None:
    with pytest.raises(PayloadEncodeError):
        encode_json(object())
