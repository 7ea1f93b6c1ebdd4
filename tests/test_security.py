from datetime import timedelta

import jwt
import pytest

from blog_api.auth.security import TOKEN_EXPIRED, TOKEN_INVALID, CredentialService
from blog_api.errors import UnauthorizedError
from blog_api.models import UserType


@pytest.fixture
def service():
    return CredentialService(secret="s3cret")


def _corrupt(token, index):
    chars = list(token)
    chars[index] = "A" if chars[index] != "A" else "B"
    return "".join(chars)


def test_hash_is_salted_and_verifies(service):
    first = service.hash("longpass1")
    second = service.hash("longpass1")

    assert first != second
    assert "longpass1" not in first
    assert service.verify("longpass1", first)
    assert service.verify("longpass1", second)


def test_verify_returns_false_instead_of_raising(service):
    hashed = service.hash("longpass1")

    assert service.verify("wrongpass", hashed) is False
    assert service.verify("longpass1", "not-a-hash") is False
    assert service.verify("", hashed) is False


def test_issued_token_round_trips_id_and_type(service):
    token = service.issue_token({"id": 7, "type": UserType.ADMIN})

    result = service.try_decode(token)
    assert result.ok
    assert result.data.id == 7
    assert result.data.type is UserType.ADMIN
    assert service.decode(token) == result.data


def test_token_expires_after_twelve_hours_by_default(service):
    token = service.issue_token({"id": 1, "type": "blogger"})
    payload = jwt.decode(token, "s3cret", algorithms=["HS256"])

    assert payload["exp"] - payload["iat"] == 12 * 60 * 60


def test_expired_token_is_rejected():
    service = CredentialService(secret="s3cret", expires_in=timedelta(seconds=-5))
    token = service.issue_token({"id": 1, "type": "blogger"})

    assert service.is_valid(token) is False
    assert service.try_decode(token).error == TOKEN_EXPIRED


def test_token_signed_with_other_secret_is_rejected(service):
    token = CredentialService(secret="other").issue_token({"id": 1, "type": "blogger"})

    assert service.is_valid(token) is False
    assert service.try_decode(token).error == TOKEN_INVALID


@pytest.mark.parametrize("segment", [0, 1, 2])
def test_corrupting_any_segment_invalidates_token(service, segment):
    token = service.issue_token({"id": 1, "type": "blogger"})
    assert service.is_valid(token)

    parts = token.split(".")
    offset = sum(len(p) + 1 for p in parts[:segment])
    # evitar el último caracter del segmento (bits de padding de base64)
    index = offset + len(parts[segment]) // 2

    assert service.is_valid(_corrupt(token, index)) is False


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x"])
def test_malformed_tokens_never_raise(service, token):
    assert service.is_valid(token) is False


def test_token_without_user_type_is_invalid(service):
    token = jwt.encode({"sub": "1", "iat": 0, "exp": 9999999999}, "s3cret", algorithm="HS256")

    assert service.try_decode(token).error == TOKEN_INVALID


def test_decode_raises_unauthorized_on_invalid_token(service):
    with pytest.raises(UnauthorizedError) as exc:
        service.decode("garbage")
    assert exc.value.reason == "AUTH_TOKEN_INVALID"


def test_blank_secret_is_refused():
    with pytest.raises(ValueError):
        CredentialService(secret="")
