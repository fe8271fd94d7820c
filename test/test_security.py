from datetime import timedelta
from types import SimpleNamespace

import jwt
import pytest

from app.config.environments import ACCESS_TOKEN_SECRET, REFRESH_TOKEN_SECRET, JWT_ALGORITHM
from app.utility.exception import UnauthorizedError
from app.utility.security import (
    hash_password,
    verify_password,
    issue_access_token,
    issue_refresh_token,
    verify_access_token,
    verify_refresh_token,
    read_session_id,
)
from app.utility.time import utc_now

USER = SimpleNamespace(id="a" * 32, email="ab@x.com", username="ab", full_name="A B")


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("pw123456")
    second = hash_password("pw123456")

    assert first != "pw123456"
    assert first != second
    assert verify_password("pw123456", first)
    assert not verify_password("wrong", first)


@pytest.mark.parametrize("hashed", [None, "", "not-a-bcrypt-hash"])
def test_verify_password_fails_closed(hashed):
    assert verify_password("pw123456", hashed) is False


def test_access_token_round_trip():
    token = issue_access_token(USER, "s" * 32)
    claims = verify_access_token(token)

    assert claims["sub"] == USER.id
    assert claims["sid"] == "s" * 32
    assert claims["username"] == "ab"


def test_refresh_token_is_not_accepted_as_access_token():
    refresh = issue_refresh_token(USER, "s" * 32)

    with pytest.raises(UnauthorizedError) as error:
        verify_access_token(refresh)
    assert error.value.code == "TokenInvalid"


def test_expired_token_is_invalid():
    now = utc_now()
    token = jwt.encode(
        {"sub": USER.id, "sid": "x", "type": "access", "iat": now - timedelta(hours=2), "exp": now - timedelta(hours=1)},
        ACCESS_TOKEN_SECRET,
        algorithm=JWT_ALGORITHM
    )

    with pytest.raises(UnauthorizedError) as error:
        verify_access_token(token)
    assert error.value.code == "TokenInvalid"
    assert error.value.status_code == 401


def test_tampered_and_malformed_tokens_are_invalid():
    forged = jwt.encode(
        {"sub": USER.id, "sid": "x", "type": "refresh", "exp": utc_now() + timedelta(hours=1)},
        "some-other-secret-with-enough-length-000",
        algorithm=JWT_ALGORITHM
    )

    for token in (forged, "garbage", ""):
        with pytest.raises(UnauthorizedError):
            verify_refresh_token(token)


def test_refresh_tokens_are_unique_per_issue():
    assert issue_refresh_token(USER, "s" * 32) != issue_refresh_token(USER, "s" * 32)


def test_read_session_id_ignores_expiry():
    token = jwt.encode(
        {"sub": USER.id, "sid": "old-session", "type": "refresh", "exp": utc_now() - timedelta(days=1)},
        REFRESH_TOKEN_SECRET,
        algorithm=JWT_ALGORITHM
    )

    assert read_session_id(token) == "old-session"
    assert read_session_id(None) is None
    assert read_session_id("garbage") is None
