"""Unit tests for bearer token verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from devnet.config import AuthSettings
from devnet.domain.service import JWTService
from devnet.util.jwt import JWTError, bearer_token, verify_token
from tests.conftest import make_token


class TestVerifyToken:
    """Tests for verify_token."""

    def test_valid_token(self):
        payload = verify_token(make_token("user_1", sid="sess_1"), AuthSettings())

        assert payload.sub == "user_1"
        assert payload.sid == "sess_1"

    def test_expired_token(self):
        settings = AuthSettings(leeway=0)
        token = make_token(
            "user_1", exp=datetime.now(timezone.utc) - timedelta(minutes=5)
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)

    def test_wrong_secret(self):
        token = jwt.encode({"sub": "user_1"}, "another-secret", algorithm="HS256")

        with pytest.raises(JWTError, match="Invalid"):
            verify_token(token, AuthSettings())

    def test_missing_subject(self):
        settings = AuthSettings()
        token = jwt.encode({"sid": "x"}, settings.jwt_secret, algorithm="HS256")

        with pytest.raises(JWTError):
            verify_token(token, settings)

    def test_audience_checked_when_configured(self):
        settings = AuthSettings(audience="devnet")

        assert verify_token(make_token("user_1", aud="devnet"), settings).sub == "user_1"
        with pytest.raises(JWTError):
            verify_token(make_token("user_1", aud="elsewhere"), settings)


class TestBearerToken:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def", "abc.def"),
            ("bearer abc.def", "abc.def"),
            ("Basic abc", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parsing(self, header, expected):
        assert bearer_token(header) == expected


class TestJWTService:
    """Tests for JWTService header handling."""

    def test_user_id_from_header(self):
        service = JWTService(auth_settings=AuthSettings())

        assert service.get_user_id_from_header(f"Bearer {make_token('u_9')}") == "u_9"

    def test_invalid_header_is_anonymous(self):
        service = JWTService(auth_settings=AuthSettings())

        assert service.get_user_id_from_header("Bearer not-a-jwt") is None
        assert service.get_user_id_from_header(None) is None
