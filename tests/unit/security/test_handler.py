"""Scenario tests for AuthHandler: rotation, expiry and refresh flows."""

from __future__ import annotations

import pytest

from rotating_jwt.config import AuthConfig, TokenConfig
from rotating_jwt.kernel.types import Err, Ok
from rotating_jwt.security import (
    Algorithm,
    AuthHandler,
    Credential,
    KeySize,
    create_auth_handler,
    hash_refresh_token,
)
from rotating_jwt.security.jwt import (
    InvalidTokenStructureError,
    SigningKeyError,
    TokenExpiredError,
    TokenValidationError,
)


class TestCreateAuthHandler:
    def test_defaults(self) -> None:
        handler = create_auth_handler()
        assert handler.config.access_token.expiry == 3600
        assert handler.config.refresh_token.expiry == 7_776_000
        assert handler.credentials.limit == 10

    def test_mapping_config(self) -> None:
        handler = create_auth_handler({"access_token": {"expiry": 60}, "credentials_limit": 2})
        assert handler.config.access_token.expiry == 60
        assert handler.config.refresh_token.expiry == 7_776_000
        assert handler.credentials.limit == 2

    def test_accepts_auth_config(self) -> None:
        config = AuthConfig(credentials_limit=4)
        assert create_auth_handler(config).config is config

    def test_no_credentials_cannot_generate(self) -> None:
        with pytest.raises(SigningKeyError):
            create_auth_handler().generate_access_token({"a": 1})


class TestRotationScenario:
    def test_es256_rotation_walkthrough(self, es256: Credential, es256_other: Credential) -> None:
        handler = create_auth_handler()
        handler.set_credentials(es256)
        original = handler.generate_access_token({"userId": 123, "role": "admin"})
        assert handler.verify_and_decode_token(original) == {"userId": 123, "role": "admin"}

        handler.set_credentials(es256_other)
        assert handler.verify_and_decode_token(original) == {"userId": 123, "role": "admin"}

        newer = handler.generate_access_token({"userId": 789})
        assert handler.verify_and_decode_token(newer) == {"userId": 789}
        assert handler.active_credential is es256_other

    @pytest.mark.parametrize("limit,still_valid", [(3, True), (2, False), (1, False)])
    def test_rotation_keeps_or_expires(
        self,
        limit: int,
        still_valid: bool,
        es256: Credential,
        rs256: Credential,
        ps256: Credential,
    ) -> None:
        handler = create_auth_handler({"credentials_limit": limit})
        handler.set_credentials(es256)
        token = handler.generate_access_token({"n": 1})
        handler.set_credentials(rs256)
        handler.set_credentials(ps256)

        if still_valid:
            assert handler.verify_and_decode_token(token) == {"n": 1}
        else:
            with pytest.raises(TokenExpiredError):
                handler.verify_and_decode_token(token)

    def test_rotate_credentials_generates_and_registers(self) -> None:
        handler = create_auth_handler({"credentials_limit": 2})
        first = handler.rotate_credentials(Algorithm.ES256)
        token = handler.generate_access_token("payload")
        second = handler.rotate_credentials("RS256", KeySize.LOW)
        assert handler.active_credential is second
        assert handler.verify_and_decode_token(token) == "payload"
        handler.rotate_credentials(Algorithm.ES256)
        assert handler.credentials.resolve(first.id) is None
        with pytest.raises(TokenExpiredError):
            handler.verify_and_decode_token(token)

    def test_register_alias_returns_evicted(self, es256: Credential, rs256: Credential) -> None:
        handler = AuthHandler(AuthConfig(credentials_limit=1))
        assert handler.register(es256) is None
        assert handler.register(rs256) is es256


class TestExpiry:
    @pytest.mark.parametrize("expiry", [0, -1, -3600])
    def test_non_positive_access_expiry_is_immediately_expired(self, expiry: int, es256: Credential) -> None:
        handler = create_auth_handler({"access_token": {"expiry": expiry}})
        handler.set_credentials(es256)
        with pytest.raises(TokenExpiredError):
            handler.verify_and_decode_token(handler.generate_access_token("x"))

    def test_refresh_uses_its_own_expiry(self, es256: Credential) -> None:
        handler = AuthHandler(
            AuthConfig(access_token=TokenConfig(-1), refresh_token=TokenConfig(600))
        )
        handler.set_credentials(es256)
        refresh = handler.generate_refresh_token()
        assert handler.verify_and_decode_token(refresh.jwt) == refresh.token


class TestRefreshTokens:
    def test_refresh_round_trip(self, rs256: Credential) -> None:
        handler = create_auth_handler()
        handler.set_credentials(rs256)
        refresh = handler.generate_refresh_token()
        assert handler.verify_and_decode_token(refresh.jwt) == refresh.token
        assert hash_refresh_token(refresh.token) == refresh.hashed_token
        assert hash_refresh_token(refresh.token) == hash_refresh_token(refresh.token)

    def test_refresh_tokens_differ_per_call(self, es256: Credential) -> None:
        handler = create_auth_handler()
        handler.set_credentials(es256)
        first, second = handler.generate_refresh_token(), handler.generate_refresh_token()
        assert first.token != second.token
        assert first.hashed_token != second.hashed_token


class TestDecodeAndResult:
    def test_decode_token(self, es256: Credential) -> None:
        handler = create_auth_handler()
        handler.set_credentials(es256)
        assert handler.decode_token(handler.generate_access_token([1, 2])) == [1, 2]

    def test_try_verify(self, es256: Credential) -> None:
        handler = create_auth_handler()
        handler.set_credentials(es256)
        ok = handler.try_verify_and_decode_token(handler.generate_access_token("x"))
        err = handler.try_verify_and_decode_token("rubbish")
        assert ok == Ok("x")
        assert isinstance(err, Err)
        assert isinstance(err.error, InvalidTokenStructureError)
        assert err.unwrap_or("fallback") == "fallback"

    def test_arbitrary_string_never_verifies(self, es256: Credential) -> None:
        handler = create_auth_handler()
        handler.set_credentials(es256)
        for candidate in ("hello", "Bearer abc", "x.y.z", "{}"):
            with pytest.raises(InvalidTokenStructureError):
                handler.verify_and_decode_token(candidate)

    def test_validation_errors_are_unauthorized(self, es256: Credential) -> None:
        from rotating_jwt.kernel.errors import UnauthorizedError

        handler = create_auth_handler()
        handler.set_credentials(es256)
        with pytest.raises(UnauthorizedError):
            handler.verify_and_decode_token("nope")
        with pytest.raises(TokenValidationError):
            handler.verify_and_decode_token("nope")
