"""Security – AuthHandler: one rotation window wired to its token services.

Usage::

    handler = create_auth_handler({"access_token": {"expiry": 900}})
    handler.rotate_credentials(Algorithm.ES256)

    token = handler.generate_access_token({"userId": 123})
    handler.verify_and_decode_token(token)   # -> {"userId": 123}

    refresh = handler.generate_refresh_token()
    save(refresh.hashed_token)               # hand refresh.jwt to the client
"""
from __future__ import annotations

from typing import Any, Mapping

from rotating_jwt.config.tokens import AuthConfig
from rotating_jwt.kernel.time import Clock
from rotating_jwt.kernel.types import Result
from rotating_jwt.security.credentials import (
    Algorithm,
    Credential,
    CredentialStore,
    KeySize,
    generate_credentials,
)
from rotating_jwt.security.jwt import (
    PyJwtCodec,
    RefreshToken,
    TokenCodec,
    TokenValidationError,
    TokenValidator,
    create_token_generators,
)


class AuthHandler:
    """Registers credentials and issues / verifies tokens against them.

    Tokens are always signed with the most recently registered credential
    and verified with the credential named by their ``credentials_id``, so
    rotating credentials does not break tokens signed by any credential
    still inside the window of ``config.credentials_limit`` entries.

    Parameters
    ----------
    config:
        Expiries and window size; defaults apply when omitted.
    codec:
        Token codec; a :class:`PyJwtCodec` using *clock* when omitted.
    clock:
        Time source for the default codec.  Ignored when *codec* is given.
    """

    def __init__(
        self,
        config: AuthConfig | None = None,
        *,
        codec: TokenCodec | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config or AuthConfig()
        self._store = CredentialStore(self._config.credentials_limit)
        codec = codec or PyJwtCodec(clock)
        self._generators = create_token_generators(
            self._config, self._store.active_credential, codec
        )
        self._validator = TokenValidator(self._store.resolve, codec)

    @property
    def config(self) -> AuthConfig:
        return self._config

    @property
    def credentials(self) -> CredentialStore:
        return self._store

    @property
    def active_credential(self) -> Credential | None:
        return self._store.active_credential()

    def set_credentials(self, credential: Credential) -> Credential | None:
        """Register *credential* as the signing credential.

        Returns the credential evicted from the rotation window, if any.
        """
        return self._store.register(credential)

    register = set_credentials

    def rotate_credentials(
        self,
        algorithm: Algorithm | str,
        key_size: KeySize | str | None = None,
    ) -> Credential:
        credential = generate_credentials(algorithm, key_size)
        self._store.register(credential)
        return credential

    def generate_access_token(self, data: Any) -> str:
        return self._generators.access.generate(data)

    def generate_refresh_token(self) -> RefreshToken:
        return self._generators.refresh.generate()

    def verify_and_decode_token(self, token: str) -> Any:
        return self._validator.verify_and_decode(token)

    def try_verify_and_decode_token(self, token: str) -> Result[Any, TokenValidationError]:
        return self._validator.try_verify_and_decode(token)

    def decode_token(self, token: str) -> Any:
        """Unverified ``data`` of *token*; do not use for authorization."""
        return self._validator.decode(token)


def create_auth_handler(
    config: AuthConfig | Mapping[str, Any] | None = None,
    *,
    codec: TokenCodec | None = None,
    clock: Clock | None = None,
) -> AuthHandler:
    """Build an :class:`AuthHandler` from an :class:`AuthConfig` or a plain mapping."""
    if not isinstance(config, AuthConfig):
        config = AuthConfig.from_mapping(config)
    return AuthHandler(config, codec=codec, clock=clock)


__all__ = ["AuthHandler", "create_auth_handler"]
