"""JWT – access and refresh token generation with the active credential.

Generators hold the store's ``active_credential`` accessor rather than a
credential, so each call signs with whatever credential is newest at that
moment.  The signed payload is::

    {"data": <caller data or refresh secret>, "credentials_id": <credential id>}
"""
from __future__ import annotations

import hashlib
import secrets
from typing import Any, Callable, NamedTuple

import jwt

from rotating_jwt.config.tokens import AuthConfig, TokenConfig
from rotating_jwt.observability.logging import get_logger
from rotating_jwt.security.credentials.model import Credential, is_allowed_algorithm
from rotating_jwt.security.jwt.codec import TokenCodec
from rotating_jwt.security.jwt.errors import (
    GeneratorErrorKind,
    SigningAlgorithmError,
    SigningKeyError,
    TokenGenerationError,
    error_for,
)

logger = get_logger(__name__)

ActiveCredential = Callable[[], Credential | None]

_REFRESH_SECRET_BYTES = 64


class RefreshToken(NamedTuple):
    """Signed refresh token plus its raw secret and the secret's digest.

    Persist ``hashed_token``; hand ``jwt`` to the client.
    """

    jwt: str
    token: str
    hashed_token: str


def hash_refresh_token(token: str) -> str:
    """SHA-256 hex digest of a refresh secret."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def new_refresh_secret() -> str:
    return secrets.token_hex(_REFRESH_SECRET_BYTES)


class AccessTokenGenerator:
    """Signs caller data with the currently active credential."""

    def __init__(
        self,
        config: TokenConfig,
        active_credential: ActiveCredential,
        codec: TokenCodec,
    ) -> None:
        self._expiry = config.expiry
        self._active_credential = active_credential
        self._codec = codec

    @property
    def expiry(self) -> int:
        return self._expiry

    def generate(self, data: Any) -> str:
        credential = self._active_credential()
        if credential is None:
            raise SigningKeyError("No active credentials registered")
        if not is_allowed_algorithm(credential.algorithm):
            raise SigningAlgorithmError(
                f"Algorithm {credential.algorithm!r} is not allowed",
                detail={"credentials_id": credential.id},
            )
        if not credential.private_key:
            raise SigningKeyError(
                "Private key must have a value",
                detail={"credentials_id": credential.id},
            )

        try:
            token = self._codec.sign(
                {"data": data, "credentials_id": credential.id},
                credential.private_key,
                algorithm=str(credential.algorithm),
                expires_in=self._expiry,
            )
        except TokenGenerationError:
            raise
        except Exception as exc:
            error = _signing_error(exc, credential.id)
            logger.warning(
                "token.sign_failed",
                kind=error.kind.value,
                credentials_id=credential.id,
                error=type(exc).__name__,
            )
            raise error from exc

        logger.debug("token.signed", credentials_id=credential.id, expires_in=self._expiry)
        return token

    __call__ = generate


class RefreshTokenGenerator:
    """Signs a fresh random secret on every call."""

    def __init__(
        self,
        config: TokenConfig,
        active_credential: ActiveCredential,
        codec: TokenCodec,
    ) -> None:
        self._signer = AccessTokenGenerator(config, active_credential, codec)

    def generate(self) -> RefreshToken:
        token = new_refresh_secret()
        return RefreshToken(
            jwt=self._signer.generate(token),
            token=token,
            hashed_token=hash_refresh_token(token),
        )

    __call__ = generate


class TokenGenerators(NamedTuple):
    access: AccessTokenGenerator
    refresh: RefreshTokenGenerator


def create_token_generators(
    config: AuthConfig,
    active_credential: ActiveCredential,
    codec: TokenCodec,
) -> TokenGenerators:
    return TokenGenerators(
        access=AccessTokenGenerator(config.access_token, active_credential, codec),
        refresh=RefreshTokenGenerator(config.refresh_token, active_credential, codec),
    )


def _signing_error(exc: Exception, credentials_id: str) -> TokenGenerationError:
    message = str(exc) or None
    if isinstance(exc, (NotImplementedError, jwt.InvalidAlgorithmError)):
        kind = GeneratorErrorKind.INVALID_ALGORITHM
    elif isinstance(exc, jwt.InvalidKeyError):
        kind = GeneratorErrorKind.INVALID_KEY
    elif isinstance(exc, jwt.ExpiredSignatureError):
        kind, message = GeneratorErrorKind.TOKEN_EXPIRED, None
    else:
        kind, message = GeneratorErrorKind.SIGN_ERROR, None
    return error_for(kind, message, detail={"credentials_id": credentials_id}, cause=exc)


__all__ = [
    "AccessTokenGenerator",
    "RefreshToken",
    "RefreshTokenGenerator",
    "TokenGenerators",
    "create_token_generators",
    "hash_refresh_token",
    "new_refresh_secret",
]
