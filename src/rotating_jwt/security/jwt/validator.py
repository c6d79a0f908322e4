"""JWT – multi-key verification driven by the embedded credentials id.

``verify_and_decode`` runs in three stages:

1. Decode the token without verifying it and read ``credentials_id``.
   A token that does not decode, or has no id, is rejected here, before
   any credential lookup.
2. Resolve the id against the rotation window.  An id that is no longer
   there is reported as :class:`TokenExpiredError`, the same signal as a
   lapsed ``exp`` claim.
3. Verify with the resolved credential's public key, allowing only that
   credential's algorithm, and return the payload's ``data``.
"""
from __future__ import annotations

from typing import Any, Callable

import jwt

from rotating_jwt.kernel.types import Err, Ok, Result
from rotating_jwt.observability.logging import get_logger
from rotating_jwt.security.credentials.model import Credential, is_allowed_algorithm
from rotating_jwt.security.jwt.codec import TokenCodec
from rotating_jwt.security.jwt.errors import (
    InvalidSecretOrKeyError,
    InvalidTokenStructureError,
    TokenExpiredError,
    TokenValidationError,
    ValidatorErrorKind,
    VerificationAlgorithmError,
    error_for,
)

logger = get_logger(__name__)

ResolveCredential = Callable[[str], Credential | None]


class TokenValidator:
    def __init__(self, resolve_credential: ResolveCredential, codec: TokenCodec) -> None:
        self._resolve = resolve_credential
        self._codec = codec

    def verify_and_decode(self, token: str) -> Any:
        """Return the verified ``data`` of *token*.

        Raises
        ------
        TokenValidationError
            One subclass per :class:`ValidatorErrorKind`.
        """
        try:
            return self._verify(token)
        except TokenValidationError as exc:
            logger.warning(
                "token.rejected",
                kind=exc.kind.value,
                credentials_id=exc.detail.get("credentials_id"),
                reason=exc.detail.get("reason"),
            )
            raise

    def try_verify_and_decode(self, token: str) -> Result[Any, TokenValidationError]:
        """Like :meth:`verify_and_decode`, returning ``Ok``/``Err`` instead of raising."""
        try:
            return Ok(self.verify_and_decode(token))
        except TokenValidationError as exc:
            return Err(exc)

    def decode(self, token: str) -> Any:
        """Return ``data`` without checking the signature or expiry.

        The result is not authenticated; use it for logging and diagnostics only.
        """
        payload = self._unverified_payload(token)
        credentials_id = payload.get("credentials_id")
        if not isinstance(credentials_id, str) or not credentials_id or "data" not in payload:
            raise InvalidTokenStructureError("Token payload lacks credentials_id or data")
        return payload["data"]

    def _verify(self, token: str) -> Any:
        credentials_id = self._credentials_id(token)
        detail = {"credentials_id": credentials_id}

        credential = self._resolve(credentials_id)
        if credential is None:
            raise TokenExpiredError(
                "Token signing credentials are no longer available",
                detail={**detail, "reason": "credentials_rotated"},
            )
        if not is_allowed_algorithm(credential.algorithm):
            raise VerificationAlgorithmError(
                f"Algorithm {credential.algorithm!r} is not allowed", detail=detail
            )
        if not credential.public_key:
            raise InvalidSecretOrKeyError("Public key must be provided", detail=detail)

        try:
            payload = self._codec.verify(
                token,
                credential.public_key,
                algorithms=[str(credential.algorithm)],
            )
        except Exception as exc:
            raise _verification_error(exc, detail) from exc

        if not isinstance(payload, dict) or "data" not in payload:
            raise InvalidTokenStructureError("Verified payload lacks data", detail=detail)
        return payload["data"]

    def _credentials_id(self, token: str) -> str:
        payload = self._unverified_payload(token)
        credentials_id = payload.get("credentials_id")
        if not isinstance(credentials_id, str) or not credentials_id:
            raise InvalidTokenStructureError("Token payload lacks credentials_id")
        return credentials_id

    def _unverified_payload(self, token: str) -> dict[str, Any]:
        try:
            decoded = self._codec.decode_unverified(token)
        except Exception as exc:
            raise InvalidTokenStructureError("Token could not be decoded", cause=exc) from exc
        payload = decoded.get("payload") if isinstance(decoded, dict) else None
        if not isinstance(payload, dict):
            raise InvalidTokenStructureError("Token payload is not an object")
        return payload


def _verification_error(exc: Exception, detail: dict[str, Any]) -> TokenValidationError:
    message = str(exc) or None
    # ExpiredSignatureError and ImmatureSignatureError subclass jwt.InvalidTokenError; check them first
    if isinstance(exc, jwt.ExpiredSignatureError):
        kind, message, detail = ValidatorErrorKind.TOKEN_EXPIRED, None, {**detail, "reason": "exp"}
    elif isinstance(exc, jwt.ImmatureSignatureError):
        kind, message = ValidatorErrorKind.TOKEN_NOT_ACTIVE, None
    elif isinstance(exc, jwt.InvalidAlgorithmError):
        kind = ValidatorErrorKind.INVALID_ALGORITHM
    elif isinstance(exc, jwt.InvalidKeyError):
        kind = ValidatorErrorKind.INVALID_SECRET_OR_KEY
    else:
        kind = ValidatorErrorKind.INVALID_TOKEN
    return error_for(kind, message, detail=detail, cause=exc)


__all__ = ["TokenValidator"]
