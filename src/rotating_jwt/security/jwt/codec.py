"""JWT – TokenCodec port and its PyJWT-backed implementation.

The codec owns the wire format (header, claims, signature) and the
``iat``/``exp``/``nbf`` claims.  Implementations report failures with
:mod:`jwt` exception types so callers can tell apart:

* ``jwt.DecodeError``: malformed token
* ``jwt.ExpiredSignatureError``: ``exp`` in the past
* ``jwt.ImmatureSignatureError``: ``nbf`` in the future
* ``jwt.InvalidAlgorithmError``: header algorithm not in the allowed list
* ``jwt.InvalidKeyError``: key material rejected
* any other ``jwt.PyJWTError``: invalid signature or claims

``NotImplementedError`` signals an algorithm the codec cannot sign with.
Key material is parsed up front, so a PEM that ``cryptography`` cannot load
surfaces as ``jwt.InvalidKeyError`` and never as a bare ``ValueError``.
"""
from __future__ import annotations

from typing import Any, Protocol

import jwt
from jwt.algorithms import get_default_algorithms

from rotating_jwt.kernel.time import Clock, SystemClock


class TokenCodec(Protocol):
    def sign(
        self,
        payload: dict[str, Any],
        private_key: str,
        *,
        algorithm: str,
        expires_in: int,
    ) -> str: ...

    def decode_unverified(self, token: str) -> dict[str, Any]:
        """Return ``{"header", "payload", "signature"}`` without verifying."""
        ...

    def verify(self, token: str, public_key: str, *, algorithms: list[str]) -> dict[str, Any]:
        """Verify signature and time claims; return the payload."""
        ...


class PyJwtCodec:
    """Signs and verifies compact JWS tokens using PyJWT.

    Parameters
    ----------
    clock:
        Source of ``iat``; ``exp`` is ``iat + expires_in`` seconds.
    not_before:
        Optional offset in seconds for an ``nbf`` claim.
    leeway:
        Seconds of clock skew tolerated on verification.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        not_before: int | None = None,
        leeway: int = 0,
    ) -> None:
        self._clock = clock or SystemClock()
        self._not_before = not_before
        self._leeway = leeway

    def sign(
        self,
        payload: dict[str, Any],
        private_key: str,
        *,
        algorithm: str,
        expires_in: int,
    ) -> str:
        claims = dict(payload)
        now = self._clock.timestamp()
        claims["iat"] = now
        claims["exp"] = now + expires_in
        if self._not_before is not None:
            claims["nbf"] = now + self._not_before
        return jwt.encode(claims, _prepare_key(private_key, algorithm), algorithm=algorithm)

    def decode_unverified(self, token: str) -> dict[str, Any]:
        return jwt.decode_complete(token, options={"verify_signature": False})

    def verify(self, token: str, public_key: str, *, algorithms: list[str]) -> dict[str, Any]:
        return jwt.decode(
            token,
            _prepare_key(public_key, algorithms[0]),
            algorithms=algorithms,
            leeway=self._leeway,
            options={"require": ["exp"]},
        )


def _prepare_key(key: str, algorithm: str) -> Any:
    try:
        alg_obj = get_default_algorithms()[algorithm]
    except KeyError as exc:
        raise NotImplementedError("Algorithm not supported") from exc
    try:
        return alg_obj.prepare_key(key)
    except (ValueError, TypeError) as exc:
        raise jwt.InvalidKeyError(f"Could not load key for {algorithm}: {exc}") from exc


__all__ = ["PyJwtCodec", "TokenCodec"]
