"""Credentials – RSA / ECDSA key-pair generation.

Key sizes:

* ``LOW``: RSA 2048-bit modulus, ECDSA P-256.
* ``MEDIUM``: RSA 3072-bit modulus, ECDSA P-384.
* ``HIGH``: RSA 4096-bit modulus, ECDSA P-521.

ECDSA curves are fixed by the algorithm (``ES256`` needs ``LOW``,
``ES384`` needs ``MEDIUM``, ``ES512`` needs ``HIGH``); RSA defaults to
``MEDIUM``.
"""
from __future__ import annotations

from enum import StrEnum

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from rotating_jwt.kernel.errors import DomainError
from rotating_jwt.security.credentials.model import Algorithm, Credential
from rotating_jwt.security.jwt.errors import SigningAlgorithmError


class KeySize(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InvalidKeySizeError(DomainError):
    """The requested key size does not fit the algorithm."""

    default_code = "invalid_key_size"

    def __init__(self, algorithm: str, key_size: str, required: str) -> None:
        super().__init__(
            f"Invalid key size for algorithm {algorithm}, please use {required}",
            detail={"algorithm": algorithm, "key_size": key_size, "required": required},
        )
        self.required = required


_RSA_MODULUS: dict[KeySize, int] = {
    KeySize.LOW: 2048,
    KeySize.MEDIUM: 3072,
    KeySize.HIGH: 4096,
}

_ECDSA_CURVES: dict[Algorithm, tuple[KeySize, type[ec.EllipticCurve]]] = {
    Algorithm.ES256: (KeySize.LOW, ec.SECP256R1),
    Algorithm.ES384: (KeySize.MEDIUM, ec.SECP384R1),
    Algorithm.ES512: (KeySize.HIGH, ec.SECP521R1),
}


def generate_credentials(
    algorithm: Algorithm | str,
    key_size: KeySize | str | None = None,
) -> Credential:
    """Generate a fresh key pair for *algorithm* and wrap it in a Credential."""
    try:
        alg = Algorithm(algorithm)
    except ValueError as exc:
        raise SigningAlgorithmError(
            f"Unsupported algorithm {algorithm!r}", detail={"algorithm": str(algorithm)}, cause=exc
        ) from exc
    try:
        size = KeySize(key_size) if key_size is not None else None
    except ValueError as exc:
        raise InvalidKeySizeError(alg.value, str(key_size), "low, medium or high") from exc

    if alg.is_ecdsa:
        required, curve = _ECDSA_CURVES[alg]
        if size is not None and size is not required:
            raise InvalidKeySizeError(alg.value, size.value, required.value)
        private_key, public_key = _ecdsa_pair(curve())
    else:
        private_key, public_key = _rsa_pair(_RSA_MODULUS[size or KeySize.MEDIUM])
    return Credential.create(alg, private_key, public_key)


def _rsa_pair(modulus: int) -> tuple[str, str]:
    key = rsa.generate_private_key(public_exponent=65537, key_size=modulus)
    private_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return private_pem.decode(), _public_pem(key.public_key())


def _ecdsa_pair(curve: ec.EllipticCurve) -> tuple[str, str]:
    key = ec.generate_private_key(curve)
    private_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return private_pem.decode(), _public_pem(key.public_key())


def _public_pem(public_key: rsa.RSAPublicKey | ec.EllipticCurvePublicKey) -> str:
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


__all__ = ["InvalidKeySizeError", "KeySize", "generate_credentials"]
