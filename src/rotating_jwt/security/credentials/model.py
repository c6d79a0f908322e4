"""Credentials – signing algorithm enumeration and the Credential record."""
from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from enum import StrEnum


class Algorithm(StrEnum):
    """Asymmetric JWS algorithms a credential may carry."""

    ES256 = "ES256"
    ES384 = "ES384"
    ES512 = "ES512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"

    @property
    def is_ecdsa(self) -> bool:
        return self.value.startswith("ES")


ALLOWED_ALGORITHMS: frozenset[str] = frozenset(a.value for a in Algorithm)


def is_allowed_algorithm(algorithm: object) -> bool:
    return isinstance(algorithm, str) and algorithm in ALLOWED_ALGORITHMS


def new_credential_id() -> str:
    """128 random bits, hex encoded."""
    return secrets.token_hex(16)


@dataclass(frozen=True)
class Credential:
    """A matched PEM key pair, its algorithm and a unique identifier.

    ``algorithm`` is kept as handed in; it is checked against
    :data:`ALLOWED_ALGORITHMS` when the credential is used, not here, so
    credentials built by other means still surface the proper error kind.
    """

    id: str
    algorithm: Algorithm | str
    private_key: str = field(repr=False)
    public_key: str = field(repr=False)

    @classmethod
    def create(cls, algorithm: Algorithm | str, private_key: str, public_key: str) -> Credential:
        return cls(
            id=new_credential_id(),
            algorithm=algorithm,
            private_key=private_key,
            public_key=public_key,
        )


__all__ = [
    "ALLOWED_ALGORITHMS",
    "Algorithm",
    "Credential",
    "is_allowed_algorithm",
    "new_credential_id",
]
