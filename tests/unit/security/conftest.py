"""Shared credentials for security tests; key generation runs once per session."""

from __future__ import annotations

import pytest

from rotating_jwt.security.credentials import Algorithm, Credential, KeySize, generate_credentials


@pytest.fixture(scope="session")
def es256() -> Credential:
    return generate_credentials(Algorithm.ES256)


@pytest.fixture(scope="session")
def es256_other() -> Credential:
    return generate_credentials(Algorithm.ES256)


@pytest.fixture(scope="session")
def es384() -> Credential:
    return generate_credentials(Algorithm.ES384)


@pytest.fixture(scope="session")
def rs256() -> Credential:
    return generate_credentials(Algorithm.RS256, KeySize.LOW)


@pytest.fixture(scope="session")
def ps256() -> Credential:
    return generate_credentials(Algorithm.PS256, KeySize.LOW)
