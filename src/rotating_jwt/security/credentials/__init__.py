"""Security – credentials, key generation and the rotation store."""
from rotating_jwt.security.credentials.keys import InvalidKeySizeError, KeySize, generate_credentials
from rotating_jwt.security.credentials.model import (
    ALLOWED_ALGORITHMS,
    Algorithm,
    Credential,
    is_allowed_algorithm,
    new_credential_id,
)
from rotating_jwt.security.credentials.store import CredentialStore

__all__ = [
    "ALLOWED_ALGORITHMS",
    "Algorithm",
    "Credential",
    "CredentialStore",
    "InvalidKeySizeError",
    "KeySize",
    "generate_credentials",
    "is_allowed_algorithm",
    "new_credential_id",
]
