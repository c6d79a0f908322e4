"""Security – credentials, rotation store, JWT issuance and verification."""
from rotating_jwt.security.credentials import (
    Algorithm,
    Credential,
    CredentialStore,
    InvalidKeySizeError,
    KeySize,
    generate_credentials,
)
from rotating_jwt.security.handler import AuthHandler, create_auth_handler
from rotating_jwt.security.jwt import (
    GeneratorErrorKind,
    PyJwtCodec,
    RefreshToken,
    TokenCodec,
    TokenError,
    TokenGenerationError,
    TokenValidationError,
    ValidatorErrorKind,
    hash_refresh_token,
)

__all__ = [
    "Algorithm",
    "AuthHandler",
    "Credential",
    "CredentialStore",
    "GeneratorErrorKind",
    "InvalidKeySizeError",
    "KeySize",
    "PyJwtCodec",
    "RefreshToken",
    "TokenCodec",
    "TokenError",
    "TokenGenerationError",
    "TokenValidationError",
    "ValidatorErrorKind",
    "create_auth_handler",
    "generate_credentials",
    "hash_refresh_token",
]
