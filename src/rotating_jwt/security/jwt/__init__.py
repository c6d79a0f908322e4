"""Security – JWT issuance and verification (PyJWT-backed)."""
from rotating_jwt.security.jwt.codec import PyJwtCodec, TokenCodec
from rotating_jwt.security.jwt.errors import (
    GeneratorErrorKind,
    InvalidSecretOrKeyError,
    InvalidTokenError,
    InvalidTokenStructureError,
    SignError,
    SigningAlgorithmError,
    SigningKeyError,
    TokenError,
    TokenExpiredDuringSigningError,
    TokenExpiredError,
    TokenGenerationError,
    TokenNotActiveError,
    TokenValidationError,
    ValidatorErrorKind,
    VerificationAlgorithmError,
    error_for,
)
from rotating_jwt.security.jwt.generator import (
    AccessTokenGenerator,
    RefreshToken,
    RefreshTokenGenerator,
    TokenGenerators,
    create_token_generators,
    hash_refresh_token,
)
from rotating_jwt.security.jwt.validator import TokenValidator

__all__ = [
    "AccessTokenGenerator",
    "GeneratorErrorKind",
    "InvalidSecretOrKeyError",
    "InvalidTokenError",
    "InvalidTokenStructureError",
    "PyJwtCodec",
    "RefreshToken",
    "RefreshTokenGenerator",
    "SignError",
    "SigningAlgorithmError",
    "SigningKeyError",
    "TokenCodec",
    "TokenError",
    "TokenExpiredDuringSigningError",
    "TokenExpiredError",
    "TokenGenerationError",
    "TokenGenerators",
    "TokenNotActiveError",
    "TokenValidationError",
    "TokenValidator",
    "ValidatorErrorKind",
    "VerificationAlgorithmError",
    "create_token_generators",
    "error_for",
    "hash_refresh_token",
]
