"""JWT – closed error taxonomy for token generation and validation.

Every failure carries a ``kind`` drawn from one of two enumerations.  The
enum values are stable strings, safe to return to clients or match on in
logs.  Each kind also has its own exception class so callers can branch
with ``except``::

    try:
        data = handler.verify_and_decode_token(token)
    except TokenExpiredError:
        ...  # re-authenticate
    except TokenValidationError:
        ...  # reject request

``TokenExpiredError`` covers both a lapsed ``exp`` claim and a token whose
signing credentials have left the rotation window; ``detail["reason"]`` is
``"credentials_rotated"`` in the second case.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Any, overload

from rotating_jwt.kernel.errors import ApplicationError, UnauthorizedError


class GeneratorErrorKind(StrEnum):
    TOKEN_EXPIRED = "JWTExpiredToken"
    INVALID_ALGORITHM = "JWTInvalidAlgorithm"
    INVALID_KEY = "JWTInvalidKey"
    SIGN_ERROR = "JWTSignError"


class ValidatorErrorKind(StrEnum):
    INVALID_TOKEN = "JWTInvalidToken"
    INVALID_TOKEN_STRUCTURE = "InvalidTokenStructure"
    TOKEN_EXPIRED = "JWTTokenExpired"
    TOKEN_NOT_ACTIVE = "JWTTokenNotActive"
    INVALID_ALGORITHM = "JWTInvalidAlgorithm"
    INVALID_SECRET_OR_KEY = "JWTInvalidSecretOrKey"


class TokenError(ApplicationError):
    """Base for every token failure; ``kind`` says which one."""

    default_code = "token_error"
    kind: GeneratorErrorKind | ValidatorErrorKind
    default_message = "Token operation failed"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or self.default_message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["kind"] = self.kind.value
        return base


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TokenGenerationError(TokenError):
    default_code = "token_generation_error"
    kind = GeneratorErrorKind.SIGN_ERROR


class SigningAlgorithmError(TokenGenerationError):
    default_code = "invalid_algorithm"
    kind = GeneratorErrorKind.INVALID_ALGORITHM
    default_message = "Signing algorithm rejected"


class SigningKeyError(TokenGenerationError):
    """No active credentials, or the private key was rejected."""

    default_code = "invalid_key"
    kind = GeneratorErrorKind.INVALID_KEY
    default_message = "Signing key missing or invalid"


class TokenExpiredDuringSigningError(TokenGenerationError):
    default_code = "token_expired"
    kind = GeneratorErrorKind.TOKEN_EXPIRED
    default_message = "Token expired while signing"


class SignError(TokenGenerationError):
    default_code = "sign_error"
    kind = GeneratorErrorKind.SIGN_ERROR
    default_message = "Token could not be signed"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TokenValidationError(TokenError, UnauthorizedError):
    default_code = "token_validation_error"
    kind = ValidatorErrorKind.INVALID_TOKEN


class InvalidTokenError(TokenValidationError):
    default_code = "invalid_token"
    kind = ValidatorErrorKind.INVALID_TOKEN
    default_message = "Invalid token"


class InvalidTokenStructureError(TokenValidationError):
    default_code = "invalid_token_structure"
    kind = ValidatorErrorKind.INVALID_TOKEN_STRUCTURE
    default_message = "Invalid token structure"


class TokenExpiredError(TokenValidationError):
    default_code = "token_expired"
    kind = ValidatorErrorKind.TOKEN_EXPIRED
    default_message = "Token expired"


class TokenNotActiveError(TokenValidationError):
    default_code = "token_not_active"
    kind = ValidatorErrorKind.TOKEN_NOT_ACTIVE
    default_message = "Token not active yet"


class VerificationAlgorithmError(TokenValidationError):
    default_code = "invalid_algorithm"
    kind = ValidatorErrorKind.INVALID_ALGORITHM
    default_message = "Verification algorithm rejected"


class InvalidSecretOrKeyError(TokenValidationError):
    default_code = "invalid_secret_or_key"
    kind = ValidatorErrorKind.INVALID_SECRET_OR_KEY
    default_message = "Verification key missing or invalid"


_GENERATION_ERRORS: dict[GeneratorErrorKind, type[TokenGenerationError]] = {
    GeneratorErrorKind.TOKEN_EXPIRED: TokenExpiredDuringSigningError,
    GeneratorErrorKind.INVALID_ALGORITHM: SigningAlgorithmError,
    GeneratorErrorKind.INVALID_KEY: SigningKeyError,
    GeneratorErrorKind.SIGN_ERROR: SignError,
}

# GeneratorErrorKind and ValidatorErrorKind share values, so each gets its own table
_VALIDATION_ERRORS: dict[ValidatorErrorKind, type[TokenValidationError]] = {
    ValidatorErrorKind.INVALID_TOKEN: InvalidTokenError,
    ValidatorErrorKind.INVALID_TOKEN_STRUCTURE: InvalidTokenStructureError,
    ValidatorErrorKind.TOKEN_EXPIRED: TokenExpiredError,
    ValidatorErrorKind.TOKEN_NOT_ACTIVE: TokenNotActiveError,
    ValidatorErrorKind.INVALID_ALGORITHM: VerificationAlgorithmError,
    ValidatorErrorKind.INVALID_SECRET_OR_KEY: InvalidSecretOrKeyError,
}


@overload
def error_for(
    kind: GeneratorErrorKind, message: str | None = ..., **kwargs: Any
) -> TokenGenerationError: ...
@overload
def error_for(
    kind: ValidatorErrorKind, message: str | None = ..., **kwargs: Any
) -> TokenValidationError: ...
def error_for(
    kind: GeneratorErrorKind | ValidatorErrorKind,
    message: str | None = None,
    **kwargs: Any,
) -> TokenError:
    """Build the exception class registered for *kind* in its own taxonomy."""
    if isinstance(kind, GeneratorErrorKind):
        return _GENERATION_ERRORS[kind](message, **kwargs)
    return _VALIDATION_ERRORS[ValidatorErrorKind(kind)](message, **kwargs)


__all__ = [
    "GeneratorErrorKind",
    "InvalidSecretOrKeyError",
    "InvalidTokenError",
    "InvalidTokenStructureError",
    "SignError",
    "SigningAlgorithmError",
    "SigningKeyError",
    "TokenError",
    "TokenExpiredDuringSigningError",
    "TokenExpiredError",
    "TokenGenerationError",
    "TokenNotActiveError",
    "TokenValidationError",
    "ValidatorErrorKind",
    "VerificationAlgorithmError",
    "error_for",
]
