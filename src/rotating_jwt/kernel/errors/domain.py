"""Domain errors – invalid requests against the credential model."""

from __future__ import annotations

from rotating_jwt.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a credential or key-generation rule is violated."""

    default_code = "domain_error"


__all__ = ["DomainError"]
