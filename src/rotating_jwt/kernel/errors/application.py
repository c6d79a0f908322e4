"""Application-layer errors – token issuance and authentication failures."""

from __future__ import annotations

from rotating_jwt.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials presented by a caller."""

    default_code = "unauthorized"


__all__ = ["ApplicationError", "UnauthorizedError"]
