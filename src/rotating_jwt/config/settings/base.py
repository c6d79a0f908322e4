"""Config settings – Settings base class and AuthSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""


@dataclasses.dataclass
class AuthSettings(Settings):
    """Token settings read from ``ROTATING_JWT_*`` environment variables.

    ``None`` means "not configured"; :class:`~rotating_jwt.config.tokens.AuthConfig`
    fills in the defaults.
    """

    _prefix: ClassVar[str] = "ROTATING_JWT"

    access_token_expiry: int | None = None
    refresh_token_expiry: int | None = None
    credentials_limit: int | None = None


__all__ = ["AuthSettings", "Settings"]
