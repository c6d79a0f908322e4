"""Token expiry and rotation-window configuration.

The accepted mapping shape is::

    {
        "access_token": {"expiry": 3600},
        "refresh_token": {"expiry": 7776000},
        "credentials_limit": 10,
    }

Every section is optional and defaulted on its own.  Expiries are kept as
given, so zero or negative values yield tokens that are already expired;
a non-positive ``credentials_limit`` falls back to the default.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Final, Mapping

from rotating_jwt.config.settings import AuthSettings
from rotating_jwt.config.validation import InvalidSettingValueError

DEFAULT_ACCESS_TOKEN_EXPIRY: Final[int] = 3600  # 1h
DEFAULT_REFRESH_TOKEN_EXPIRY: Final[int] = 3600 * 24 * 90  # 90 days
DEFAULT_CREDENTIALS_LIMIT: Final[int] = 10


def normalize_limit(limit: int | None) -> int:
    """Return *limit* when positive, else :data:`DEFAULT_CREDENTIALS_LIMIT`."""
    if limit is None or limit <= 0:
        return DEFAULT_CREDENTIALS_LIMIT
    return limit


@dataclasses.dataclass(frozen=True)
class TokenConfig:
    """Lifetime of one token flavour, in seconds."""

    expiry: int


@dataclasses.dataclass(frozen=True)
class AuthConfig:
    access_token: TokenConfig = TokenConfig(DEFAULT_ACCESS_TOKEN_EXPIRY)
    refresh_token: TokenConfig = TokenConfig(DEFAULT_REFRESH_TOKEN_EXPIRY)
    credentials_limit: int = DEFAULT_CREDENTIALS_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "credentials_limit", normalize_limit(self.credentials_limit))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None = None) -> AuthConfig:
        mapping = mapping or {}
        return cls(
            access_token=TokenConfig(
                _expiry(mapping, "access_token", DEFAULT_ACCESS_TOKEN_EXPIRY)
            ),
            refresh_token=TokenConfig(
                _expiry(mapping, "refresh_token", DEFAULT_REFRESH_TOKEN_EXPIRY)
            ),
            credentials_limit=_int_or_none(
                "credentials_limit", mapping.get("credentials_limit")
            ),
        )

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> AuthConfig:
        return cls(
            access_token=TokenConfig(
                DEFAULT_ACCESS_TOKEN_EXPIRY
                if settings.access_token_expiry is None
                else settings.access_token_expiry
            ),
            refresh_token=TokenConfig(
                DEFAULT_REFRESH_TOKEN_EXPIRY
                if settings.refresh_token_expiry is None
                else settings.refresh_token_expiry
            ),
            credentials_limit=settings.credentials_limit,
        )


def _expiry(mapping: Mapping[str, Any], section: str, default: int) -> int:
    value = mapping.get(section)
    if value is None:
        return default
    if isinstance(value, TokenConfig):
        return value.expiry
    if not isinstance(value, Mapping):
        raise InvalidSettingValueError(section, value, "expected a mapping with an 'expiry' key")
    expiry = _int_or_none(f"{section}.expiry", value.get("expiry"))
    return default if expiry is None else expiry


def _int_or_none(name: str, value: Any) -> int | None:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSettingValueError(name, value, "expected an integer")
    return value


__all__ = [
    "DEFAULT_ACCESS_TOKEN_EXPIRY",
    "DEFAULT_CREDENTIALS_LIMIT",
    "DEFAULT_REFRESH_TOKEN_EXPIRY",
    "AuthConfig",
    "TokenConfig",
    "normalize_limit",
]
