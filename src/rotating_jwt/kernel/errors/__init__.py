"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    └── ApplicationError     (application.py)
        └── UnauthorizedError
"""

from rotating_jwt.kernel.errors.application import ApplicationError, UnauthorizedError
from rotating_jwt.kernel.errors.base import BaseError
from rotating_jwt.kernel.errors.domain import DomainError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "UnauthorizedError",
]
