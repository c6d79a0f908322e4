"""Credentials – bounded FIFO rotation window.

The newest registered credential signs; any credential still inside the
window verifies.  Eviction follows registration order only, reads never
refresh an entry.
"""
from __future__ import annotations

import threading
from collections import deque

from rotating_jwt.config.tokens import normalize_limit
from rotating_jwt.observability.logging import get_logger
from rotating_jwt.security.credentials.model import Credential

logger = get_logger(__name__)


class CredentialStore:
    """Insertion-ordered credential ids plus an id -> Credential index.

    Both structures are guarded by a single lock, so ``active_credential``
    and ``resolve`` always observe a state produced by a complete
    ``register`` call.
    """

    def __init__(self, limit: int | None = None) -> None:
        self._limit = normalize_limit(limit)
        self._order: deque[str] = deque()
        self._by_id: dict[str, Credential] = {}
        self._lock = threading.Lock()

    @property
    def limit(self) -> int:
        return self._limit

    def register(self, credential: Credential) -> Credential | None:
        """Make *credential* the active one; return the evicted credential, if any."""
        evicted: Credential | None = None
        with self._lock:
            if credential.id in self._by_id:
                self._order.remove(credential.id)
            self._order.append(credential.id)
            self._by_id[credential.id] = credential
            if len(self._order) > self._limit:
                evicted = self._by_id.pop(self._order.popleft())

        logger.info(
            "credentials.registered",
            credentials_id=credential.id,
            algorithm=str(credential.algorithm),
        )
        if evicted is not None:
            logger.info("credentials.evicted", credentials_id=evicted.id)
        return evicted

    def active_credential(self) -> Credential | None:
        with self._lock:
            if not self._order:
                return None
            return self._by_id[self._order[-1]]

    def resolve(self, credentials_id: str) -> Credential | None:
        with self._lock:
            return self._by_id.get(credentials_id)

    def ids(self) -> list[str]:
        """Snapshot of the retained ids, oldest first."""
        with self._lock:
            return list(self._order)

    def __len__(self) -> int:
        with self._lock:
            return len(self._order)

    def __contains__(self, credentials_id: object) -> bool:
        with self._lock:
            return credentials_id in self._by_id


__all__ = ["CredentialStore"]
