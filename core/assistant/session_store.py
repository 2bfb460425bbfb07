#!/usr/bin/env python3
"""
Session Store - bounded per-user conversation buffers.

Keeps the most recent turns for each user id in memory for the lifetime
of the process. Nothing is persisted; buffers are lost on restart.

Reads and writes are thread safe. Callers that need a read followed by a
write to be atomic for one user (the assistant does: read history, answer,
append the exchange) hold ``lock(user_id)`` around both.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from threading import Lock, RLock
from typing import Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"

DEFAULT_HISTORY_LIMIT = 10


@dataclass(frozen=True)
class ConversationTurn:
    """One message within a dialogue exchange."""
    role: str
    content: str

    def __post_init__(self):
        if self.role not in (USER_ROLE, ASSISTANT_ROLE):
            raise ValueError(f"Unknown conversation role: {self.role!r}")


ConversationHistory = Tuple[ConversationTurn, ...]


class _UserLock:
    """Re-entrant lock for one user plus the number of callers holding or awaiting it."""

    def __init__(self):
        self.lock = RLock()
        self.holders = 0


class SessionStore:
    """
    In-memory conversation buffers keyed by user id.

    A user's lock entry exists only while some caller holds or awaits it,
    so the lock map never outgrows the number of in-flight requests.
    """

    def __init__(self, history_limit: int = DEFAULT_HISTORY_LIMIT):
        if history_limit < 1:
            raise ValueError(f"history_limit must be positive, got {history_limit}")
        self.history_limit = history_limit
        self._histories: Dict[str, List[ConversationTurn]] = {}
        self._user_locks: Dict[str, _UserLock] = {}
        self._lock = Lock()

    @contextmanager
    def lock(self, user_id: str) -> Iterator[None]:
        """
        Hold the per-user lock.

        Re-entrant, so ``get``/``append``/``clear`` may be called while held.
        """
        with self._lock:
            entry = self._user_locks.get(user_id)
            if entry is None:
                entry = self._user_locks[user_id] = _UserLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._lock:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._user_locks[user_id]

    def get(self, user_id: str) -> ConversationHistory:
        """
        Get the conversation history for a user.

        Returns:
            Immutable snapshot of the stored turns, oldest first.
            Empty if the user has no history.
        """
        with self._lock:
            return tuple(self._histories.get(user_id, ()))

    def append(self, user_id: str, *turns: ConversationTurn) -> None:
        """
        Append turns for a user and trim the buffer to ``history_limit``.

        The oldest turns are discarded first.
        """
        if not turns:
            return
        with self._lock:
            history = self._histories.setdefault(user_id, [])
            history.extend(turns)
            overflow = len(history) - self.history_limit
            if overflow > 0:
                del history[:overflow]

    def clear(self, user_id: str) -> None:
        """Remove all history for a user."""
        with self.lock(user_id):
            with self._lock:
                self._histories.pop(user_id, None)
        logger.debug(f"Cleared conversation history for {user_id}")

    def close(self) -> None:
        """Drop every buffer. Called at shutdown."""
        with self._lock:
            count = len(self._histories)
            self._histories.clear()
        logger.info(f"Session store closed ({count} conversations dropped)")
