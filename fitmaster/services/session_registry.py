"""In-process holder of each user's live session."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable

from fitmaster.core.enums import SessionState
from fitmaster.core.errors import SessionStateError
from fitmaster.repositories.ports import ExerciseRepository, WorkoutRepository
from fitmaster.services.session import ActiveSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """One ActiveSession per user. Opening a new one tears down the previous one.

    Sessions untouched for longer than `idle_timeout` seconds are closed the
    next time the registry is used, so abandoned workouts do not pile up.
    `idle_timeout=None` keeps sessions until they are finished or closed.
    """

    def __init__(
        self,
        idle_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._sessions: dict[uuid.UUID, ActiveSession] = {}
        self._last_used: dict[uuid.UUID, float] = {}
        self._idle_timeout = idle_timeout
        self._clock = clock

    def __len__(self) -> int:
        return len(self._sessions)

    def _touch(self, user_id: uuid.UUID) -> None:
        self._last_used[user_id] = self._clock()

    def sweep(self) -> int:
        """Close sessions idle past the timeout. Returns how many were closed."""
        if self._idle_timeout is None:
            return 0
        cutoff = self._clock() - self._idle_timeout
        stale = [user_id for user_id, used in self._last_used.items() if used < cutoff]
        for user_id in stale:
            self.close(user_id)
        if stale:
            logger.info("Closed %d idle session(s)", len(stale))
        return len(stale)

    def get(self, user_id: uuid.UUID) -> ActiveSession:
        self.sweep()
        session = self._sessions.get(user_id)
        if session is None:
            raise SessionStateError("No session loaded")
        self._touch(user_id)
        return session

    async def open(
        self,
        user_id: uuid.UUID,
        session: ActiveSession,
        exercises: ExerciseRepository,
        workouts: WorkoutRepository,
    ) -> ActiveSession:
        self.sweep()
        self.close(user_id)
        # Registered before loading so a concurrent close() can cancel the load.
        self._sessions[user_id] = session
        self._touch(user_id)
        try:
            await session.load(user_id, exercises, workouts)
        except Exception:
            self.release(user_id, session)
            raise
        if session.state is not SessionState.IN_PROGRESS:
            self.release(user_id, session)
        return session

    def release(self, user_id: uuid.UUID, session: ActiveSession) -> None:
        """Forget `session` if it is still the one registered for the user."""
        if self._sessions.get(user_id) is session:
            del self._sessions[user_id]
            self._last_used.pop(user_id, None)

    def close(self, user_id: uuid.UUID) -> bool:
        session = self._sessions.pop(user_id, None)
        self._last_used.pop(user_id, None)
        if session is None:
            return False
        session.close()
        logger.debug("Closed session for user %s", user_id)
        return True

    def close_all(self) -> None:
        for user_id in list(self._sessions):
            self.close(user_id)
