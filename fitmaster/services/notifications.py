"""Best-effort local alerts (rest timer finished)."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Capability the rest timer calls; delivery is never guaranteed."""

    def request_permission(self) -> bool:
        ...

    def notify(self, title: str, body: str) -> None:
        ...


class LogNotifier:
    """Server-side notifier: the alert goes to the log."""

    def request_permission(self) -> bool:
        return True

    def notify(self, title: str, body: str) -> None:
        logger.info("%s %s", title, body)


class NullNotifier:
    def request_permission(self) -> bool:
        return False

    def notify(self, title: str, body: str) -> None:
        pass
