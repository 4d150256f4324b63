"""Transient user feedback: one notification at a time, auto-expiring."""
from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NotificationKind
    expires_at: float


class Notifier:
    """Holds at most one notification.

    ``show`` replaces whatever is visible and restarts the countdown; there is
    no queue. ``current`` lazily clears the notification once ``clock()``
    reaches its expiry.
    """

    def __init__(
        self,
        duration: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration is None:
            from pentopublic.config import settings
            duration = settings.NOTIFICATION_SECONDS
        self.duration = duration
        self._clock = clock
        self._current: Notification | None = None

    def show(self, message: str, kind: NotificationKind | str = NotificationKind.INFO) -> Notification:
        self._current = Notification(
            message=message,
            kind=NotificationKind(kind),
            expires_at=self._clock() + self.duration,
        )
        return self._current

    def current(self) -> Notification | None:
        if self._current is not None and self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    def clear(self) -> None:
        self._current = None
