"""A thread-safe collection of appenders attached to an object."""

from __future__ import annotations

import threading
from typing import Any


class AppenderAttachable:
    """Holds appenders in the order they were added, each at most once.

    Appenders are compared by identity and looked up by their ``name``
    attribute.
    """

    def __init__(self) -> None:
        self._appenders: list[Any] = []
        self._guard = threading.RLock()

    def add_appender(self, appender: Any) -> None:
        """Attach ``appender`` unless it is None or already attached."""
        if appender is None:
            return
        with self._guard:
            if self._contains(appender):
                return
            self._appenders.append(appender)

    def appenders(self) -> list[Any]:
        """Return a copy of the list of attached appenders."""
        with self._guard:
            return list(self._appenders)

    def appender(self, name: str) -> Any:
        """Return the first attached appender called ``name``, or None."""
        with self._guard:
            return next((a for a in self._appenders if a.name == name), None)

    def is_attached(self, appender: Any) -> bool:
        """Return True if ``appender`` is attached."""
        with self._guard:
            return self._contains(appender)

    def remove_all_appenders(self) -> None:
        """Detach all appenders."""
        with self._guard:
            self._appenders.clear()

    def remove_appender(self, appender: Any) -> None:
        """Detach ``appender``, or the appender with that name if given a string."""
        if appender is None:
            return
        with self._guard:
            if isinstance(appender, str):
                appender = self.appender(appender)
                if appender is None:
                    return
            self._appenders = [a for a in self._appenders if a is not appender]

    def _contains(self, appender: Any) -> bool:
        return any(a is appender for a in self._appenders)