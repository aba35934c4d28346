"""Package start-up information: start time and environment settings."""

from __future__ import annotations

import os
import time
from collections.abc import Mapping

_SETTING_KEYS = ("Debug", "DefaultInitOverride", "Configuration")
_ENV_KEYS = {f"log4qt_{key}".upper(): key for key in _SETTING_KEYS}

_START_TIME = time.time_ns() // 1_000_000


def environment_settings(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the package settings defined in ``environ``.

    ``LOG4QT_DEBUG``, ``LOG4QT_DEFAULTINITOVERRIDE`` and
    ``LOG4QT_CONFIGURATION`` map to the setting keys ``Debug``,
    ``DefaultInitOverride`` and ``Configuration``. Values are stripped of
    surrounding white space. ``environ`` defaults to the process environment.
    """
    if environ is None:
        environ = os.environ
    return {
        setting_key: environ[env_key].strip()
        for env_key, setting_key in _ENV_KEYS.items()
        if env_key in environ
    }


def setting(key: str, default: str | None = None) -> str | None:
    """Return the value of setting ``key`` from the environment, or ``default``."""
    return environment_settings().get(key, default)


def start_time() -> int:
    """Return the program start time in milliseconds since the Unix epoch."""
    return _START_TIME