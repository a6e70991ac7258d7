"""Access to environment settings, with a ``.env`` file loaded on first use."""

from __future__ import annotations

import os
import threading

from dotenv import find_dotenv, load_dotenv

_lock = threading.Lock()
_loaded = False


def _ensure_dotenv_loaded() -> None:
    global _loaded
    with _lock:
        if not _loaded:
            load_dotenv(find_dotenv(usecwd=True))
            _loaded = True


def read_env(key: str) -> str:
    """Return the value of environment variable ``key``.

    The ``.env`` file found from the working directory is loaded once, the
    first time this is called. A missing variable raises ``KeyError``.
    """
    _ensure_dotenv_loaded()
    return os.environ[key]