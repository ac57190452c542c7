"""One-time warnings for alpha and beta endpoints."""

from __future__ import annotations

import logging
import threading
from enum import Enum

from .config import SDK_VERSION

_log = logging.getLogger(__name__)

_warned: set[str] = set()
_lock = threading.Lock()


class Stage(str, Enum):
    """Release stage of an endpoint."""

    ALPHA = "alpha"
    BETA = "beta"

    def __str__(self) -> str:
        return self.value


def format_message(key: str, stage: Stage) -> str:
    """Build the warning text for ``key`` at ``stage``."""
    stage = Stage(stage)
    article = "an" if stage is Stage.ALPHA else "a"
    return (
        f"[{stage.value.upper()}] {key} is {article} {stage.value} API in "
        f"Arize SDK v{SDK_VERSION} and may change without notice. "
        "If you experience unexpected failures, please upgrade to the most "
        "recent version of the package."
    )


def warn(key: str, stage: Stage) -> None:
    """Log a warning the first time ``key`` is used; later calls do nothing."""
    with _lock:
        if key in _warned:
            return
        _warned.add(key)
    _log.warning(format_message(key, stage))


def reset_warnings() -> None:
    """Forget which keys have been warned about."""
    with _lock:
        _warned.clear()