"""System error reporting built around a per-thread "current error code"."""

from __future__ import annotations

import enum
import os
import threading

__all__ = [
    "Paradigm",
    "SystemCallError",
    "get_current_error_code",
    "set_current_error_code",
    "system_error_for_code",
    "current_system_error",
    "raise_current_system_error_if",
]


class Paradigm(enum.Enum):
    """The family of system error codes an error belongs to."""

    ERRNO = "errno"
    WIN32 = "win32"
    WSA = "wsa"


class SystemCallError(RuntimeError):
    """An error reported by the system, with its code and paradigm."""

    def __init__(self, error_code: int, message: str, paradigm: Paradigm = Paradigm.ERRNO):
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.paradigm = paradigm

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code!r}, "
            f"message={self.message!r}, paradigm={self.paradigm!r})"
        )


class _ErrorState(threading.local):
    code: int = 0


_state = _ErrorState()


def get_current_error_code() -> int:
    """Return the error code currently recorded for this thread."""
    return _state.code


def set_current_error_code(value: int) -> None:
    """Record ``value`` as the current error code for this thread."""
    _state.code = int(value)


def _message_for_code(error_code: int) -> str:
    try:
        return os.strerror(error_code)
    except (ValueError, OverflowError) as exc:
        raise RuntimeError(
            f"Unable to retrieve the error message for error code {error_code}."
        ) from exc


def system_error_for_code(error_code: int) -> SystemCallError:
    """Build the error describing ``error_code``."""
    return SystemCallError(error_code, _message_for_code(error_code), Paradigm.ERRNO)


def current_system_error() -> SystemCallError:
    """Build the error describing the current error code."""
    return system_error_for_code(get_current_error_code())


def raise_current_system_error_if(condition: bool) -> None:
    """Raise the error for the current error code when ``condition`` is true."""
    if not condition:
        return
    error_code = get_current_error_code()
    error = system_error_for_code(error_code)
    raise error