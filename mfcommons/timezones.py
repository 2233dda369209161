"""Current timezone details: UTC offset, DST offset, name and the TZ variable."""

from __future__ import annotations

import os
import re
import subprocess
import time
from datetime import timedelta

from mfcommons.errors import SystemCallError, system_error_for_code

__all__ = [
    "DEFAULT_TIMEZONE_FILE",
    "get_timezone_offset",
    "get_dst_offset",
    "get_timezone_name",
    "set_system_tz",
    "get_system_tz",
    "tz_set",
    "run_zdump",
    "parse_zdump_output",
]

DEFAULT_TIMEZONE_FILE = "/etc/timezone"

_TZ_VARIABLE = "TZ"
_UTC_LIKE_MARKERS = ("UTC", "UCT", "Universal")
_HEADER_LINES = 3
_INTERVAL_LINE = re.compile(r"[0-9]+-[0-9]+-[0-9]+\t[0-9]+\t([+-]?)([0-9]+)\t.*")


def _as_system_error(exc: OSError) -> SystemCallError:
    if exc.errno is None:
        return SystemCallError(0, str(exc))
    return system_error_for_code(exc.errno)


def get_timezone_offset() -> timedelta:
    """Return the offset of the current timezone east of UTC (UTC+1 gives one hour)."""
    return timedelta(seconds=-time.timezone)


def get_dst_offset() -> timedelta:
    """Return the length of the DST shift of the current timezone, zero if none."""
    timezone_name = get_timezone_name()
    if any(marker in timezone_name for marker in _UTC_LIKE_MARKERS):
        return timedelta(0)
    return parse_zdump_output(run_zdump(timezone_name))


def get_timezone_name(path: str | os.PathLike[str] = DEFAULT_TIMEZONE_FILE) -> str:
    """Return the timezone name written on the first line of ``path``, e.g. "Europe/Paris"."""
    try:
        with open(path, encoding="utf-8") as stream:
            line = stream.readline()
    except OSError as exc:
        raise _as_system_error(exc) from exc
    if not line:
        raise RuntimeError(f"Unexpected end of file while reading the timezone name from {path}.")
    return line[:-1] if line.endswith("\n") else line


def set_system_tz(new_value: str, run_tzset: bool = True) -> None:
    """Set the TZ environment variable, then apply it unless ``run_tzset`` is false."""
    os.environ[_TZ_VARIABLE] = new_value
    if run_tzset:
        tz_set()


def get_system_tz() -> str:
    """Return the TZ environment variable, raising ``RuntimeError`` if it is not set."""
    try:
        return os.environ[_TZ_VARIABLE]
    except KeyError:
        raise RuntimeError(f"Environment variable {_TZ_VARIABLE} is not set.") from None


def tz_set() -> None:
    """Reinitialise the process's timezone settings from the TZ variable."""
    tzset = getattr(time, "tzset", None)
    if tzset is not None:
        tzset()


def run_zdump(timezone_name: str, year: int | None = None) -> str:
    """Run ``zdump -i`` over ``year`` and the next one, returning its output."""
    if year is None:
        year = time.localtime().tm_year
    command = ["zdump", "-i", "-c", f"{year},{year + 1}", timezone_name]
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise _as_system_error(exc) from exc

    if completed.returncode != 0:
        exited = completed.returncode > 0
        message = f"Error from zdump. The return code is {completed.returncode}. "
        message += f"Exited normally: {str(exited).lower()}. "
        if exited:
            message += f"The exit status is {completed.returncode}. "
        raise RuntimeError(message)

    return completed.stdout


def parse_zdump_output(output: str) -> timedelta:
    """Return the DST shift found in ``zdump -i`` output, zero when it cannot be read."""
    lines = output.split("\n")
    if len(lines) < _HEADER_LINES + 3:
        raise RuntimeError(f"Unexpected end of zdump output - string was <<{output}>>.")

    first = _INTERVAL_LINE.fullmatch(lines[_HEADER_LINES])
    second = _INTERVAL_LINE.fullmatch(lines[_HEADER_LINES + 1])
    if first is None or second is None:
        return timedelta(0)

    def signed_offset(match: re.Match[str]) -> int:
        sign, value = match.groups()
        return (1 if sign == "+" else -1) * int(value)

    return timedelta(hours=abs(signed_offset(second) - signed_offset(first)))