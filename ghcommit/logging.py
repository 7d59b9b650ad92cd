"""femtologging helpers shared by the command handler and the CLI.

Messages are formatted eagerly with percent-style templates before they reach
femtologging, which only accepts pre-rendered strings.

Example:
>>> from ghcommit.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Resolved %s", "acme/widgets@main")

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger

_DEFAULT_LEVEL = "INFO"


class LogLevel(enum.StrEnum):
    """Log levels understood by femtologging."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Return the upper-cased level and whether the input was rejected.

    Parameters
    ----------
    level : str | None
        Level name as read from the environment.

    Returns
    -------
    tuple[str, bool]
        ``(level, invalid)``; ``INFO`` is substituted for unknown values.

    """
    if not level:
        return (_DEFAULT_LEVEL, True)

    candidate = level.strip().upper()
    if candidate in LogLevel.__members__:
        return (candidate, False)
    return (_DEFAULT_LEVEL, True)


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Install the femtologging root handler at the normalized level."""
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


class _SupportsLog(typ.Protocol):
    """Subset of the femtologging logger API used here."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(
    logger: _SupportsLog,
    level: str,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    message = template % args if args else template
    logger.log(level, message, exc_info=exc_info, stack_info=False)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an INFO message rendered from ``template % args``."""
    _emit(logger, "INFO", template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING message rendered from ``template % args``."""
    _emit(logger, "WARNING", template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an ERROR message rendered from ``template % args``.

    Parameters
    ----------
    logger : _SupportsLog
        Destination logger.
    template : str
        Percent-style template.
    *args : object
        Interpolation values.
    exc_info : object | None, optional
        Exception attached to the record.

    """
    _emit(logger, "ERROR", template, args, exc_info)


__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "log_error",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
