"""Structured lifecycle events for commit command invocations.

Usage
-----
>>> event_logger = CommitEventLogger()
>>> event_logger.log_started(request)

"""

from __future__ import annotations

import enum
import typing as typ

from ghcommit.logging import get_logger, log_error, log_info, log_warning

if typ.TYPE_CHECKING:
    from .models import CommitCommandRequest

logger = get_logger(__name__)


class CommitEventType(enum.StrEnum):
    """Structured log event types for the commit command."""

    STARTED = "command.commit.started"
    DELIVERED = "command.commit.delivered"
    SUPPRESSED = "command.commit.suppressed"
    RAISED = "command.commit.raised"
    FAILED = "command.commit.failed"


class CommitEventLogger:
    """Emit commit command events via femtologging."""

    def log_started(self, request: CommitCommandRequest) -> None:
        """Log that an invocation began."""
        log_info(
            logger,
            "[%s] repo_slug=%s expression=%s mode=%s locale=%s",
            CommitEventType.STARTED,
            request.reference.slug,
            request.reference.expression,
            request.mode,
            request.locale,
        )

    def log_delivered(self, request: CommitCommandRequest, title: str) -> None:
        """Log a delivered embed."""
        log_info(
            logger,
            "[%s] repo_slug=%s expression=%s title=%s",
            CommitEventType.DELIVERED,
            request.reference.slug,
            request.reference.expression,
            title,
        )

    def log_suppressed(self, request: CommitCommandRequest, outcome: str) -> None:
        """Log a failure outcome dropped because the invocation was implicit."""
        log_info(
            logger,
            "[%s] repo_slug=%s expression=%s outcome=%s",
            CommitEventType.SUPPRESSED,
            request.reference.slug,
            request.reference.expression,
            outcome,
        )

    def log_raised(self, request: CommitCommandRequest, outcome: str) -> None:
        """Log a failure outcome surfaced to the user."""
        log_warning(
            logger,
            "[%s] repo_slug=%s expression=%s outcome=%s",
            CommitEventType.RAISED,
            request.reference.slug,
            request.reference.expression,
            outcome,
        )

    def log_failed(self, request: CommitCommandRequest, error: BaseException) -> None:
        """Log an unexpected exception that was mapped to a transport error."""
        log_error(
            logger,
            "[%s] repo_slug=%s expression=%s error_type=%s error_message=%s",
            CommitEventType.FAILED,
            request.reference.slug,
            request.reference.expression,
            type(error).__name__,
            str(error),
            exc_info=error,
        )
