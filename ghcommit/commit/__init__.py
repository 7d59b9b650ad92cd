"""Commit lookup command: classification, rendering and orchestration."""

from __future__ import annotations

from .classification import classify_response, commit_title
from .embed import (
    EmbedAuthor,
    EmbedFooter,
    EmbedModel,
    build_commit_embed,
    first_present,
)
from .errors import (
    CommitCommandError,
    CommitFetchError,
    CommitNoResultError,
    CommitNotFoundError,
    CommitResponseShapeError,
)
from .handler import CommitCommand, EmbedDelivery
from .models import (
    ClassifiedOutcome,
    CommandState,
    CommitAuthor,
    CommitCommandRequest,
    CommitInfo,
    CommitReference,
    CommitUser,
    InvocationMode,
    NoResult,
    NotFound,
    Success,
    TransportError,
)
from .observability import CommitEventLogger, CommitEventType
from .truncation import truncate_embed

__all__ = [
    "ClassifiedOutcome",
    "CommandState",
    "CommitAuthor",
    "CommitCommand",
    "CommitCommandError",
    "CommitCommandRequest",
    "CommitEventLogger",
    "CommitEventType",
    "CommitFetchError",
    "CommitInfo",
    "CommitNoResultError",
    "CommitNotFoundError",
    "CommitReference",
    "CommitResponseShapeError",
    "CommitUser",
    "EmbedAuthor",
    "EmbedDelivery",
    "EmbedFooter",
    "EmbedModel",
    "InvocationMode",
    "NoResult",
    "NotFound",
    "Success",
    "TransportError",
    "build_commit_embed",
    "classify_response",
    "commit_title",
    "first_present",
    "truncate_embed",
]
