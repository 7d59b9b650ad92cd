"""Classify raw GraphQL commit lookups into exactly one outcome.

Checks run in a fixed order and the first match wins:

1. no ``data`` payload: :class:`TransportError`;
2. an ``errors`` entry of type ``NOT_FOUND``: :class:`NotFound`;
3. no ``repository.object``, or one that is not a commit: :class:`NoResult`;
4. otherwise :class:`Success` wrapping the decoded :class:`CommitInfo`.

``NOT_FOUND`` is checked before the null object because GitHub sends both
together for unknown expressions, and the not-found message names the
repository and expression.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .errors import CommitResponseShapeError
from .models import (
    ClassifiedOutcome,
    CommitInfo,
    NoResult,
    NotFound,
    Success,
    TransportError,
)

NOT_FOUND_ERROR_TYPE = "NOT_FOUND"


def _has_not_found_error(errors: object) -> bool:
    if not isinstance(errors, list):
        return False
    return any(
        isinstance(error, dict) and error.get("type") == NOT_FOUND_ERROR_TYPE
        for error in errors
    )


def _commit_object(data: dict[str, typ.Any]) -> object:
    repository = data.get("repository")
    if not isinstance(repository, dict):
        return None
    return repository.get("object")


def _decode_commit(node: object) -> CommitInfo:
    try:
        return msgspec.convert(node, type=CommitInfo)
    except msgspec.ValidationError as exc:
        raise CommitResponseShapeError.invalid(str(exc)) from exc


def classify_response(raw: object) -> ClassifiedOutcome:
    """Return the outcome for a raw GraphQL commit lookup.

    Raises
    ------
    CommitResponseShapeError
        If a commit object is present but cannot be decoded.

    """
    if not isinstance(raw, dict):
        return TransportError("response is not a JSON object")

    data = raw.get("data")
    if not isinstance(data, dict):
        return TransportError("response has no data payload")

    if _has_not_found_error(raw.get("errors")):
        return NotFound()

    node = _commit_object(data)
    if not node:
        # Trees, blobs and tags match no fragment and come back as {}.
        return NoResult()

    return Success(_decode_commit(node))


def commit_title(commit: CommitInfo) -> str:
    """Return the embed title for a commit.

    Examples
    --------
    >>> commit = CommitInfo(
    ...     abbreviated_oid="a1b2c3d", commit_url="u", message_headline="Fix bug"
    ... )
    >>> commit_title(commit)
    '`a1b2c3d` Fix bug'

    """
    if commit.message_headline:
        return f"`{commit.abbreviated_oid}` {commit.message_headline}"
    return commit.abbreviated_oid
