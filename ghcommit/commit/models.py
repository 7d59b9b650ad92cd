"""Typed models for the commit command pipeline."""

from __future__ import annotations

import dataclasses
import enum
import typing as typ

import msgspec

from ghcommit.common.slug import repo_slug


class InvocationMode(enum.StrEnum):
    """How the dispatcher matched the command."""

    EXPLICIT = "explicit"
    IMPLICIT = "implicit"


class CommandState(enum.StrEnum):
    """Lifecycle states of a single command invocation."""

    PENDING = "pending"
    QUERIED = "queried"
    CLASSIFIED = "classified"
    RENDERED = "rendered"
    DELIVERED = "delivered"
    SUPPRESSED = "suppressed"
    RAISED = "raised"


@dataclasses.dataclass(frozen=True, slots=True)
class CommitReference:
    """Repository coordinates plus an opaque revision expression."""

    owner: str
    repository: str
    expression: str

    @property
    def slug(self) -> str:
        """Return the ``owner/repository`` slug."""
        return repo_slug(self.owner, self.repository)


@dataclasses.dataclass(frozen=True, slots=True)
class CommitCommandRequest:
    """Everything the dispatcher hands to one command invocation."""

    reference: CommitReference
    locale: str
    mode: InvocationMode
    target: object = None

    @classmethod
    def build(  # noqa: PLR0913
        cls,
        owner: str,
        repository: str,
        expression: str,
        *,
        locale: str,
        mode: InvocationMode,
        target: object = None,
    ) -> CommitCommandRequest:
        """Build a request from loose dispatcher arguments."""
        return cls(
            reference=CommitReference(owner, repository, expression),
            locale=locale,
            mode=mode,
            target=target,
        )


class CommitUser(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """GitHub account linked to a commit author."""

    login: str
    avatar_url: str
    url: str


class CommitAuthor(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """Git author of a commit, optionally linked to a GitHub account."""

    avatar_url: str | None = None
    name: str | None = None
    user: CommitUser | None = None


class CommitInfo(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """Commit metadata projected from a successful GraphQL response."""

    abbreviated_oid: str
    commit_url: str
    changed_files: int = 0
    message_headline: str | None = None
    pushed_date: str | None = None
    author: CommitAuthor = msgspec.field(default_factory=CommitAuthor)


@dataclasses.dataclass(frozen=True, slots=True)
class Success:
    """The expression resolved to a commit."""

    commit: CommitInfo


@dataclasses.dataclass(frozen=True, slots=True)
class NotFound:
    """GitHub reported a ``NOT_FOUND`` error for the lookup."""


@dataclasses.dataclass(frozen=True, slots=True)
class NoResult:
    """The payload is present but holds no commit object."""


@dataclasses.dataclass(frozen=True, slots=True)
class TransportError:
    """No usable payload was produced; ``detail`` is for logs only."""

    detail: str | None = None


ClassifiedOutcome: typ.TypeAlias = Success | NotFound | NoResult | TransportError
