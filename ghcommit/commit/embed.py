"""Render commit metadata as a chat embed."""

from __future__ import annotations

import typing as typ

import msgspec

from .classification import commit_title

if typ.TYPE_CHECKING:
    from ghcommit.localization import Localizer

    from .models import CommitInfo

GITHUB_COLOR_COMMIT = 0x2CBE4E
GITHUB_ICON_COMMIT = (
    "https://github.githubassets.com/images/icons/emoji/unicode/1f4e6.png"
)
FILES_COUNT_KEY = "command.github.commit.files_count"

T = typ.TypeVar("T")


class EmbedAuthor(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """Author block shown above the embed title."""

    name: str | None = None
    icon_url: str | None = None
    url: str | None = None


class EmbedFooter(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """Footer line with an optional icon."""

    text: str
    icon_url: str | None = None


class EmbedModel(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """Platform-agnostic embed; encodes to the chat API message shape."""

    author: EmbedAuthor = msgspec.field(default_factory=EmbedAuthor)
    color: int
    title: str
    url: str
    footer: EmbedFooter | None = None
    timestamp: str | None = None


def first_present(*candidates: T | None) -> T | None:
    """Return the first candidate that is not ``None``.

    Examples
    --------
    >>> first_present(None, "octocat", "Octo Cat")
    'octocat'

    """
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def resolve_author(commit: CommitInfo) -> EmbedAuthor:
    """Resolve each author field independently, preferring the GitHub user."""
    author = commit.author
    user = author.user
    return EmbedAuthor(
        icon_url=first_present(user.avatar_url if user else None, author.avatar_url),
        name=first_present(user.login if user else None, author.name),
        url=first_present(user.url if user else None),
    )


def build_commit_embed(
    commit: CommitInfo, locale: str, localizer: Localizer
) -> EmbedModel:
    """Build the untruncated embed for ``commit`` in ``locale``."""
    footer_text = localizer.localize(
        FILES_COUNT_KEY, {"count": commit.changed_files}, locale
    )
    return EmbedModel(
        author=resolve_author(commit),
        color=GITHUB_COLOR_COMMIT,
        title=commit_title(commit),
        url=commit.commit_url,
        footer=EmbedFooter(text=footer_text, icon_url=GITHUB_ICON_COMMIT),
        timestamp=commit.pushed_date,
    )
