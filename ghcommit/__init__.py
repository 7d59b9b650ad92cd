"""GitHub commit lookup command for chat bots.

Resolves a commit-ish expression against the GitHub GraphQL API and renders
the result as a chat embed.

Example:
>>> from ghcommit import CommitCommand, CommitCommandRequest, InvocationMode
>>> request = CommitCommandRequest.build(
...     "acme", "widgets", "main", locale="en-US", mode=InvocationMode.EXPLICIT
... )

"""

from __future__ import annotations

from .commit import (
    CommandState,
    CommitCommand,
    CommitCommandError,
    CommitCommandRequest,
    CommitFetchError,
    CommitNoResultError,
    CommitNotFoundError,
    EmbedModel,
    InvocationMode,
)
from .github import GitHubGraphQLClient, GitHubGraphQLConfig
from .localization import CatalogueLocalizer, Localizer, default_localizer

__all__ = [
    "CatalogueLocalizer",
    "CommandState",
    "CommitCommand",
    "CommitCommandError",
    "CommitCommandRequest",
    "CommitFetchError",
    "CommitNoResultError",
    "CommitNotFoundError",
    "EmbedModel",
    "GitHubGraphQLClient",
    "GitHubGraphQLConfig",
    "InvocationMode",
    "Localizer",
    "default_localizer",
]
