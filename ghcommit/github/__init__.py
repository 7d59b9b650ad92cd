"""GitHub GraphQL transport and query construction."""

from __future__ import annotations

from .client import GitHubGraphQLClient, GitHubGraphQLConfig, RawAPIResult
from .errors import GitHubConfigError, GitHubTransportError
from .query import COMMIT_QUERY, GraphQLQuery, build_commit_query

__all__ = [
    "COMMIT_QUERY",
    "GitHubConfigError",
    "GitHubGraphQLClient",
    "GitHubGraphQLConfig",
    "GitHubTransportError",
    "GraphQLQuery",
    "RawAPIResult",
    "build_commit_query",
]
