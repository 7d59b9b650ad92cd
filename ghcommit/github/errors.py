"""Errors raised by the GitHub GraphQL transport and its configuration."""

from __future__ import annotations


class GitHubTransportError(RuntimeError):
    """Raised when a GraphQL request fails to produce a JSON document."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and the HTTP status code, when one exists."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int) -> GitHubTransportError:
        """Return an error for a non-2xx HTTP response."""
        return cls(f"GitHub GraphQL HTTP {status_code}", status_code=status_code)

    @classmethod
    def network_error(cls, detail: str) -> GitHubTransportError:
        """Return an error for connection, TLS or timeout failures."""
        return cls(f"GitHub GraphQL network error: {detail}")

    @classmethod
    def invalid_json(cls) -> GitHubTransportError:
        """Return an error for a response body that is not a JSON object."""
        return cls("GitHub GraphQL response body is not a JSON object")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def missing_token(cls) -> GitHubConfigError:
        """Return an error when no token is available in the environment."""
        return cls("GHCOMMIT_GITHUB_TOKEN or GITHUB_TOKEN is required for GitHub API")

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when the configured token is blank."""
        return cls("GitHub token must be non-empty")

    @classmethod
    def invalid_timeout(cls, value: str) -> GitHubConfigError:
        """Return an error for a timeout that is not a positive number."""
        return cls(
            f"Invalid GHCOMMIT_GITHUB_TIMEOUT_S {value!r}: must be a positive float"
        )
