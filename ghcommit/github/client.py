"""GitHub GraphQL transport used by the commit command."""

from __future__ import annotations

import dataclasses
import json
import os
import typing as typ

import httpx

from .errors import GitHubConfigError, GitHubTransportError

if typ.TYPE_CHECKING:
    import types

    from .query import GraphQLQuery

RawAPIResult = dict[str, typ.Any]

_DEFAULT_ENDPOINT = "https://api.github.com/graphql"
_DEFAULT_USER_AGENT = "ghcommit/0.1"
_HTTP_ERROR_STATUS_THRESHOLD = 400
_TOKEN_ENV_VARS = ("GHCOMMIT_GITHUB_TOKEN", "GITHUB_TOKEN")


def _token_from_env() -> str:
    for name in _TOKEN_ENV_VARS:
        token = os.environ.get(name, "").strip()
        if token:
            return token
    raise GitHubConfigError.missing_token()


def _timeout_from_env() -> float | None:
    raw_timeout = os.environ.get("GHCOMMIT_GITHUB_TIMEOUT_S")
    if raw_timeout is None or not raw_timeout.strip():
        return None
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise GitHubConfigError.invalid_timeout(raw_timeout) from exc
    if timeout <= 0:
        raise GitHubConfigError.invalid_timeout(raw_timeout)
    return timeout


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubGraphQLConfig:
    """Configuration for the GitHub GraphQL transport.

    Attributes
    ----------
    token
        Bearer credential sent with every request.
    endpoint
        GraphQL endpoint URL.
    timeout_s
        Request timeout in seconds; ``None`` leaves requests unbounded.
    user_agent
        ``User-Agent`` header value.

    """

    token: str
    endpoint: str = _DEFAULT_ENDPOINT
    timeout_s: float | None = None
    user_agent: str = _DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> GitHubGraphQLConfig:
        """Build configuration from environment variables.

        Reads ``GHCOMMIT_GITHUB_TOKEN`` (falling back to ``GITHUB_TOKEN``),
        ``GHCOMMIT_GITHUB_ENDPOINT`` and ``GHCOMMIT_GITHUB_TIMEOUT_S``.

        Raises
        ------
        GitHubConfigError
            If no token is set or the timeout is not a positive number.

        """
        return cls(
            token=_token_from_env(),
            endpoint=os.environ.get("GHCOMMIT_GITHUB_ENDPOINT", _DEFAULT_ENDPOINT),
            timeout_s=_timeout_from_env(),
        )


class GitHubGraphQLClient:
    """Send single GraphQL requests to GitHub and return the raw document."""

    def __init__(
        self,
        config: GitHubGraphQLConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        if not config.token.strip():
            raise GitHubConfigError.empty_token()

        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)
        self._headers = {
            "Authorization": f"Bearer {config.token}",
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }

    async def __aenter__(self) -> GitHubGraphQLClient:
        """Return the client for use in ``async with`` blocks."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned HTTP resources on exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, query: GraphQLQuery) -> RawAPIResult:
        """POST ``query`` and return the decoded response document.

        The document is returned unvalidated: ``data`` and ``errors`` are
        interpreted by the caller.

        Raises
        ------
        GitHubTransportError
            On network failure, an HTTP error status, or a body that is not
            a JSON object.

        """
        try:
            response = await self._client.post(
                self._config.endpoint,
                json=query.payload(),
                headers=self._headers,
            )
        except httpx.HTTPError as exc:
            raise GitHubTransportError.network_error(str(exc)) from exc

        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise GitHubTransportError.http_error(response.status_code)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise GitHubTransportError.invalid_json() from exc

        if not isinstance(payload, dict):
            raise GitHubTransportError.invalid_json()
        return payload
