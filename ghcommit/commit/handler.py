"""Commit command orchestration.

A single invocation moves through ``PENDING -> QUERIED -> CLASSIFIED`` and
ends in one of three terminal states:

- ``DELIVERED``: the commit resolved and the embed was handed to the
  delivery callable;
- ``SUPPRESSED``: the lookup failed and the invocation was implicit, so
  nothing is sent and nothing is raised;
- ``RAISED``: the lookup failed and the invocation was explicit, so a
  localized :class:`CommitCommandError` propagates to the dispatcher.

Unexpected exceptions raised while querying, classifying, rendering or
delivering are logged and handled as transport errors.
"""

from __future__ import annotations

import typing as typ

from ghcommit.github.query import build_commit_query

from .classification import classify_response
from .embed import build_commit_embed
from .errors import (
    CommitCommandError,
    CommitFetchError,
    CommitNoResultError,
    CommitNotFoundError,
)
from .models import (
    ClassifiedOutcome,
    CommandState,
    InvocationMode,
    NoResult,
    NotFound,
    Success,
    TransportError,
)
from .observability import CommitEventLogger
from .truncation import truncate_embed

if typ.TYPE_CHECKING:
    from ghcommit.github.client import RawAPIResult
    from ghcommit.github.query import GraphQLQuery
    from ghcommit.localization import Localizer

    from .embed import EmbedModel
    from .models import CommitCommandRequest, CommitInfo

FETCH_ERROR_KEY = "command.github.common.errors.fetch"
NO_RESULT_KEY = "command.github.common.errors.no_result"
NOT_FOUND_KEY = "command.github.commit.errors.not_found"


class CommitFetcher(typ.Protocol):
    """Transport that returns the raw GraphQL document for a query."""

    async def fetch(self, query: GraphQLQuery) -> RawAPIResult:
        """Execute ``query`` and return the decoded response body."""
        ...


class EmbedDelivery(typ.Protocol):
    """Callable that sends a rendered embed to the dispatcher's target."""

    async def __call__(self, target: object, embed: EmbedModel) -> None:
        """Deliver ``embed`` to ``target``."""
        ...


def outcome_kind(outcome: ClassifiedOutcome) -> str:
    """Return a stable label for ``outcome`` used in log events."""
    match outcome:
        case Success():
            return "success"
        case NotFound():
            return "not_found"
        case NoResult():
            return "no_result"
        case TransportError():
            return "transport_error"


class CommitCommand:
    """Resolve a commit expression and deliver or suppress the result."""

    def __init__(
        self,
        client: CommitFetcher,
        deliver: EmbedDelivery,
        localizer: Localizer,
        *,
        event_logger: CommitEventLogger | None = None,
    ) -> None:
        """Bind the transport, delivery callable and localizer."""
        self._client = client
        self._deliver = deliver
        self._localizer = localizer
        self._events = event_logger or CommitEventLogger()

    async def run(self, request: CommitCommandRequest) -> CommandState:
        """Run one invocation and return its terminal state.

        Returns
        -------
        CommandState
            ``DELIVERED`` or ``SUPPRESSED``.

        Raises
        ------
        CommitCommandError
            For failed lookups when ``request.mode`` is explicit.

        """
        self._events.log_started(request)
        try:
            outcome = await self.lookup(request)
            if isinstance(outcome, Success):
                return await self._deliver_commit(request, outcome.commit)
        except Exception as exc:  # noqa: BLE001
            self._events.log_failed(request, exc)
            outcome = TransportError(str(exc))
        return self._handle_failure(request, outcome)

    async def lookup(self, request: CommitCommandRequest) -> ClassifiedOutcome:
        """Query GitHub for ``request`` and classify the raw response."""
        reference = request.reference
        query = build_commit_query(
            reference.owner, reference.repository, reference.expression
        )
        raw = await self._client.fetch(query)
        return classify_response(raw)

    def render(self, commit: CommitInfo, locale: str) -> EmbedModel:
        """Build the embed for ``commit`` and clip it to platform limits."""
        return truncate_embed(build_commit_embed(commit, locale, self._localizer))

    async def _deliver_commit(
        self, request: CommitCommandRequest, commit: CommitInfo
    ) -> CommandState:
        embed = self.render(commit, request.locale)
        await self._deliver(request.target, embed)
        self._events.log_delivered(request, embed.title)
        return CommandState.DELIVERED

    def _handle_failure(
        self, request: CommitCommandRequest, outcome: ClassifiedOutcome
    ) -> CommandState:
        kind = outcome_kind(outcome)
        if request.mode is InvocationMode.IMPLICIT:
            self._events.log_suppressed(request, kind)
            return CommandState.SUPPRESSED

        error = self._error_for(request, outcome)
        self._events.log_raised(request, kind)
        raise error

    def _error_for(
        self, request: CommitCommandRequest, outcome: ClassifiedOutcome
    ) -> CommitCommandError:
        reference = request.reference
        locale = request.locale
        match outcome:
            case NotFound():
                message = self._localizer.localize(
                    NOT_FOUND_KEY,
                    {
                        "expression": reference.expression,
                        "owner": reference.owner,
                        "repository": reference.repository,
                    },
                    locale,
                )
                return CommitNotFoundError(
                    message,
                    owner=reference.owner,
                    repository=reference.repository,
                    expression=reference.expression,
                )
            case NoResult():
                return CommitNoResultError(
                    self._localizer.localize(NO_RESULT_KEY, {}, locale)
                )
            case _:
                return CommitFetchError(
                    self._localizer.localize(FETCH_ERROR_KEY, {}, locale)
                )
