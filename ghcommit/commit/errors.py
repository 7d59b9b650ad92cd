"""User-facing errors raised by explicit commit command invocations."""

from __future__ import annotations


class CommitCommandError(Exception):
    """Base class for errors whose message is shown to the chat user.

    ``str(error)`` is already localized.
    """


class CommitNotFoundError(CommitCommandError):
    """GitHub reported that the repository or expression does not exist.

    Attributes
    ----------
    owner
        Repository owner from the request.
    repository
        Repository name from the request.
    expression
        Revision expression from the request.

    """

    def __init__(
        self, message: str, *, owner: str, repository: str, expression: str
    ) -> None:
        """Initialise with the localized message and the lookup context."""
        self.owner = owner
        self.repository = repository
        self.expression = expression
        super().__init__(message)


class CommitNoResultError(CommitCommandError):
    """The lookup succeeded but returned no commit object."""


class CommitFetchError(CommitCommandError):
    """The lookup failed before a usable payload was produced."""


class CommitResponseShapeError(RuntimeError):
    """Raised when a commit object does not match the expected shape."""

    @classmethod
    def invalid(cls, detail: str) -> CommitResponseShapeError:
        """Return an error describing the decoding failure."""
        return cls(f"GitHub commit object has unexpected shape: {detail}")
