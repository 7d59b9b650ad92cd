"""Run the commit command once and print the rendered embed as JSON.

Configuration is read from the environment:

- ``GHCOMMIT_GITHUB_TOKEN`` (or ``GITHUB_TOKEN``): GitHub bearer token
- ``GHCOMMIT_GITHUB_ENDPOINT``: GraphQL endpoint override
- ``GHCOMMIT_GITHUB_TIMEOUT_S``: request timeout in seconds
- ``GHCOMMIT_LOCALE``: default locale (default ``en-US``)
- ``GHCOMMIT_LOG_LEVEL``: log level (default ``INFO``)
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import typing as typ

import msgspec

from ghcommit.commit import (
    CommandState,
    CommitCommand,
    CommitCommandError,
    CommitCommandRequest,
    InvocationMode,
)
from ghcommit.common.slug import parse_repo_slug
from ghcommit.github import (
    GitHubConfigError,
    GitHubGraphQLClient,
    GitHubGraphQLConfig,
)
from ghcommit.localization import DEFAULT_LOCALE, default_localizer
from ghcommit.logging import configure_logging, get_logger, log_error, log_warning

if typ.TYPE_CHECKING:
    from ghcommit.commit import EmbedModel

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_COMMAND_ERROR = 1
EXIT_USAGE_ERROR = 2


async def print_embed(target: object, embed: EmbedModel) -> None:
    """Write ``embed`` as one line of JSON to ``target`` (a text stream)."""
    stream = typ.cast("typ.TextIO", target)
    stream.write(msgspec.json.encode(embed).decode("utf-8"))
    stream.write("\n")
    stream.flush()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghcommit", description=__doc__)
    parser.add_argument("repository", help="Repository slug in owner/name format")
    parser.add_argument("expression", help="Branch, tag or commit-ish to resolve")
    parser.add_argument(
        "--locale",
        default=os.environ.get("GHCOMMIT_LOCALE", DEFAULT_LOCALE),
        help="Locale for user-facing text",
    )
    parser.add_argument(
        "--implicit",
        action="store_true",
        help="Suppress failures as an implicit match would",
    )
    return parser


def _configure_logging() -> None:
    raw_level = os.environ.get("GHCOMMIT_LOG_LEVEL", "INFO")
    normalized, invalid = configure_logging(raw_level)
    if invalid:
        log_warning(
            logger,
            "Invalid GHCOMMIT_LOG_LEVEL %r, falling back to %s",
            raw_level,
            normalized,
        )


async def _run(
    config: GitHubGraphQLConfig, request: CommitCommandRequest
) -> CommandState:
    async with GitHubGraphQLClient(config) as client:
        command = CommitCommand(client, print_embed, default_localizer())
        return await command.run(request)


def main(argv: list[str] | None = None) -> int:
    """Resolve one commit expression and print the embed.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        ``0`` when the embed is printed or the failure is suppressed, ``1``
        when the command reports an error, ``2`` for usage or configuration
        problems.

    """
    args = _parser().parse_args(argv)
    _configure_logging()

    try:
        owner, name = parse_repo_slug(args.repository)
        config = GitHubGraphQLConfig.from_env()
    except (ValueError, GitHubConfigError) as exc:
        log_error(logger, "Cannot run commit lookup: %s", exc)
        print(exc, file=sys.stderr)
        return EXIT_USAGE_ERROR

    mode = InvocationMode.IMPLICIT if args.implicit else InvocationMode.EXPLICIT
    request = CommitCommandRequest.build(
        owner,
        name,
        args.expression,
        locale=args.locale,
        mode=mode,
        target=sys.stdout,
    )

    try:
        asyncio.run(_run(config, request))
    except CommitCommandError as exc:
        print(exc, file=sys.stderr)
        return EXIT_COMMAND_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
