"""Helpers for ``owner/name`` repository slugs.

Slugs are GitHub identifiers, not filesystem paths, so they are split on the
single ``/`` rather than parsed with ``pathlib``.
"""

from __future__ import annotations


def repo_slug(owner: str, name: str) -> str:
    """Join an owner and repository name.

    Examples
    --------
    >>> repo_slug("acme", "widgets")
    'acme/widgets'

    """
    return f"{owner}/{name}"


def parse_repo_slug(slug: str) -> tuple[str, str]:
    """Split an ``owner/name`` slug.

    Raises
    ------
    ValueError
        If ``slug`` does not contain exactly one ``/`` with text on both sides.

    Examples
    --------
    >>> parse_repo_slug("acme/widgets")
    ('acme', 'widgets')

    """
    owner, separator, name = slug.strip().partition("/")
    if not separator or not owner or not name or "/" in name:
        msg = f"Invalid repository slug: expected 'owner/name', got {slug!r}"
        raise ValueError(msg)
    return owner, name
