"""Clip embed text fields to Discord's documented length limits."""

from __future__ import annotations

import msgspec

from .embed import EmbedModel

TITLE_LIMIT = 256
AUTHOR_NAME_LIMIT = 256
FOOTER_TEXT_LIMIT = 2048
ELLIPSIS = "…"


def truncate_text(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, ending in an ellipsis if clipped.

    Examples
    --------
    >>> truncate_text("abcdef", 4)
    'abc…'
    >>> truncate_text("abc", 4)
    'abc'

    """
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def truncate_embed(embed: EmbedModel) -> EmbedModel:
    """Return ``embed`` with every bounded text field clipped.

    URLs, colour and timestamp are left alone. Applying the function twice
    gives the same embed as applying it once.
    """
    author = embed.author
    if author.name is not None:
        author = msgspec.structs.replace(
            author, name=truncate_text(author.name, AUTHOR_NAME_LIMIT)
        )

    footer = embed.footer
    if footer is not None:
        footer = msgspec.structs.replace(
            footer, text=truncate_text(footer.text, FOOTER_TEXT_LIMIT)
        )

    return msgspec.structs.replace(
        embed,
        title=truncate_text(embed.title, TITLE_LIMIT),
        author=author,
        footer=footer,
    )
