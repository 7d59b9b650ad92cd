"""Message catalogues for user-facing command text.

Catalogues are YAML 1.2 documents of nested string maps. Lookups use dotted
keys, ``{{name}}`` placeholders are filled from the call parameters, and a
``count`` parameter selects a ``_one``/``_other`` plural variant when the
catalogue defines one.

Example:
>>> localizer = default_localizer()
>>> localizer.localize("command.github.commit.files_count", {"count": 3}, "en-US")
'3 files changed'

"""

from __future__ import annotations

import functools
import re
import typing as typ
from pathlib import Path

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

YAML_VERSION = (1, 2)
DEFAULT_LOCALE = "en-US"
LOCALES_DIR = Path(__file__).parent / "locales"

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class LocaleCatalogueError(ValueError):
    """Raised when a locale catalogue cannot be loaded."""

    @classmethod
    def unreadable(cls, path: Path, detail: str) -> LocaleCatalogueError:
        """Return an error for a file that could not be parsed."""
        return cls(f"failed to parse locale catalogue {path}: {detail}")

    @classmethod
    def invalid_entry(cls, path: Path, key: str) -> LocaleCatalogueError:
        """Return an error for a leaf that is not a string."""
        return cls(f"locale catalogue {path} has a non-string entry at {key!r}")


class Localizer(typ.Protocol):
    """Translate a message key into text for a locale."""

    def localize(
        self, key: str, params: cabc.Mapping[str, object], locale: str
    ) -> str:
        """Return the message for ``key`` rendered with ``params``."""
        ...


def _flatten(
    tree: dict[str, typ.Any], *, path: Path, prefix: str = ""
) -> dict[str, str]:
    messages: dict[str, str] = {}
    for name, value in tree.items():
        key = f"{prefix}{name}"
        if isinstance(value, str):
            messages[key] = value
        elif isinstance(value, dict):
            messages.update(_flatten(value, path=path, prefix=f"{key}."))
        else:
            raise LocaleCatalogueError.invalid_entry(path, key)
    return messages


def load_locale_catalogue(path: Path | str) -> dict[str, str]:
    """Load a YAML catalogue and return its messages keyed by dotted path."""
    path_obj = Path(path)
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False

    try:
        loaded = yaml.load(path_obj.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        raise LocaleCatalogueError.unreadable(path_obj, str(exc)) from exc

    try:
        tree = msgspec.convert(loaded or {}, type=dict[str, typ.Any])
    except msgspec.ValidationError as exc:
        raise LocaleCatalogueError.unreadable(path_obj, str(exc)) from exc

    return _flatten(tree, path=path_obj)


def interpolate(template: str, params: cabc.Mapping[str, object]) -> str:
    """Replace ``{{name}}`` placeholders; unknown names are left in place.

    Examples
    --------
    >>> interpolate("{{count}} files", {"count": 2})
    '2 files'

    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in params:
            return match.group(0)
        return str(params[name])

    return _PLACEHOLDER.sub(_replace, template)


class CatalogueLocalizer:
    """:class:`Localizer` backed by in-memory message catalogues."""

    def __init__(
        self,
        catalogues: cabc.Mapping[str, cabc.Mapping[str, str]],
        *,
        fallback_locale: str = DEFAULT_LOCALE,
    ) -> None:
        """Store catalogues keyed by locale tag (for example ``en-US``)."""
        self._catalogues = {tag: dict(messages) for tag, messages in catalogues.items()}
        self._fallback_locale = fallback_locale

    @classmethod
    def from_directory(
        cls, directory: Path | str, *, fallback_locale: str = DEFAULT_LOCALE
    ) -> CatalogueLocalizer:
        """Load every ``<locale>.yaml`` file in ``directory``."""
        catalogues = {
            path.stem: load_locale_catalogue(path)
            for path in sorted(Path(directory).glob("*.yaml"))
        }
        return cls(catalogues, fallback_locale=fallback_locale)

    @property
    def locales(self) -> tuple[str, ...]:
        """Return the loaded locale tags."""
        return tuple(sorted(self._catalogues))

    def _candidate_locales(self, locale: str) -> list[str]:
        language = locale.split("-", 1)[0].lower()
        candidates = [locale, language]
        candidates.extend(
            tag
            for tag in sorted(self._catalogues)
            if tag.split("-", 1)[0].lower() == language
        )
        candidates.append(self._fallback_locale)
        return candidates

    def _lookup(
        self, messages: cabc.Mapping[str, str], key: str, count: object
    ) -> str | None:
        if isinstance(count, int) and not isinstance(count, bool):
            suffix = "_one" if count == 1 else "_other"
            plural = messages.get(f"{key}{suffix}")
            if plural is not None:
                return plural
        return messages.get(key)

    def localize(
        self, key: str, params: cabc.Mapping[str, object], locale: str
    ) -> str:
        """Return the message for ``key`` in the closest available locale.

        Resolution tries the exact tag, then the primary language subtag,
        then any catalogue for the same language, then the fallback locale.
        An unknown key is returned unchanged.
        """
        count = params.get("count")
        for candidate in self._candidate_locales(locale):
            messages = self._catalogues.get(candidate)
            if messages is None:
                continue
            template = self._lookup(messages, key, count)
            if template is not None:
                return interpolate(template, params)
        return key


@functools.cache
def default_localizer() -> CatalogueLocalizer:
    """Return the localizer for the catalogues bundled with the package."""
    return CatalogueLocalizer.from_directory(LOCALES_DIR)
