"""Unit tests for the YAML-backed localizer."""

from __future__ import annotations

import typing as typ

import pytest

from ghcommit.localization import (
    CatalogueLocalizer,
    LocaleCatalogueError,
    default_localizer,
    interpolate,
    load_locale_catalogue,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

_REQUIRED_KEYS = (
    "command.github.common.errors.fetch",
    "command.github.common.errors.no_result",
    "command.github.commit.errors.not_found",
    "command.github.commit.files_count_one",
    "command.github.commit.files_count_other",
)


@pytest.fixture
def localizer() -> CatalogueLocalizer:
    """Return a localizer with small in-memory catalogues."""
    return CatalogueLocalizer(
        {
            "en-US": {
                "greeting": "Hello {{name}}",
                "items_one": "{{count}} item",
                "items_other": "{{count}} items",
                "only_en": "English only",
            },
            "de": {"greeting": "Hallo {{name}}", "items": "{{count}} Dinge"},
        }
    )


def test_interpolate_fills_known_placeholders() -> None:
    """Known names are substituted and unknown placeholders kept."""
    assert interpolate("{{ a }}-{{b}}-{{c}}", {"a": 1, "b": "x"}) == "1-x-{{c}}"


@pytest.mark.parametrize(
    ("count", "expected"),
    [(1, "1 item"), (0, "0 items"), (2, "2 items")],
)
def test_count_selects_plural_variant(
    localizer: CatalogueLocalizer, count: int, expected: str
) -> None:
    """The count parameter picks the _one or _other variant."""
    assert localizer.localize("items", {"count": count}, "en-US") == expected


def test_plain_key_used_when_no_plural_variant(
    localizer: CatalogueLocalizer,
) -> None:
    """A catalogue without plural variants falls back to the bare key."""
    assert localizer.localize("items", {"count": 1}, "de") == "1 Dinge"


@pytest.mark.parametrize(
    ("locale", "expected"),
    [
        ("de", "Hallo Ada"),
        ("de-AT", "Hallo Ada"),
        ("en-US", "Hello Ada"),
        ("en-GB", "Hello Ada"),
        ("fr", "Hello Ada"),
    ],
)
def test_locale_resolution(
    localizer: CatalogueLocalizer, locale: str, expected: str
) -> None:
    """Exact tag, then language, then fallback locale."""
    assert localizer.localize("greeting", {"name": "Ada"}, locale) == expected


def test_missing_key_in_locale_uses_fallback(localizer: CatalogueLocalizer) -> None:
    """Keys missing from the requested locale come from the fallback."""
    assert localizer.localize("only_en", {}, "de") == "English only"


def test_unknown_key_is_returned_verbatim(localizer: CatalogueLocalizer) -> None:
    """Unknown keys are returned unchanged."""
    assert localizer.localize("nope.missing", {}, "en-US") == "nope.missing"


def test_load_locale_catalogue_flattens_nested_keys(tmp_path: Path) -> None:
    """Nested maps become dotted keys."""
    path = tmp_path / "en-US.yaml"
    path.write_text("a:\n  b:\n    c: deep\n  d: shallow\n", encoding="utf-8")

    assert load_locale_catalogue(path) == {"a.b.c": "deep", "a.d": "shallow"}


def test_load_locale_catalogue_rejects_non_string_leaves(tmp_path: Path) -> None:
    """Every leaf must be a string."""
    path = tmp_path / "en-US.yaml"
    path.write_text("a:\n  b: 3\n", encoding="utf-8")

    with pytest.raises(LocaleCatalogueError, match="'a.b'"):
        load_locale_catalogue(path)


@pytest.mark.parametrize(
    "content",
    ["a: [unclosed\n", "a: 1\na: 2\n", "- just\n- a list\n"],
    ids=["syntax", "duplicate-keys", "not-a-mapping"],
)
def test_load_locale_catalogue_rejects_bad_documents(
    tmp_path: Path, content: str
) -> None:
    """Malformed YAML and non-mapping documents are rejected."""
    path = tmp_path / "en-US.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(LocaleCatalogueError, match="failed to parse"):
        load_locale_catalogue(path)


def test_from_directory_uses_file_stems_as_locales(tmp_path: Path) -> None:
    """Each <locale>.yaml file becomes a catalogue."""
    (tmp_path / "en-US.yaml").write_text("hi: Hello\n", encoding="utf-8")
    (tmp_path / "de.yaml").write_text("hi: Hallo\n", encoding="utf-8")

    localizer = CatalogueLocalizer.from_directory(tmp_path)

    assert localizer.locales == ("de", "en-US")
    assert localizer.localize("hi", {}, "de-CH") == "Hallo"


@pytest.mark.parametrize("locale", ["en-US", "de"])
@pytest.mark.parametrize("key", _REQUIRED_KEYS)
def test_bundled_catalogues_define_command_keys(locale: str, key: str) -> None:
    """Bundled catalogues cover every key the command uses."""
    localizer = default_localizer()

    assert locale in localizer.locales
    assert localizer.localize(key, {}, locale) != key
