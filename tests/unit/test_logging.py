"""Unit tests for femtologging helpers."""

from __future__ import annotations

import pytest

from ghcommit.logging import (
    configure_logging,
    log_error,
    log_info,
    log_warning,
    normalize_log_level,
)


class _FakeLogger:
    """Collects log calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        del stack_info
        self.calls.append((level, message, exc_info))
        return message


@pytest.mark.parametrize(
    ("raw", "expected", "invalid"),
    [
        ("debug", "DEBUG", False),
        ("  Warning ", "WARNING", False),
        (None, "INFO", True),
        ("", "INFO", True),
        ("loud", "INFO", True),
    ],
)
def test_normalize_log_level(
    raw: str | None, expected: str, invalid: bool  # noqa: FBT001
) -> None:
    """Known levels are upper-cased; anything else falls back to INFO."""
    assert normalize_log_level(raw) == (expected, invalid)


@pytest.mark.parametrize(
    ("emit", "level"),
    [(log_info, "INFO"), (log_warning, "WARNING"), (log_error, "ERROR")],
)
def test_helpers_format_and_pass_level(
    emit: object, level: str
) -> None:
    """Helpers render percent templates and forward the level."""
    logger = _FakeLogger()

    emit(logger, "repo=%s count=%d", "acme/widgets", 3)  # type: ignore[operator]

    assert logger.calls == [(level, "repo=acme/widgets count=3", None)]


def test_template_without_args_is_not_interpolated() -> None:
    """A literal percent sign survives when no args are given."""
    logger = _FakeLogger()

    log_info(logger, "100% done")

    assert logger.calls == [("INFO", "100% done", None)]


def test_log_error_forwards_exc_info() -> None:
    """exc_info reaches the logger unchanged."""
    logger = _FakeLogger()
    error = RuntimeError("boom")

    log_error(logger, "failed: %s", error, exc_info=error)

    assert logger.calls == [("ERROR", "failed: boom", error)]


def test_configure_logging_reports_invalid_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """configure_logging passes the normalized level to basicConfig."""
    calls: list[tuple[str, bool]] = []

    def _fake_basic_config(*, level: str, force: bool) -> None:
        calls.append((level, force))

    monkeypatch.setattr("ghcommit.logging.basicConfig", _fake_basic_config)

    assert configure_logging("nope", force=True) == ("INFO", True)
    assert calls == [("INFO", True)]
