"""Unit tests for the copy affordance and the system clipboard helper."""

from __future__ import annotations

import logging
import subprocess
import typing as typ

import pytest

from sbe_pages.clipboard import (
    ClipboardError,
    CopyAffordance,
    CopyState,
    SystemClipboard,
)


class _RecordingClipboard:
    def __init__(self, *, fail: bool = False) -> None:
        self.writes: list[str] = []
        self.fail = fail

    def write(self, text: str) -> None:
        if self.fail:
            msg = "permission denied"
            raise ClipboardError(msg)
        self.writes.append(text)


class _ManualScheduler:
    def __init__(self) -> None:
        self.pending: list[tuple[float, typ.Callable[[], None]]] = []

    def __call__(self, delay: float, callback: typ.Callable[[], None]) -> None:
        self.pending.append((delay, callback))

    def fire_all(self) -> None:
        pending, self.pending = self.pending, []
        for _delay, callback in pending:
            callback()


def test_copy_writes_trimmed_content() -> None:
    clipboard = _RecordingClipboard()
    affordance = CopyAffordance(
        "fn main() {}\n  ", clipboard, schedule=_ManualScheduler()
    )

    assert affordance.activate() is CopyState.PRESSED
    assert clipboard.writes == ["fn main() {}"]


def test_pressed_state_resets_after_delay() -> None:
    scheduler = _ManualScheduler()
    affordance = CopyAffordance("x", _RecordingClipboard(), schedule=scheduler)

    affordance.activate()
    assert scheduler.pending[0][0] == pytest.approx(1.0)
    scheduler.fire_all()

    assert affordance.state is CopyState.IDLE


def test_failed_write_is_logged_and_still_resets(
    caplog: pytest.LogCaptureFixture,
) -> None:
    scheduler = _ManualScheduler()
    affordance = CopyAffordance(
        "x", _RecordingClipboard(fail=True), schedule=scheduler, reset_delay_ms=250
    )

    with caplog.at_level(logging.WARNING, logger="sbe_pages.clipboard"):
        state = affordance.activate()

    assert state is CopyState.FAILED
    assert "permission denied" in caplog.text
    assert scheduler.pending[0][0] == pytest.approx(0.25)
    scheduler.fire_all()
    assert affordance.state is CopyState.IDLE


def test_repeated_clicks_schedule_independent_resets() -> None:
    scheduler = _ManualScheduler()
    affordance = CopyAffordance("x", _RecordingClipboard(), schedule=scheduler)

    affordance.activate()
    affordance.activate()

    assert len(scheduler.pending) == 2


def test_blank_content_skips_clipboard() -> None:
    clipboard = _RecordingClipboard()
    affordance = CopyAffordance("   \n", clipboard, schedule=_ManualScheduler())

    assert affordance.activate() is CopyState.PRESSED
    assert clipboard.writes == []


def test_system_clipboard_without_helper_raises(mocker: typ.Any) -> None:
    mocker.patch("sbe_pages.clipboard.shutil.which", return_value=None)
    with pytest.raises(ClipboardError, match="No clipboard helper"):
        SystemClipboard().write("text")


def test_system_clipboard_pipes_text_to_helper(mocker: typ.Any) -> None:
    mocker.patch("sbe_pages.clipboard.shutil.which", return_value="/usr/bin/xclip")
    run = mocker.patch("sbe_pages.clipboard.subprocess.run")

    SystemClipboard(commands=[("xclip", "-selection", "clipboard")]).write("hello")

    args, kwargs = run.call_args
    assert args[0] == ["/usr/bin/xclip", "-selection", "clipboard"]
    assert kwargs["input"] == "hello"


def test_system_clipboard_wraps_helper_failure(mocker: typ.Any) -> None:
    mocker.patch("sbe_pages.clipboard.shutil.which", return_value="/usr/bin/pbcopy")
    mocker.patch(
        "sbe_pages.clipboard.subprocess.run",
        side_effect=subprocess.CalledProcessError(1, ["pbcopy"]),
    )
    with pytest.raises(ClipboardError, match="pbcopy"):
        SystemClipboard().write("hello")
