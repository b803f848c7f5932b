"""Behaviour tests for the code panel copy button state machine."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from sbe_pages.clipboard import ClipboardError, CopyAffordance, CopyState

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "copy_button.feature"
scenarios(FEATURE_FILE)


class _FakeClipboard:
    def __init__(self, *, fail: bool) -> None:
        self.fail = fail
        self.contents: str | None = None

    def write(self, text: str) -> None:
        if self.fail:
            msg = "clipboard unavailable"
            raise ClipboardError(msg)
        self.contents = text


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"timers": []}


def _affordance(
    scenario_state: dict[str, object], source: str, *, fail: bool
) -> None:
    timers = typ.cast("list[typ.Callable[[], None]]", scenario_state["timers"])
    clipboard = _FakeClipboard(fail=fail)
    scenario_state["clipboard"] = clipboard
    scenario_state["button"] = CopyAffordance(
        source, clipboard, schedule=lambda _delay, callback: timers.append(callback)
    )


@given(parsers.parse('a copy button for the source "{source}"'))
def given_button(scenario_state: dict[str, object], source: str) -> None:
    _affordance(scenario_state, source, fail=False)


@given("a copy button whose clipboard rejects writes")
def given_failing_button(scenario_state: dict[str, object]) -> None:
    _affordance(scenario_state, "fn main() {}", fail=True)


@when("I click the copy button")
def when_click(scenario_state: dict[str, object]) -> None:
    typ.cast("CopyAffordance", scenario_state["button"]).activate()


@then(parsers.parse('the clipboard holds "{text}"'))
def then_clipboard(scenario_state: dict[str, object], text: str) -> None:
    assert typ.cast("_FakeClipboard", scenario_state["clipboard"]).contents == text


@then(parsers.parse('the copy button shows the "{state}" state'))
def then_state(scenario_state: dict[str, object], state: str) -> None:
    button = typ.cast("CopyAffordance", scenario_state["button"])
    assert button.state is CopyState(state)


@then(parsers.parse('after the reset delay the copy button shows the "{state}" state'))
def then_state_after_reset(scenario_state: dict[str, object], state: str) -> None:
    timers = typ.cast("list[typ.Callable[[], None]]", scenario_state["timers"])
    for callback in timers:
        callback()
    button = typ.cast("CopyAffordance", scenario_state["button"])
    assert button.state is CopyState(state)
