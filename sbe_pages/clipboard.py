"""Copy-to-clipboard affordance for code panels.

:class:`CopyAffordance` models the copy button's visual state. Activation
switches to ``pressed`` straight away, writes the trimmed source to the
clipboard collaborator, and always schedules a return to ``idle``. A failed
write is logged and shown as ``failed`` instead of ``pressed``; it is never
raised to the caller.

The same state machine runs in the browser (see ``templates/_script.jinja``);
this module backs the ``pages copy`` command and the tests.
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import logging
import shutil
import subprocess
import threading
import typing as typ

from ._constants import COPY_RESET_DELAY_MS

logger = logging.getLogger(__name__)

Scheduler = cabc.Callable[[float, cabc.Callable[[], None]], object]

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("pbcopy",),
    ("clip",),
)


class ClipboardError(RuntimeError):
    """Raised when the clipboard is unavailable or rejects a write."""


class CopyState(enum.StrEnum):
    """Visual state of the copy button."""

    IDLE = "idle"
    PRESSED = "pressed"
    FAILED = "failed"


class Clipboard(typ.Protocol):
    """Clipboard collaborator accepting a string."""

    def write(self, text: str) -> None:
        """Place ``text`` on the clipboard or raise :class:`ClipboardError`."""
        ...


class SystemClipboard:
    """Write to the desktop clipboard through the first available helper."""

    def __init__(self, commands: cabc.Sequence[tuple[str, ...]] = CLIPBOARD_COMMANDS) -> None:
        self.commands = tuple(commands)

    def _resolve_command(self) -> list[str]:
        for command in self.commands:
            executable = shutil.which(command[0])
            if executable:
                return [executable, *command[1:]]
        names = ", ".join(command[0] for command in self.commands)
        msg = f"No clipboard helper found on PATH (tried {names})"
        raise ClipboardError(msg)

    def write(self, text: str) -> None:
        command = self._resolve_command()
        try:
            subprocess.run(  # noqa: S603 - command comes from a fixed allow-list
                command,
                input=text,
                text=True,
                check=True,
                capture_output=True,
                timeout=10,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            msg = f"Clipboard helper '{command[0]}' failed: {exc}"
            raise ClipboardError(msg) from exc


def _start_timer(delay: float, callback: cabc.Callable[[], None]) -> threading.Timer:
    """Run ``callback`` after ``delay`` seconds on a daemon timer thread."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class CopyAffordance:
    """Copy button bound to a single code panel's source."""

    def __init__(
        self,
        content: str,
        clipboard: Clipboard,
        *,
        reset_delay_ms: int = COPY_RESET_DELAY_MS,
        schedule: Scheduler | None = None,
    ) -> None:
        """Capture the trimmed source once and wire the collaborators.

        Parameters
        ----------
        content : str
            Source text shown in the panel; leading and trailing whitespace is
            stripped once here.
        clipboard : Clipboard
            Collaborator receiving the copied text.
        reset_delay_ms : int, optional
            Delay before the button returns to ``idle``. Defaults to
            ``COPY_RESET_DELAY_MS``.
        schedule : Scheduler, optional
            ``schedule(seconds, callback)`` used for the reset; defaults to a
            daemon :class:`threading.Timer`.
        """
        self.copy_text = content.strip()
        self.clipboard = clipboard
        self.reset_delay_ms = reset_delay_ms
        self._schedule = schedule or _start_timer
        self.state = CopyState.IDLE

    def activate(self) -> CopyState:
        """Handle a click and return the state shown until the reset fires."""
        self.state = CopyState.PRESSED
        if self.copy_text:
            try:
                self.clipboard.write(self.copy_text)
            except ClipboardError as exc:
                logger.warning("Failed to copy: %s", exc)
                self.state = CopyState.FAILED
        # Earlier timers stay armed; any of them may reset the state.
        self._schedule(self.reset_delay_ms / 1000, self._reset)
        return self.state

    def _reset(self) -> None:
        self.state = CopyState.IDLE


__all__ = [
    "CLIPBOARD_COMMANDS",
    "Clipboard",
    "ClipboardError",
    "CopyAffordance",
    "CopyState",
    "SystemClipboard",
]
