"""Theme preference resolution, persistence, and broadcast.

A :class:`ThemeSelector` holds the session-wide light/dark/system preference.
It is handed to the renderers explicitly rather than living in a module
global; one writer (an explicit user action) updates it and any number of
readers are notified through :meth:`ThemeSelector.subscribe`.

Examples
--------
>>> selector = ThemeSelector(MemoryThemeStore(ThemePreference.DARK))
>>> selector.resolved
<ThemeVariant.DARK: 'dark'>
>>> selector.toggle()
<ThemePreference.LIGHT: 'light'>
>>> resolve_theme(ThemePreference.SYSTEM, lambda: None)
<ThemeVariant.LIGHT: 'light'>
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import logging
import os
import typing as typ
from pathlib import Path

import tomlkit

logger = logging.getLogger(__name__)


def default_theme_file() -> Path:
    """Return ``$SBE_THEME_FILE``, else ``~/.config/sbe-pages/theme.toml``.

    The home directory is only looked up when the variable is unset.
    """
    override = os.getenv("SBE_THEME_FILE")
    if override:
        return Path(override)
    return Path.home() / ".config" / "sbe-pages" / "theme.toml"


DEFAULT_THEME_FILE = default_theme_file()


class ThemePreference(enum.StrEnum):
    """User-selected theme, where ``system`` defers to the OS signal."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class ThemeVariant(enum.StrEnum):
    """Concrete visual variant a component renders with."""

    LIGHT = "light"
    DARK = "dark"


FALLBACK_VARIANT = ThemeVariant.LIGHT

SystemSignal = cabc.Callable[[], "ThemeVariant | str | None"]


def resolve_theme(
    preference: ThemePreference | str, system_signal: SystemSignal | None = None
) -> ThemeVariant:
    """Resolve ``preference`` to a concrete variant.

    ``system`` consults ``system_signal``; a missing signal, a ``None``
    reading, or an unrecognised value falls back to the light variant.
    """
    pref = ThemePreference(preference)
    if pref is ThemePreference.LIGHT:
        return ThemeVariant.LIGHT
    if pref is ThemePreference.DARK:
        return ThemeVariant.DARK
    if system_signal is None:
        return FALLBACK_VARIANT
    reading = system_signal()
    if reading is None:
        return FALLBACK_VARIANT
    try:
        return ThemeVariant(reading)
    except ValueError:
        logger.debug("Ignoring unknown system theme signal %r", reading)
        return FALLBACK_VARIANT


class ThemeStore(typ.Protocol):
    """Persistence collaborator for the theme preference."""

    def get(self) -> ThemePreference:
        """Return the stored preference."""
        ...

    def set(self, preference: ThemePreference) -> None:
        """Persist ``preference``."""
        ...


class MemoryThemeStore:
    """Keep the preference for the lifetime of the process only."""

    def __init__(self, initial: ThemePreference | str = ThemePreference.SYSTEM) -> None:
        self._preference = ThemePreference(initial)

    def get(self) -> ThemePreference:
        return self._preference

    def set(self, preference: ThemePreference) -> None:
        self._preference = ThemePreference(preference)


class FileThemeStore:
    """Persist the preference under ``[theme]`` in a TOML file.

    Missing or unreadable files read as ``default``; writes keep any other
    tables already present in the document.
    """

    def __init__(
        self,
        path: Path = DEFAULT_THEME_FILE,
        *,
        default: ThemePreference = ThemePreference.SYSTEM,
    ) -> None:
        self.path = path
        self.default = default

    def get(self) -> ThemePreference:
        try:
            doc = tomlkit.parse(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return self.default
        except tomlkit.exceptions.ParseError:
            logger.warning("Unable to parse theme file %s; using %s", self.path, self.default)
            return self.default
        table = doc.get("theme")
        if table is None:
            return self.default
        if not isinstance(table, (tomlkit.items.Table, tomlkit.items.InlineTable)):
            logger.warning(
                "Ignoring non-table [theme] entry in %s; using %s", self.path, self.default
            )
            return self.default
        value = table.get("preference")
        try:
            return ThemePreference(str(value))
        except ValueError:
            return self.default

    def set(self, preference: ThemePreference) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            doc = tomlkit.parse(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, tomlkit.exceptions.ParseError):
            doc = tomlkit.document()
        table = doc.get("theme")
        if not isinstance(table, tomlkit.items.Table):
            table = tomlkit.table()
        table["preference"] = ThemePreference(preference).value
        doc["theme"] = table
        self.path.write_text(tomlkit.dumps(doc), encoding="utf-8")


class ThemeSelector:
    """Session-wide theme preference with broadcast to readers."""

    def __init__(
        self, store: ThemeStore, system_signal: SystemSignal | None = None
    ) -> None:
        self._store = store
        self._system_signal = system_signal
        self._listeners: list[cabc.Callable[[ThemeVariant], None]] = []

    @property
    def preference(self) -> ThemePreference:
        """Return the stored preference (possibly ``system``)."""
        return self._store.get()

    @property
    def resolved(self) -> ThemeVariant:
        """Return the concrete variant renderers should branch on."""
        return resolve_theme(self.preference, self._system_signal)

    def set(self, preference: ThemePreference | str) -> ThemeVariant:
        """Persist ``preference`` and notify readers of the resolved variant."""
        self._store.set(ThemePreference(preference))
        variant = self.resolved
        for listener in list(self._listeners):
            listener(variant)
        return variant

    def toggle(self) -> ThemePreference:
        """Flip between dark and light based on the currently resolved variant."""
        target = (
            ThemePreference.LIGHT
            if self.resolved is ThemeVariant.DARK
            else ThemePreference.DARK
        )
        self.set(target)
        return target

    def subscribe(
        self, listener: cabc.Callable[[ThemeVariant], None]
    ) -> cabc.Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


__all__ = [
    "DEFAULT_THEME_FILE",
    "FALLBACK_VARIANT",
    "FileThemeStore",
    "MemoryThemeStore",
    "ThemePreference",
    "ThemeSelector",
    "ThemeStore",
    "ThemeVariant",
    "default_theme_file",
    "resolve_theme",
]
