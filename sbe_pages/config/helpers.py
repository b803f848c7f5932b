"""Utility helpers shared by the sbe_pages configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from sbe_pages._constants import DEFAULT_CODE_LANGUAGE
from sbe_pages.theme import ThemePreference

from .models import RouteEntry, RouteSection, SiteConfigError, SourceFile, ThemeConfig

EXTENSION_LANGUAGES: dict[str, str] = {
    ".rs": "rust",
    ".toml": "toml",
    ".sol": "solidity",
    ".json": "json",
    ".sh": "bash",
}


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(base_dir: Path, value: object | None) -> Path | None:
    """Resolve ``value`` relative to ``base_dir`` unless it is already absolute."""
    text = _optional_str(value)
    if text is None:
        return None
    path = Path(text)
    return path if path.is_absolute() else base_dir / path


def _guess_language(path: Path) -> str:
    """Return the highlight language implied by a file suffix."""
    return EXTENSION_LANGUAGES.get(path.suffix.lower(), DEFAULT_CODE_LANGUAGE)


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    base = ThemeConfig()
    preference = str(payload.get("default_preference", base.default_preference))
    try:
        ThemePreference(preference)
    except ValueError as exc:
        choices = ", ".join(item.value for item in ThemePreference)
        msg = f"Unknown theme preference '{preference}'. Expected one of: {choices}"
        raise SiteConfigError(msg) from exc
    return ThemeConfig(
        site_name=payload.get("site_name", base.site_name),
        tagline=payload.get("tagline", base.tagline),
        dark_pygments_style=payload.get("dark_pygments_style", base.dark_pygments_style),
        light_pygments_style=payload.get(
            "light_pygments_style", base.light_pygments_style
        ),
        default_preference=preference,
    )


def _build_source_file(payload: object, base_dir: Path) -> SourceFile:
    """Build a SourceFile from either a bare path or a mapping."""
    match payload:
        case str() as text:
            path = _resolve_path(base_dir, text)
            label = text
            language = None
        case dict():
            path = _resolve_path(base_dir, payload.get("path"))
            label = _optional_str(payload.get("label"))
            language = _optional_str(payload.get("language"))
        case _:
            msg = f"Invalid example file entry: {payload!r}"
            raise SiteConfigError(msg)
    if path is None:
        msg = "Example file entries require a 'path'."
        raise SiteConfigError(msg)
    return SourceFile(
        label=label or path.name,
        path=path,
        language=language or _guess_language(path),
    )


def _build_entry(
    payload: typ.Mapping[str, typ.Any], *, section: str, base_dir: Path
) -> RouteEntry:
    """Build a RouteEntry; only ``title`` and ``route`` are required."""
    title = _optional_str(payload.get("title"))
    route = _optional_str(payload.get("route"))
    if not title or not route:
        msg = f"Entries in section '{section}' need both 'title' and 'route'."
        raise SiteConfigError(msg)
    files = tuple(
        _build_source_file(item, base_dir) for item in payload.get("files", []) or []
    )
    return RouteEntry(
        route=route,
        title=title,
        description=_optional_str(payload.get("description")) or "",
        content=_resolve_path(base_dir, payload.get("content")),
        files=files,
    )


def _build_section(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> RouteSection:
    """Build a RouteSection preserving entry insertion order."""
    name = _optional_str(payload.get("name"))
    if not name:
        msg = "Every section needs a 'name'."
        raise SiteConfigError(msg)
    raw_entries = payload.get("entries", []) or []
    entries = tuple(
        _build_entry(item, section=name, base_dir=base_dir)
        for item in raw_entries
        if isinstance(item, dict)
    )
    return RouteSection(
        name=name,
        entries=entries,
        slug=_optional_str(payload.get("slug")),
        description=_optional_str(payload.get("description")) or "",
    )


__all__ = [
    "EXTENSION_LANGUAGES",
    "_build_entry",
    "_build_section",
    "_build_source_file",
    "_build_theme_config",
    "_guess_language",
    "_optional_str",
    "_resolve_path",
]
