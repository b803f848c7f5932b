"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_section, _build_theme_config, _resolve_path
from .models import RouteSection, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site's route sections.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative content and example paths inside the
        file resolve against the directory given by ``defaults.content_root``
        (itself relative to the config file), or the config file's parent.

    Returns
    -------
    SiteConfig
        Parsed configuration with ordered sections, output directory, and
        theme defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If no sections are defined or an entry misses required fields.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sbe_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> [section.name for section in config.sections]  # doctest: +SKIP
    ['Getting Started', 'Basic', 'Applications']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    config_dir = path.resolve().parent
    base_dir = _resolve_path(config_dir, defaults.get("content_root")) or config_dir
    output_dir = Path(defaults.get("output_dir", "public"))
    theme = _build_theme_config(raw.get("theme", {}) or {})

    sections_raw = raw.get("sections") or []
    if not sections_raw:
        msg = "No sections defined in site configuration."
        raise SiteConfigError(msg)

    sections: list[RouteSection] = []
    for payload in sections_raw:
        match payload:
            case dict():
                sections.append(_build_section(payload, base_dir=base_dir))
            case _:
                continue

    return SiteConfig(
        sections=sections,
        output_dir=output_dir,
        theme=theme,
        home_content=_resolve_path(base_dir, raw.get("home_content")),
    )


__all__ = ["load_site_config"]
