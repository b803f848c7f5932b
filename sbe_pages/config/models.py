"""Typed dataclasses describing sbe_pages site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from sbe_pages._constants import DEFAULT_CODE_LANGUAGE


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class SourceFile:
    """Example source shown as a code panel beneath a mono file heading."""

    label: str
    path: Path
    language: str = DEFAULT_CODE_LANGUAGE


@dc.dataclass(frozen=True, slots=True)
class RouteEntry:
    """A navigable page in the route registry.

    Attributes
    ----------
    route : str
        Absolute path of the page, e.g. ``"/basic_examples/hello_world"``.
        Placeholder entries use ``"/"``.
    title : str
        Display label used in the sidebar and on section cards.
    description : str
        Optional one-line summary shown on section index cards.
    content : Path or None
        Markdown file rendered as the page body.
    files : tuple[SourceFile, ...]
        Example sources rendered after the body, in order.
    """

    route: str
    title: str
    description: str = ""
    content: Path | None = None
    files: tuple[SourceFile, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class RouteSection:
    """Named, ordered group of route entries."""

    name: str
    entries: tuple[RouteEntry, ...]
    slug: str | None = None
    description: str = ""

    @property
    def route(self) -> str | None:
        """Return the section index route, or None when the section has no slug."""
        if not self.slug:
            return None
        return f"/{self.slug}"


@dc.dataclass(slots=True)
class ThemeConfig:
    """Visual theming applied to generated pages."""

    site_name: str = "Stylus by Example"
    tagline: str = (
        "An introduction to Arbitrum Stylus with simple code examples in Rust and WASM"
    )
    dark_pygments_style: str = "gruvbox-dark"
    light_pygments_style: str = "gruvbox-light"
    default_preference: str = "system"


@dc.dataclass(slots=True)
class SiteConfig:
    """Route sections alongside the output and theming defaults."""

    sections: list[RouteSection]
    output_dir: Path = Path("public")
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    home_content: Path | None = None

    def get_entry(self, route: str) -> RouteEntry:
        """Return the first entry registered for ``route``."""
        for section in self.sections:
            for entry in section.entries:
                if entry.route == route:
                    return entry
        known = ", ".join(
            sorted({entry.route for section in self.sections for entry in section.entries})
        )
        msg = f"Unknown route '{route}'. Known routes: {known}"
        raise KeyError(msg)


__all__ = [
    "RouteEntry",
    "RouteSection",
    "SiteConfig",
    "SiteConfigError",
    "SourceFile",
    "ThemeConfig",
]
