r"""Active-route resolution and sidebar navigation models.

The current page is described by its segment path, e.g.
``("basic_examples", "hello_world")``. An entry is active when its route,
normalised to ``/``-joined segments, equals the path rebuilt from those
segments. The root page has no segments and therefore no active entry.

Example
-------
>>> segments_from_path("/basic_examples/hello_world/")
('basic_examples', 'hello_world')
>>> is_active("/basic_examples/hello_world", ("basic_examples", "hello_world"))
True
>>> is_active("/", ())
False
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .theme import ThemeVariant

if typ.TYPE_CHECKING:
    from .config import RouteEntry
    from .routes import RouteRegistry

SegmentPath = tuple[str, ...]

HOVER_COLOR = "#f472b6"
ACTIVE_COLORS = {ThemeVariant.DARK: "#ffffff", ThemeVariant.LIGHT: "#000000"}
INACTIVE_COLORS = {ThemeVariant.DARK: "#a8a29e", ThemeVariant.LIGHT: "#78716c"}


def segments_from_path(path: str) -> SegmentPath:
    """Split a location path into its non-empty segments."""
    return tuple(segment for segment in path.split("/") if segment)


def normalize_route(route: str) -> str:
    """Return ``route`` as ``/``-joined segments with a single leading slash."""
    return "/" + "/".join(segments_from_path(route))


def path_for(segments: cabc.Sequence[str]) -> str:
    """Rebuild the absolute path for ``segments``."""
    return "/" + "/".join(segments)


def is_active(route: str, segments: cabc.Sequence[str]) -> bool:
    """Return True when ``route`` names the page at ``segments``."""
    if not segments:
        return False
    return normalize_route(route) == path_for(segments)


def resolve_active(
    entries: cabc.Sequence[RouteEntry], segments: cabc.Sequence[str]
) -> list[int]:
    """Return the indexes of every active entry; duplicate routes all match."""
    return [idx for idx, entry in enumerate(entries) if is_active(entry.route, segments)]


@dc.dataclass(frozen=True, slots=True)
class LinkStyle:
    """Visual weight of a navigation link."""

    color: str
    decoration: str
    font_weight: int
    hover_color: str | None

    def css_declarations(self) -> str:
        """Render the style as CSS declarations."""
        return (
            f"color: {self.color}; "
            f"text-decoration: {self.decoration}; "
            f"font-weight: {self.font_weight};"
        )


def nav_link_style(is_active: bool, variant: ThemeVariant) -> LinkStyle:  # noqa: FBT001
    """Return the link style for an entry's activity under ``variant``."""
    if is_active:
        return LinkStyle(
            color=ACTIVE_COLORS[variant],
            decoration="underline",
            font_weight=500,
            hover_color=None,
        )
    return LinkStyle(
        color=INACTIVE_COLORS[variant],
        decoration="none",
        font_weight=400,
        hover_color=HOVER_COLOR,
    )


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Sidebar link for a single registry entry."""

    label: str
    href: str
    is_active: bool

    @property
    def css_class(self) -> str:
        return "nav-link is-active" if self.is_active else "nav-link"


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """Non-interactive section heading followed by its links."""

    heading: str
    href: str | None
    links: tuple[NavLink, ...]


def build_sidebar(
    registry: RouteRegistry, segments: cabc.Sequence[str]
) -> list[NavGroup]:
    """Build the grouped sidebar for the page at ``segments``.

    Parameters
    ----------
    registry : RouteRegistry
        Sections and entries to render, in display order.
    segments : Sequence[str]
        Segment path of the page being rendered.

    Returns
    -------
    list[NavGroup]
        One group per section; every entry whose route matches the page is
        flagged active, so duplicated routes are highlighted together.
    """
    groups: list[NavGroup] = []
    for section in registry:
        active = set(resolve_active(section.entries, segments))
        links = tuple(
            NavLink(label=entry.title, href=entry.route, is_active=idx in active)
            for idx, entry in enumerate(section.entries)
        )
        groups.append(NavGroup(heading=section.name, href=section.route, links=links))
    return groups


def nav_stylesheet() -> str:
    """Return CSS for sidebar links under both theme variants."""
    rules: list[str] = []
    for variant in ThemeVariant:
        scope = f'html[data-theme="{variant.value}"]'
        for active, selector in ((False, ".nav-link"), (True, ".nav-link.is-active")):
            style = nav_link_style(active, variant)
            rules.append(f"{scope} {selector} {{ {style.css_declarations()} }}")
            if style.hover_color:
                rules.append(
                    f"{scope} {selector}:hover {{ color: {style.hover_color}; }}"
                )
    return "\n".join(rules) + "\n"


__all__ = [
    "LinkStyle",
    "NavGroup",
    "NavLink",
    "SegmentPath",
    "build_sidebar",
    "is_active",
    "nav_link_style",
    "nav_stylesheet",
    "normalize_route",
    "path_for",
    "resolve_active",
    "segments_from_path",
]
