"""Ordered catalogue of the site's navigable pages.

The registry is read-only: sections enumerate in configuration order and
entries in insertion order. Duplicate and placeholder routes are preserved as
written; :meth:`RouteRegistry.validate` reports them without merging anything.

Example
-------
>>> from sbe_pages.config import RouteEntry, RouteSection
>>> registry = RouteRegistry(
...     [RouteSection("Basic", (RouteEntry("/basic_examples/hello_world", "Hello World"),))]
... )
>>> [entry.title for entry in registry.entries()]
['Hello World']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ._constants import PLACEHOLDER_ROUTE
from .navigation import normalize_route

if typ.TYPE_CHECKING:
    from .config import RouteEntry, RouteSection, SiteConfig


@dc.dataclass(frozen=True, slots=True)
class RouteIssue:
    """Data-quality finding for a single registry entry."""

    section: str
    title: str
    route: str
    kind: str

    def describe(self) -> str:
        """Return a one-line human readable summary."""
        if self.kind == "placeholder":
            return f"{self.section}: '{self.title}' points at placeholder route '{self.route}'"
        return f"{self.section}: '{self.title}' duplicates route '{self.route}'"


class RouteRegistry:
    """Expose route sections for enumeration."""

    def __init__(self, sections: cabc.Iterable[RouteSection]) -> None:
        self._sections = tuple(sections)

    @classmethod
    def from_config(cls, config: SiteConfig) -> RouteRegistry:
        """Build a registry from a loaded site configuration."""
        return cls(config.sections)

    @property
    def sections(self) -> tuple[RouteSection, ...]:
        return self._sections

    def __iter__(self) -> cabc.Iterator[RouteSection]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def entries(self) -> list[RouteEntry]:
        """Return every entry flattened in display order."""
        return [entry for section in self._sections for entry in section.entries]

    def find(self, route: str) -> list[RouteEntry]:
        """Return all entries registered for ``route``; duplicates are kept."""
        return [entry for entry in self.entries() if entry.route == route]

    def validate(self) -> list[RouteIssue]:
        """Report placeholder routes and routes repeated within a section.

        Routes are compared after normalisation, so ``/a`` and ``/a/`` collide
        the same way they do when pages are written.
        """
        issues: list[RouteIssue] = []
        for section in self._sections:
            seen: set[str] = set()
            for entry in section.entries:
                if is_placeholder(entry.route):
                    issues.append(
                        RouteIssue(section.name, entry.title, entry.route, "placeholder")
                    )
                    continue
                route = normalize_route(entry.route)
                if route in seen:
                    issues.append(
                        RouteIssue(section.name, entry.title, entry.route, "duplicate")
                    )
                seen.add(route)
        return issues


def is_placeholder(route: str) -> bool:
    """Return True for entries that have no page of their own yet."""
    return route.strip() in ("", PLACEHOLDER_ROUTE)


__all__ = ["RouteIssue", "RouteRegistry", "is_placeholder"]
