"""Breadcrumb trail from the site root to the current page."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc

from ._constants import HOME_LABEL
from .navigation import path_for


@dc.dataclass(frozen=True, slots=True)
class Breadcrumb:
    """One link in the trail; only the deepest crumb is current."""

    label: str
    href: str
    is_current: bool = False
    is_home: bool = False


def breadcrumb_label(segment: str) -> str:
    """Render a URL segment for display: underscores become spaces."""
    return segment.replace("_", " ").strip()


def build_breadcrumbs(segments: cabc.Sequence[str]) -> list[Breadcrumb]:
    """Return the home crumb followed by one crumb per segment prefix.

    >>> [crumb.href for crumb in build_breadcrumbs(["basic_examples", "hello_world"])]
    ['/', '/basic_examples', '/basic_examples/hello_world']
    >>> len(build_breadcrumbs([]))
    1
    """
    trail = [Breadcrumb(label=HOME_LABEL, href="/", is_home=True)]
    last = len(segments) - 1
    for idx, segment in enumerate(segments):
        trail.append(
            Breadcrumb(
                label=breadcrumb_label(segment),
                href=path_for(segments[: idx + 1]),
                is_current=idx == last,
            )
        )
    return trail


__all__ = ["Breadcrumb", "breadcrumb_label", "build_breadcrumbs"]
