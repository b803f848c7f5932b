"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc

from sbe_pages.breadcrumbs import Breadcrumb  # noqa: TC001 - template data
from sbe_pages.navigation import NavGroup, SegmentPath  # noqa: TC001 - template data


@dc.dataclass(slots=True)
class CardModel:
    """Section index card linking to an entry."""

    title: str
    description: str
    href: str


@dc.dataclass(slots=True)
class FilePanelModel:
    """Example source rendered below the page body."""

    label: str
    html: str


@dc.dataclass(slots=True)
class PageModel:
    """Structured data passed to the page templates.

    Attributes
    ----------
    title : str
        Page heading and HTML title prefix.
    description : str
        Summary used for the meta description.
    segments : SegmentPath
        Segment path of the page; empty for the home page.
    breadcrumbs : list[Breadcrumb]
        Trail from home to this page.
    nav_groups : list[NavGroup]
        Sidebar groups with the active entry flagged.
    body_html : str
        Rendered Markdown body, may be empty.
    files : list[FilePanelModel]
        Example source panels in configuration order.
    cards : list[CardModel]
        Entry cards for index pages.
    """

    title: str
    description: str
    segments: SegmentPath
    breadcrumbs: list[Breadcrumb]
    nav_groups: list[NavGroup]
    body_html: str = ""
    files: list[FilePanelModel] = dc.field(default_factory=list)
    cards: list[CardModel] = dc.field(default_factory=list)


__all__ = ["CardModel", "FilePanelModel", "PageModel"]
