"""Utilities for rendering, highlighting, and generating site pages."""

from .code_panel import CodeBlock, CodePanelRenderer, RenderedPanel
from .content_extension import CodePanelExtension, ProseClassExtension
from .models import CardModel, FilePanelModel, PageModel
from .page_generator import SiteGenerator
from .renderer import HtmlContentRenderer

__all__ = [
    "CardModel",
    "CodeBlock",
    "CodePanelExtension",
    "CodePanelRenderer",
    "FilePanelModel",
    "HtmlContentRenderer",
    "PageModel",
    "ProseClassExtension",
    "RenderedPanel",
    "SiteGenerator",
]
