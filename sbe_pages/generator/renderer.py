"""Render page Markdown and example sources into site HTML."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown

from .code_panel import CodeBlock, CodePanelRenderer, RenderedPanel
from .content_extension import CodePanelExtension, ProseClassExtension

if typ.TYPE_CHECKING:
    from sbe_pages.config import SourceFile

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(self, panels: CodePanelRenderer | None = None) -> None:
        """Initialize a renderer around a shared code panel renderer.

        Parameters
        ----------
        panels : CodePanelRenderer, optional
            Renderer used for fenced blocks and example files. Defaults to a
            renderer with the gruvbox light/dark palettes.
        """
        self.panels = panels or CodePanelRenderer()

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code panels."""
        return self.panels.stylesheet()

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the site extensions."""
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=[
                CodePanelExtension(self.panels),
                ProseClassExtension(),
                "tables",
                "sane_lists",
            ],
            output_format="html",
        )
        return md.convert(normalized)

    def code_block(self, code: str, language: str | None = None) -> RenderedPanel:
        """Render ``code`` as a standalone panel; ``language`` defaults to Rust."""
        if language:
            return self.panels.render(CodeBlock(code, language))
        return self.panels.render(CodeBlock(code))

    def source_file(self, source: SourceFile) -> RenderedPanel:
        """Read an example source from disk and render it as a panel."""
        code = source.path.read_text(encoding="utf-8")
        return self.code_block(code, source.language)


__all__ = ["FENCED_INDENT_PATTERN", "HtmlContentRenderer"]
