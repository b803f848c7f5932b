"""Syntax-highlighted code panels with a copy button.

Each panel is highlighted once with class-based Pygments tokens. The light and
dark palettes live in the stylesheet, scoped by ``html[data-theme]``, so a
theme switch only changes which palette applies; the panel markup and its
content stay the same.
"""

from __future__ import annotations

import dataclasses as dc
from html import escape

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from sbe_pages._constants import (
    COPY_RESET_DELAY_MS,
    DEFAULT_CODE_LANGUAGE,
    FALLBACK_CODE_LANGUAGE,
)
from sbe_pages.theme import ThemeVariant

CODE_CSS_CLASS = "code-panel__code"


@dc.dataclass(frozen=True, slots=True)
class CodeBlock:
    """Source string and the language used to highlight it."""

    content: str
    language: str = DEFAULT_CODE_LANGUAGE


@dc.dataclass(frozen=True, slots=True)
class RenderedPanel:
    """Panel markup plus the exact text its copy button writes."""

    html: str
    copy_text: str
    language: str


class CodePanelRenderer:
    """Render :class:`CodeBlock` values into themed code panels."""

    def __init__(
        self,
        dark_style: str = "gruvbox-dark",
        light_style: str = "gruvbox-light",
        *,
        reset_delay_ms: int = COPY_RESET_DELAY_MS,
    ) -> None:
        self.styles = {ThemeVariant.DARK: dark_style, ThemeVariant.LIGHT: light_style}
        self.reset_delay_ms = reset_delay_ms
        self._formatter = HtmlFormatter(cssclass=CODE_CSS_CLASS, wrapcode=True)

    def stylesheet(self) -> str:
        """Return Pygments CSS for both variants, scoped by ``data-theme``."""
        rules: list[str] = []
        for variant, style in self.styles.items():
            formatter = HtmlFormatter(style=style, cssclass=CODE_CSS_CLASS)
            scope = f'html[data-theme="{variant.value}"] .{CODE_CSS_CLASS}'
            rules.append(formatter.get_style_defs(scope))
        return "\n".join(rules) + "\n"

    def render(self, block: CodeBlock) -> RenderedPanel:
        """Highlight ``block`` and wrap it with the copy button markup."""
        language = block.language or DEFAULT_CODE_LANGUAGE
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            lexer = get_lexer_by_name(FALLBACK_CODE_LANGUAGE)
        copy_text = block.content.strip()
        highlighted = highlight(block.content, lexer, self._formatter)
        safe_lang = escape(language, quote=True)
        html = (
            f'<div class="code-panel" data-language="{safe_lang}">'
            f'<button type="button" class="copy-button" data-state="idle"'
            f' data-reset-ms="{self.reset_delay_ms}"'
            f' data-copy="{escape(copy_text, quote=True)}" aria-label="Copy code">'
            '<span class="copy-button__icon copy-button__icon--idle">Copy</span>'
            '<span class="copy-button__icon copy-button__icon--pressed">Copied</span>'
            '<span class="copy-button__icon copy-button__icon--failed">Failed</span>'
            "</button>"
            f"{highlighted}"
            "</div>"
        )
        return RenderedPanel(html=html, copy_text=copy_text, language=language)


__all__ = ["CODE_CSS_CLASS", "CodeBlock", "CodePanelRenderer", "RenderedPanel"]
