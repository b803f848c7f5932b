"""Python-Markdown extensions that map content onto site components.

``CodePanelExtension`` swaps fenced code blocks for code panels and
``ProseClassExtension`` tags headings, paragraphs, and lists with the site's
prose classes so page content picks up the same typography as the layout.
"""

from __future__ import annotations

import re
import textwrap
import typing as typ

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import STX

from sbe_pages._constants import FALLBACK_CODE_LANGUAGE

from .code_panel import CodeBlock, CodePanelRenderer

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

FENCED_BLOCK_PATTERN = re.compile(
    r"^(?P<fence>[`~]{3,})[ \t]*(?P<lang>[A-Za-z0-9_+#.-]+)?[^\n]*\n"
    r"(?P<code>(?:.*?\n)?)(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
PROSE_CLASSES: dict[str, str] = {
    "h1": "prose-h1",
    "h2": "prose-h2",
    "h3": "prose-h3",
    "p": "prose-p",
    "ul": "prose-ul",
    "em": "prose-em",
}


class CodePanelExtension(Extension):
    """Render fenced code blocks through :class:`CodePanelRenderer`."""

    def __init__(self, panels: CodePanelRenderer) -> None:
        super().__init__()
        self.panels = panels

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fenced-block preprocessor ahead of block parsing."""
        md.preprocessors.register(
            CodePanelPreprocessor(md, self.panels), "sbe_code_panels", 30
        )


class CodePanelPreprocessor(Preprocessor):
    """Replace fenced blocks with stashed code panel HTML."""

    def __init__(self, md: Markdown, panels: CodePanelRenderer) -> None:
        super().__init__(md)
        self.panels = panels

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)

        def _repl(match: re.Match[str]) -> str:
            language = match.group("lang") or FALLBACK_CODE_LANGUAGE
            code = textwrap.dedent(match.group("code"))
            panel = self.panels.render(CodeBlock(code, language))
            placeholder = self.md.htmlStash.store(panel.html)
            return f"\n\n{placeholder}\n\n"

        return FENCED_BLOCK_PATTERN.sub(_repl, text).split("\n")


class ProseClassExtension(Extension):
    """Attach prose classes to rendered content elements."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the prose-class treeprocessor on the Markdown instance."""
        md.treeprocessors.register(ProseClassTreeprocessor(md), "sbe_prose_classes", 5)


class ProseClassTreeprocessor(Treeprocessor):
    """Add the configured class to each matching element."""

    def run(self, root: Element) -> Element:
        for element in root.iter():
            css_class = PROSE_CLASSES.get(element.tag)
            if not css_class:
                continue
            # Bare paragraphs around stashed HTML must stay bare for the
            # raw-HTML postprocessor to unwrap them.
            if element.tag == "p" and (element.text or "").startswith(STX):
                continue
            existing = element.get("class")
            element.set("class", f"{existing} {css_class}" if existing else css_class)
        return root


__all__ = [
    "FENCED_BLOCK_PATTERN",
    "PROSE_CLASSES",
    "CodePanelExtension",
    "CodePanelPreprocessor",
    "ProseClassExtension",
    "ProseClassTreeprocessor",
]
