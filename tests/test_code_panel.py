"""Tests for code panels and markdown rendering."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup

from sbe_pages.config import SourceFile
from sbe_pages.generator import CodeBlock, CodePanelRenderer, HtmlContentRenderer


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_code_block_defaults_to_rust() -> None:
    panel = CodePanelRenderer().render(CodeBlock("fn main() {}"))
    soup = _soup(panel.html)

    assert panel.language == "rust"
    assert soup.select_one(".code-panel")["data-language"] == "rust"
    assert soup.select_one(".code-panel__code .k").get_text() == "fn"


def test_copy_payload_is_trimmed_and_escaped() -> None:
    panel = CodePanelRenderer().render(
        CodeBlock('\n  let s = "<tag>";\n\n', language="rust")
    )
    button = _soup(panel.html).select_one("button.copy-button")

    assert panel.copy_text == 'let s = "<tag>";'
    assert button["data-copy"] == 'let s = "<tag>";'
    assert button["data-state"] == "idle"
    assert button["data-reset-ms"] == "1000"


def test_unknown_language_falls_back_to_plain_text() -> None:
    panel = CodePanelRenderer().render(CodeBlock("whatever", language="klingon"))
    soup = _soup(panel.html)

    assert soup.select_one(".code-panel")["data-language"] == "klingon"
    assert "whatever" in soup.select_one("code").get_text()


def test_stylesheet_scopes_both_variants() -> None:
    css = CodePanelRenderer("monokai", "default").stylesheet()

    assert 'html[data-theme="dark"] .code-panel__code' in css
    assert 'html[data-theme="light"] .code-panel__code' in css


def test_markdown_fenced_blocks_become_panels() -> None:
    html = HtmlContentRenderer().markdown(
        "# Title\n\nSome *text*.\n\n```toml\n[package]\nname = \"x\"\n```\n\n"
        "```\nplain\n```\n"
    )
    soup = _soup(html)

    panels = soup.select(".code-panel")
    assert [panel["data-language"] for panel in panels] == ["toml", "text"]
    assert soup.select_one("h1")["class"] == ["prose-h1"]
    assert soup.select_one("em")["class"] == ["prose-em"]
    assert not soup.select("p > div.code-panel")


def test_indented_fences_are_normalised() -> None:
    html = HtmlContentRenderer().markdown("Intro\n\n  ```rust\n  let x = 1;\n  ```\n")
    panel = _soup(html).select_one(".code-panel")

    assert panel is not None
    assert panel.select_one("button")["data-copy"] == "let x = 1;"


def test_blank_markdown_renders_nothing() -> None:
    assert HtmlContentRenderer().markdown("  \n") == ""


def test_source_file_uses_declared_language(tmp_path: Path) -> None:
    path = tmp_path / "Cargo.toml"
    path.write_text('[package]\nname = "hello"\n', encoding="utf-8")

    panel = HtmlContentRenderer().source_file(SourceFile("Cargo.toml", path, "toml"))

    assert panel.language == "toml"
    assert panel.copy_text == '[package]\nname = "hello"'
