"""Shared fixtures: a small on-disk site with content and example sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from sbe_pages.config import SiteConfig, load_site_config

HELLO_SOURCE = """
#[public]
impl Hello {
    fn user_main(_input: Vec<u8>) -> ArbResult {
        console!("Hello Stylus!");
        Ok(Vec::new())
    }
}
"""


def write_site(root: Path) -> Path:
    """Create content, sources, and ``site.yaml`` under ``root``."""
    (root / "content").mkdir(parents=True, exist_ok=True)
    (root / "src").mkdir(parents=True, exist_ok=True)
    (root / "content" / "hello.md").write_text(
        "Print with the `console!` macro.\n\n"
        "```toml\n"
        "[features]\n"
        'debug = ["stylus-sdk/debug"]\n'
        "```\n",
        encoding="utf-8",
    )
    (root / "src" / "hello.rs").write_text(HELLO_SOURCE, encoding="utf-8")
    (root / "src" / "Cargo.toml").write_text(
        '[package]\nname = "hello"\n', encoding="utf-8"
    )
    config_path = root / "site.yaml"
    config_path.write_text(
        f"""
defaults:
  output_dir: {root / "public"}
theme:
  site_name: Fixture Site
  tagline: Fixture tagline
sections:
  - name: Getting Started
    entries:
      - route: /getting_started/setup
        title: Setup
  - name: Basic
    slug: basic_examples
    entries:
      - route: /basic_examples/hello_world
        title: Hello World
        description: Learn how to use the console output
        content: content/hello.md
        files:
          - label: src/lib.rs
            path: src/hello.rs
          - src/Cargo.toml
      - route: /basic_examples/bytes_in_bytes_out
        title: Bytes In, Bytes Out
      - route: /
        title: First App
      - route: /
        title: Variables
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def site_config_path(tmp_path: Path) -> Path:
    """Return the path of a freshly written fixture ``site.yaml``."""
    return write_site(tmp_path)


@pytest.fixture
def site_config(site_config_path: Path) -> SiteConfig:
    """Load the fixture site configuration."""
    return load_site_config(site_config_path)
