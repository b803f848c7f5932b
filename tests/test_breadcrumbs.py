"""Unit tests for the breadcrumb trail."""

from __future__ import annotations

from sbe_pages.breadcrumbs import Breadcrumb, breadcrumb_label, build_breadcrumbs


def test_empty_path_renders_home_only() -> None:
    assert build_breadcrumbs(()) == [Breadcrumb("home", "/", is_home=True)]


def test_nested_path_builds_incremental_links() -> None:
    trail = build_breadcrumbs(["basic_examples", "hello_world"])
    assert [(crumb.label, crumb.href, crumb.is_current) for crumb in trail] == [
        ("home", "/", False),
        ("basic examples", "/basic_examples", False),
        ("hello world", "/basic_examples/hello_world", True),
    ]


def test_only_deepest_crumb_is_current_even_with_repeated_segments() -> None:
    trail = build_breadcrumbs(["docs", "docs"])
    assert [crumb.is_current for crumb in trail] == [False, False, True]
    assert trail[2].href == "/docs/docs"


def test_breadcrumb_label_replaces_underscores() -> None:
    assert breadcrumb_label("bytes_in_bytes_out") == "bytes in bytes out"
