"""Load and validate site configuration YAML for sbe_pages builds.

This subpackage parses the project's ``site.yaml`` file into strongly typed
dataclasses (:class:`SiteConfig`, :class:`RouteSection`, :class:`RouteEntry`)
that the route registry and page generator consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from sbe_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_entry("/basic_examples/hello_world").title  # doctest: +SKIP
'Hello World'
"""

from .loader import load_site_config
from .models import (
    RouteEntry,
    RouteSection,
    SiteConfig,
    SiteConfigError,
    SourceFile,
    ThemeConfig,
)

__all__ = [
    "RouteEntry",
    "RouteSection",
    "SiteConfig",
    "SiteConfigError",
    "SourceFile",
    "ThemeConfig",
    "load_site_config",
]
