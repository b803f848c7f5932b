"""High-level orchestration for site page generation.

This module turns a :class:`~sbe_pages.config.SiteConfig` into a static site:
one page per registry entry at ``<output>/<route>/index.html``, an index page
per section, the home page, and a shared stylesheet. Every page carries the
sidebar (with the active entry flagged), the breadcrumb trail, and its code
panels.

Example
-------
>>> from pathlib import Path
>>> from sbe_pages.config import load_site_config
>>> from sbe_pages.generator import SiteGenerator
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteGenerator(config).run()  # doctest: +SKIP
[PosixPath('public/assets/site.css'), PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from sbe_pages._constants import (
    ASSETS_DIRNAME,
    BREADCRUMB_SEPARATOR,
    COPY_RESET_DELAY_MS,
    STYLESHEET_NAME,
    THEME_STORAGE_KEY,
)
from sbe_pages.breadcrumbs import build_breadcrumbs
from sbe_pages.navigation import (
    build_sidebar,
    nav_stylesheet,
    normalize_route,
    segments_from_path,
)
from sbe_pages.routes import RouteRegistry, is_placeholder
from sbe_pages.theme import MemoryThemeStore, ThemeSelector

from .code_panel import CodePanelRenderer
from .models import CardModel, FilePanelModel, PageModel
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from sbe_pages.config import RouteEntry, RouteSection, SiteConfig
    from sbe_pages.navigation import SegmentPath
    from sbe_pages.theme import ThemeStore

logger = logging.getLogger(__name__)


class SiteGenerator:
    """Render every configured route into themed HTML files."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        theme_store: ThemeStore | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Loaded configuration with sections, theme, and output defaults.
        theme_store : ThemeStore, optional
            Source of the initial theme preference; defaults to the
            configuration's ``default_preference`` held in memory.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the HTML output directory.
        """
        self.site = site_config
        self.registry = RouteRegistry.from_config(site_config)
        self.output_dir = output_dir or site_config.output_dir
        store = theme_store or MemoryThemeStore(site_config.theme.default_preference)
        self.theme = ThemeSelector(store)
        self.renderer = HtmlContentRenderer(
            CodePanelRenderer(
                site_config.theme.dark_pygments_style,
                site_config.theme.light_pygments_style,
            )
        )
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def run(self) -> list[Path]:
        """Write the stylesheet and every page, returning the written paths.

        Placeholder routes render as sidebar links only, and a route that
        appears more than once is written for its first entry.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)
        written = [self._write_stylesheet()]
        home = self._home_model()
        written.append(self._write_page("home.jinja", home, generated_at))

        seen: set[str] = {"/"}
        for section in self.registry:
            if section.route:
                seen.add(section.route)
                model = self._section_model(section)
                written.append(self._write_page("section.jinja", model, generated_at))
        for entry in self.registry.entries():
            if is_placeholder(entry.route):
                logger.info("Skipping placeholder entry '%s'", entry.title)
                continue
            route = normalize_route(entry.route)
            if route in seen:
                logger.info("Skipping duplicate route %s for '%s'", route, entry.title)
                continue
            seen.add(route)
            model = self._entry_model(entry)
            written.append(self._write_page("page.jinja", model, generated_at))
        return written

    def render_entry(self, entry: RouteEntry) -> str:
        """Render a single entry page to an HTML string."""
        model = self._entry_model(entry)
        return self._render("page.jinja", model, dt.datetime.now(dt.UTC))

    def _base_model(
        self, title: str, description: str, segments: SegmentPath
    ) -> PageModel:
        return PageModel(
            title=title,
            description=description,
            segments=segments,
            breadcrumbs=build_breadcrumbs(segments),
            nav_groups=build_sidebar(self.registry, segments),
        )

    def _home_model(self) -> PageModel:
        theme = self.site.theme
        model = self._base_model(theme.site_name, theme.tagline, ())
        if self.site.home_content:
            model.body_html = self.renderer.markdown(
                self.site.home_content.read_text(encoding="utf-8")
            )
        model.cards = [
            CardModel(section.name, section.description, section.route)
            for section in self.registry
            if section.route
        ]
        return model

    def _section_model(self, section: RouteSection) -> PageModel:
        segments = segments_from_path(section.route or "")
        model = self._base_model(section.name, section.description, segments)
        model.cards = [
            CardModel(entry.title, entry.description, entry.route)
            for entry in section.entries
        ]
        return model

    def _entry_model(self, entry: RouteEntry) -> PageModel:
        segments = segments_from_path(entry.route)
        model = self._base_model(entry.title, entry.description, segments)
        if entry.content:
            model.body_html = self.renderer.markdown(
                entry.content.read_text(encoding="utf-8")
            )
        model.files = [
            FilePanelModel(source.label, self.renderer.source_file(source).html)
            for source in entry.files
        ]
        return model

    def _render(
        self, template_name: str, model: PageModel, generated_at: dt.datetime
    ) -> str:
        template = self.env.get_template(template_name)
        context = {
            "page": model,
            "site": self.site.theme,
            "theme_preference": self.theme.preference.value,
            "theme_variant": self.theme.resolved.value,
            "theme_storage_key": THEME_STORAGE_KEY,
            "copy_reset_ms": COPY_RESET_DELAY_MS,
            "separator": BREADCRUMB_SEPARATOR,
            "stylesheet_href": f"/{ASSETS_DIRNAME}/{STYLESHEET_NAME}",
            "generated_at": generated_at,
        }
        return template.render(**context)

    def _write_page(
        self, template_name: str, model: PageModel, generated_at: dt.datetime
    ) -> Path:
        html = self._render(template_name, model, generated_at)
        if not html.endswith("\n"):
            html += "\n"
        output_path = self.output_dir.joinpath(*model.segments, "index.html")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def _write_stylesheet(self) -> Path:
        template = self.env.get_template("site.css.jinja")
        css = template.render(
            nav_css=nav_stylesheet(), pygments_css=self.renderer.stylesheet
        )
        output_path = self.output_dir / ASSETS_DIRNAME / STYLESHEET_NAME
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(css, encoding="utf-8")
        return output_path


__all__ = ["SiteGenerator"]
