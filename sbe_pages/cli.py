"""Cyclopts CLI entrypoint for building the Stylus by Example site.

The ``pages`` console script renders the static site from ``site.yaml``,
reports route registry anomalies, copies example sources to the clipboard,
and records the default theme preference baked into generated pages.

Examples
--------
Generate every page for the default configuration:

>>> from sbe_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory:

>>> from sbe_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .clipboard import CopyAffordance, CopyState, SystemClipboard
from .config import load_site_config
from .generator import SiteGenerator
from .routes import RouteRegistry
from .theme import DEFAULT_THEME_FILE, FileThemeStore, ThemePreference, ThemeSelector

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the static site from the route registry.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    theme_file: typ.Annotated[
        Path | None,
        Parameter(
            help="Theme preference file seeding generated pages",
            env_var="SBE_THEME_FILE",
        ),
    ] = None,
) -> None:
    """Render every configured page and print the written paths.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    theme_file : Path or None, optional
        TOML file written by ``pages theme``; when absent the configuration's
        ``default_preference`` is used.
    """
    site_config = load_site_config(config)
    store = None
    if theme_file is not None or DEFAULT_THEME_FILE.exists():
        default = ThemePreference(site_config.theme.default_preference)
        store = FileThemeStore(theme_file or DEFAULT_THEME_FILE, default=default)
    generator = SiteGenerator(site_config, theme_store=store, output_dir=output_dir)
    for path in generator.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Report placeholder and duplicate routes in the registry.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print registry issues; exits with status 1 when any are found."""
    registry = RouteRegistry.from_config(load_site_config(config))
    issues = registry.validate()
    for issue in issues:
        print(issue.describe())
    if issues:
        raise SystemExit(1)
    print(f"{len(registry.entries())} routes OK")


@app.command(help="Copy an entry's example source to the system clipboard.")
def copy(
    route: str,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    index: typ.Annotated[
        int, Parameter(help="Which example file of the entry to copy")
    ] = 0,
) -> None:
    """Copy the trimmed contents of an entry's example file.

    Raises
    ------
    KeyError
        If ``route`` is not registered.
    ValueError
        If the entry has no example files or ``index`` is out of range.
    SystemExit
        With status 1 when the clipboard write fails.
    """
    entry = load_site_config(config).get_entry(route)
    if not entry.files:
        msg = f"Route '{route}' has no example files to copy."
        raise ValueError(msg)
    if not 0 <= index < len(entry.files):
        msg = (
            f"Route '{route}' has {len(entry.files)} example file(s); "
            f"index {index} is out of range."
        )
        raise ValueError(msg)
    source = entry.files[index]
    affordance = CopyAffordance(
        source.path.read_text(encoding="utf-8"),
        SystemClipboard(),
        schedule=lambda _delay, _callback: None,
    )
    if affordance.activate() is CopyState.FAILED:
        print(f"failed to copy {source.label}")
        raise SystemExit(1)
    print(f"copied {source.label} ({len(affordance.copy_text)} chars)")


@app.command(help="Show or set the theme preference used for generated pages.")
def theme(
    preference: str | None = None,
    *,
    theme_file: typ.Annotated[
        Path,
        Parameter(help="Where to store the preference (TOML)", env_var="SBE_THEME_FILE"),
    ] = DEFAULT_THEME_FILE,
) -> None:
    """Print the stored preference, or persist ``light``, ``dark``, or ``system``."""
    selector = ThemeSelector(FileThemeStore(theme_file))
    if preference is not None:
        try:
            selector.set(ThemePreference(preference.lower()))
        except ValueError as exc:
            choices = ", ".join(item.value for item in ThemePreference)
            msg = f"Unknown theme '{preference}'. Expected one of: {choices}"
            raise ValueError(msg) from exc
    print(f"{selector.preference.value} (renders {selector.resolved.value})")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
