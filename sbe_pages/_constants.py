"""Common literal values used across sbe_pages.

These constants keep defaults shared by the Python renderers, the Jinja
templates, and the embedded browser script in one place so they cannot drift.

Examples
--------
>>> from sbe_pages import _constants
>>> _constants.DEFAULT_CODE_LANGUAGE
'rust'
>>> _constants.COPY_RESET_DELAY_MS
1000
"""

DEFAULT_CODE_LANGUAGE = "rust"
FALLBACK_CODE_LANGUAGE = "text"
COPY_RESET_DELAY_MS = 1000
PLACEHOLDER_ROUTE = "/"
BREADCRUMB_SEPARATOR = "=>"
HOME_LABEL = "home"
THEME_STORAGE_KEY = "sbe-theme"
ASSETS_DIRNAME = "assets"
STYLESHEET_NAME = "site.css"
