from .curses_menu import ServiceBrowser, Tui
from .entry import CatalogEntry, build_entries
from .layout import Line, LineKind, header_line_of, layout_lines, line_of
from .render import render
from .result import Result, ResultType
from .state import BrowserMode, BrowserState, ServiceBrowserState
from .types import DEFAULT_THEME, STYLE, Chars, MenuKeys, StyleDef, Theme, ViewportEntry
from .viewport import adjust_viewport, viewport_height

__all__ = [
	'DEFAULT_THEME',
	'STYLE',
	'BrowserMode',
	'BrowserState',
	'CatalogEntry',
	'Chars',
	'Line',
	'LineKind',
	'MenuKeys',
	'Result',
	'ResultType',
	'ServiceBrowser',
	'ServiceBrowserState',
	'StyleDef',
	'Theme',
	'Tui',
	'ViewportEntry',
	'adjust_viewport',
	'build_entries',
	'header_line_of',
	'layout_lines',
	'line_of',
	'render',
	'viewport_height',
]
