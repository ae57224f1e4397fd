import curses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class STYLE(Enum):
	NORMAL = 1
	TITLE = 2
	HEADER = 3
	CATEGORY = 4
	CURSOR = 5
	INSTALLED = 6
	HELP = 7
	ERROR = 8


class MenuKeys(Enum):
	# Quit: q, ESC, CTRL-c
	QUIT = frozenset({113, 27, 3})
	# Menu up: up, k
	MENU_UP = frozenset({curses.KEY_UP, 107})
	# Menu down: down, j
	MENU_DOWN = frozenset({curses.KEY_DOWN, 106})
	# Page up: PGUP, CTRL-b
	PAGE_UP = frozenset({curses.KEY_PPAGE, 2})
	# Page down: PGDOWN, CTRL-f
	PAGE_DOWN = frozenset({curses.KEY_NPAGE, 6})
	# Menu start: home, g
	MENU_START = frozenset({curses.KEY_HOME, 103})
	# Menu end: end, G
	MENU_END = frozenset({curses.KEY_END, 71})
	# numbers 1..9
	NUM_KEYS = frozenset(range(49, 58))
	# Help view: ?, h
	HELP = frozenset({63, 104})
	# Install: enter, space
	ACCEPT = frozenset({10, 13, curses.KEY_ENTER, 32})
	# Terminal was resized
	RESIZE = frozenset({curses.KEY_RESIZE})

	@classmethod
	def from_ord(cls, key: int) -> 'MenuKeys | None':
		for group in MenuKeys:
			if key in group.value:
				return group

		return None


# https://www.compart.com/en/unicode/search?q=box+drawings#characters
class Chars:
	Triangle_up = '▲'
	Triangle_down = '▼'
	Cursor = '▶'
	Check = '✓'


@dataclass
class ViewportEntry:
	text: str
	row: int
	col: int
	style: STYLE


@dataclass(frozen=True)
class StyleDef:
	fg: int
	bg: int = -1
	bold: bool = False
	underline: bool = False


def _default_styles() -> Mapping[STYLE, StyleDef]:
	return MappingProxyType({
		STYLE.NORMAL: StyleDef(curses.COLOR_WHITE),
		STYLE.TITLE: StyleDef(curses.COLOR_WHITE, curses.COLOR_MAGENTA, bold=True),
		STYLE.HEADER: StyleDef(curses.COLOR_GREEN, bold=True),
		STYLE.CATEGORY: StyleDef(curses.COLOR_YELLOW, bold=True, underline=True),
		STYLE.CURSOR: StyleDef(curses.COLOR_MAGENTA, bold=True),
		STYLE.INSTALLED: StyleDef(curses.COLOR_GREEN),
		STYLE.HELP: StyleDef(curses.COLOR_CYAN),
		STYLE.ERROR: StyleDef(curses.COLOR_RED),
	})


@dataclass(frozen=True)
class Theme:
	"""
	Read-only rendering configuration: the style of every
	element kind and the marker characters of the service list.
	"""

	styles: Mapping[STYLE, StyleDef] = field(default_factory=_default_styles)
	cursor_char: str = Chars.Cursor
	check_char: str = Chars.Check
	color: bool = True

	def style(self, kind: STYLE) -> StyleDef:
		return self.styles.get(kind, self.styles[STYLE.NORMAL])


DEFAULT_THEME = Theme()
