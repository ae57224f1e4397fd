from collections.abc import Sequence

from bootup.lib.utils.unicode import display_width, unicode_truncate

from .entry import CatalogEntry
from .help import Help
from .layout import Line, LineKind, layout_lines
from .state import BrowserMode, BrowserState
from .types import STYLE, Chars, Theme, ViewportEntry
from .viewport import COMPACT_HEIGHT, MIN_HEIGHT

TITLE = '🚀 Bootup CLI - Interactive Service Installer'
COMPACT_TITLE = '🚀 Bootup CLI'
LIST_HEADER = 'Available Services:'
FOOTER = 'Controls: ↑/↓ or j/k: navigate • space/enter: install • ?: help • q: quit'
ENTRY_INDENT = 2


def render(
	entries: Sequence[CatalogEntry],
	state: BrowserState,
	theme: Theme,
) -> list[ViewportEntry]:
	"""
	Produces the frame for the current state. Nothing is drawn here,
	the returned entries are placed on the screen by the caller.
	"""
	if state.mode.is_terminal():
		frame = _farewell(state)
	elif state.mode == BrowserMode.HELP:
		frame = _help()
	elif state.height < MIN_HEIGHT:
		frame = _too_small()
	else:
		frame = _service_list(entries, state, theme)

	return _fit(frame, state.width, state.height)


def _fit(frame: list[ViewportEntry], width: int, height: int) -> list[ViewportEntry]:
	fitted = []

	for entry in frame:
		if entry.row >= height or entry.col >= width:
			continue

		entry.text = unicode_truncate(entry.text, width - entry.col)
		fitted.append(entry)

	return fitted


def _farewell(state: BrowserState) -> list[ViewportEntry]:
	if state.mode == BrowserMode.CONFIRMED and state.selected:
		return [
			ViewportEntry(f'Preparing to install {state.selected}...', 0, 0, STYLE.HEADER),
			ViewportEntry('Exiting TUI to perform installation in normal terminal mode.', 1, 0, STYLE.NORMAL),
		]

	return [ViewportEntry('Thanks for using Bootup CLI! 👋', 0, 0, STYLE.NORMAL)]


def _help() -> list[ViewportEntry]:
	frame = [ViewportEntry('Bootup CLI help', 0, 0, STYLE.TITLE)]

	lines = Help.get_help_text().rstrip('\n').split('\n')
	frame += [ViewportEntry(line, idx + 2, ENTRY_INDENT, STYLE.NORMAL) for idx, line in enumerate(lines)]

	frame.append(ViewportEntry('Press any key to return', len(lines) + 3, 0, STYLE.HELP))
	return frame


def _too_small() -> list[ViewportEntry]:
	return [
		ViewportEntry('Terminal too small', 0, 0, STYLE.ERROR),
		ViewportEntry(f'Resize to at least {MIN_HEIGHT} rows', 1, 0, STYLE.NORMAL),
	]


def _entry_line(entry: CatalogEntry, focused: bool, theme: Theme) -> tuple[str, STYLE]:
	marker = theme.cursor_char if focused else ' ' * display_width(theme.cursor_char)
	text = f'{marker} {entry.name} - {entry.description}'

	if entry.installed:
		text += f' {theme.check_char}'

	if focused:
		return text, STYLE.CURSOR
	if entry.installed:
		return text, STYLE.INSTALLED
	return text, STYLE.NORMAL


def _line_entry(line: Line, row: int, entries: Sequence[CatalogEntry], state: BrowserState, theme: Theme) -> ViewportEntry:
	match line.kind:
		case LineKind.CATEGORY:
			return ViewportEntry(line.text, row, 0, STYLE.CATEGORY)
		case LineKind.ENTRY:
			assert line.entry_index is not None
			entry = entries[line.entry_index]
			text, style = _entry_line(entry, line.entry_index == state.cursor, theme)
			return ViewportEntry(text, row, ENTRY_INDENT, style)
		case _:
			return ViewportEntry('', row, 0, STYLE.NORMAL)


def _scroll_indicator(top: int, height: int, total: int) -> str:
	last = min(top + height, total)
	up = Chars.Triangle_up if top > 0 else ' '
	down = Chars.Triangle_down if last < total else ' '
	return f'{up}{down} showing lines {top + 1}-{last} of {total}'


def _service_list(
	entries: Sequence[CatalogEntry],
	state: BrowserState,
	theme: Theme,
) -> list[ViewportEntry]:
	frame: list[ViewportEntry] = []

	if state.height < COMPACT_HEIGHT:
		frame.append(ViewportEntry(COMPACT_TITLE, 0, 0, STYLE.TITLE))
		row = 2
	else:
		frame.append(ViewportEntry(TITLE, 0, 0, STYLE.TITLE))
		frame.append(ViewportEntry(LIST_HEADER, 2, 0, STYLE.HEADER))
		row = 4

	vp_height = state.viewport_height
	lines = layout_lines(entries)

	if not lines:
		frame.append(ViewportEntry('No services available', row, ENTRY_INDENT, STYLE.ERROR))

	visible = lines[state.viewport_top : state.viewport_top + vp_height]
	for offset, line in enumerate(visible):
		frame.append(_line_entry(line, row + offset, entries, state, theme))

	row += vp_height

	if len(lines) > vp_height:
		frame.append(ViewportEntry(_scroll_indicator(state.viewport_top, vp_height, len(lines)), row, 0, STYLE.HELP))

	# the footer keeps to the last row on the smallest terminals
	frame.append(ViewportEntry(FOOTER, min(row + 2, state.height - 1), 0, STYLE.HELP))
	return frame
