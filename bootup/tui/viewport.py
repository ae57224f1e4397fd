from collections.abc import Sequence

from .entry import CatalogEntry
from .layout import header_line_of, line_of, total_lines

# below this terminal height the compact chrome is used
COMPACT_HEIGHT = 10
# below this terminal height nothing but a notice is rendered
MIN_HEIGHT = 5


def reserved_lines(height: int) -> int:
	"""
	Number of rows taken by the title, header and footer chrome
	"""
	return 5 if height < COMPACT_HEIGHT else 7


def viewport_height(height: int) -> int:
	return max(1, height - reserved_lines(height))


def adjust_viewport(
	entries: Sequence[CatalogEntry],
	cursor: int,
	top: int,
	height: int,
) -> int:
	"""
	Returns the new viewport top so that the cursor line is visible.

	When scrolling up into a category its header is revealed as well,
	unless doing so would push the cursor line out of the viewport.
	"""
	if not entries:
		return 0

	cursor_line = line_of(entries, cursor)

	if cursor_line < top:
		candidate = header_line_of(entries, cursor)

		if cursor_line - candidate >= height:
			candidate = cursor_line - height + 1

		top = candidate
	elif cursor_line >= top + height:
		top = cursor_line - height + 1

	return max(0, top)


def clamp_top(entries: Sequence[CatalogEntry], top: int, height: int) -> int:
	"""
	Keeps the viewport from scrolling past the last line
	"""
	return max(0, min(top, total_lines(entries) - height))
