from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from bootup.lib.output import debug

from .entry import CatalogEntry
from .types import MenuKeys
from .viewport import adjust_viewport, clamp_top, viewport_height


class BrowserMode(Enum):
	BROWSING = auto()
	HELP = auto()
	CONFIRMED = auto()
	QUIT = auto()

	def is_terminal(self) -> bool:
		return self in (BrowserMode.CONFIRMED, BrowserMode.QUIT)


@dataclass
class BrowserState:
	cursor: int = 0
	viewport_top: int = 0
	width: int = 80
	height: int = 24
	mode: BrowserMode = BrowserMode.BROWSING
	selected: str | None = None

	@property
	def viewport_height(self) -> int:
		return viewport_height(self.height)

	@property
	def finished(self) -> bool:
		return self.mode.is_terminal()


class ServiceBrowserState:
	"""
	Owns the browser state and applies one input event at a time.
	Once a terminal mode is reached every further event is ignored.
	"""

	def __init__(
		self,
		entries: Sequence[CatalogEntry],
		width: int = 80,
		height: int = 24,
	) -> None:
		self._entries = tuple(entries)
		self.state = BrowserState(width=width, height=height)
		self._follow_cursor()

	@property
	def entries(self) -> tuple[CatalogEntry, ...]:
		return self._entries

	@property
	def focus_entry(self) -> CatalogEntry | None:
		if not self._entries:
			return None
		return self._entries[self.state.cursor]

	def process_key(self, key: MenuKeys | None, digit: int | None = None) -> None:
		if self.state.finished:
			return

		# help is dismissed by whatever key comes next
		if self.state.mode == BrowserMode.HELP:
			self.state.mode = BrowserMode.BROWSING
			return

		match key:
			case MenuKeys.QUIT:
				self.quit()
			case MenuKeys.MENU_DOWN:
				self.move_down()
			case MenuKeys.MENU_UP:
				self.move_up()
			case MenuKeys.PAGE_DOWN:
				self.page_down()
			case MenuKeys.PAGE_UP:
				self.page_up()
			case MenuKeys.MENU_START:
				self.first()
			case MenuKeys.MENU_END:
				self.last()
			case MenuKeys.NUM_KEYS:
				if digit is not None:
					self.jump(digit)
			case MenuKeys.HELP:
				self.state.mode = BrowserMode.HELP
			case MenuKeys.ACCEPT:
				self.confirm()
			case _:
				pass

	def _can_move(self) -> bool:
		return self.state.mode == BrowserMode.BROWSING and len(self._entries) > 0

	def _follow_cursor(self) -> None:
		self.state.viewport_top = adjust_viewport(
			self._entries,
			self.state.cursor,
			self.state.viewport_top,
			self.state.viewport_height,
		)

	def _to_start(self) -> None:
		# the first service is shown together with the list start,
		# a single line viewport only has room for the service itself
		if self.state.viewport_height >= 2:
			self.state.viewport_top = 0
		else:
			self._follow_cursor()

	def move_down(self) -> None:
		if not self._can_move():
			return

		self.state.cursor = min(len(self._entries) - 1, self.state.cursor + 1)
		self._follow_cursor()

	def move_up(self) -> None:
		if not self._can_move():
			return

		self.state.cursor = max(0, self.state.cursor - 1)

		if self.state.cursor == 0:
			self._to_start()
		else:
			self._follow_cursor()

	def page_down(self) -> None:
		if not self._can_move():
			return

		self.state.cursor = min(len(self._entries) - 1, self.state.cursor + self.state.viewport_height)
		self._follow_cursor()

	def page_up(self) -> None:
		if not self._can_move():
			return

		self.state.cursor = max(0, self.state.cursor - self.state.viewport_height)
		self._follow_cursor()

	def first(self) -> None:
		if not self._can_move():
			return

		self.state.cursor = 0
		self._to_start()

	def last(self) -> None:
		if not self._can_move():
			return

		self.state.cursor = len(self._entries) - 1
		self._follow_cursor()

	def jump(self, number: int) -> None:
		"""
		Focuses the service with the given 1-based position
		"""
		if not self._can_move():
			return

		if 1 <= number <= len(self._entries):
			self.state.cursor = number - 1
			self._follow_cursor()

	def confirm(self) -> None:
		if self.state.mode != BrowserMode.BROWSING:
			return

		if (entry := self.focus_entry) is None:
			return

		self.state.selected = entry.id
		self.state.mode = BrowserMode.CONFIRMED
		debug(f'Service selected for installation: {entry.id}')

	def quit(self) -> None:
		if self.state.finished:
			return

		self.state.selected = None
		self.state.mode = BrowserMode.QUIT

	def resize(self, width: int, height: int) -> None:
		if self.state.finished:
			return

		self.state.width = width
		self.state.height = height

		self.state.viewport_top = clamp_top(self._entries, self.state.viewport_top, self.state.viewport_height)
		self._follow_cursor()
