from __future__ import annotations

import curses
import sys
from collections.abc import Sequence

from bootup.lib.output import debug

from .entry import CatalogEntry
from .render import render
from .result import Result, ResultType
from .state import BrowserMode, ServiceBrowserState
from .types import DEFAULT_THEME, STYLE, MenuKeys, Theme, ViewportEntry


class ServiceBrowser:
	"""
	Blocking read-eval-render loop around ServiceBrowserState.

	Every key press (or resize notification) is applied completely
	before the next frame is drawn and the next key is read.
	"""

	def __init__(self, entries: Sequence[CatalogEntry], theme: Theme = DEFAULT_THEME) -> None:
		self._theme = theme
		self._machine = ServiceBrowserState(entries)

	@property
	def machine(self) -> ServiceBrowserState:
		return self._machine

	def run(self) -> Result:
		return Tui.run(self, self._theme)

	def kickoff(self, win: curses.window) -> Result:
		height, width = win.getmaxyx()
		self._machine.resize(width, height)

		while True:
			self._draw(win)

			if self._machine.state.finished:
				break

			try:
				key = win.getch()
			except KeyboardInterrupt:
				# ctrl-c is handled like any other quit key
				self._machine.process_key(MenuKeys.QUIT)
				continue

			self._process_input_key(win, key)

		return self._result()

	def _process_input_key(self, win: curses.window, key: int) -> None:
		# getch() was interrupted without delivering a key
		if key == -1:
			return

		handle = MenuKeys.from_ord(key)

		if handle == MenuKeys.RESIZE:
			height, width = win.getmaxyx()
			debug(f'Terminal resized to {width}x{height}')
			self._machine.resize(width, height)
			return

		digit = key - 48 if handle == MenuKeys.NUM_KEYS else None
		self._machine.process_key(handle, digit)

	def _result(self) -> Result:
		state = self._machine.state

		if state.mode == BrowserMode.CONFIRMED and state.selected is not None:
			return Result(ResultType.Selection, state.selected)

		return Result(ResultType.Quit, None)

	def _draw(self, win: curses.window) -> None:
		frame = render(self._machine.entries, self._machine.state, self._theme)

		win.erase()

		for entry in frame:
			self._add_str(win, entry)

		win.refresh()

	def _add_str(self, win: curses.window, entry: ViewportEntry) -> None:
		try:
			win.addstr(entry.row, entry.col, entry.text, Tui.attr(entry.style))
		except curses.error:
			# writing into the bottom right cell moves the cursor
			# out of the window, curses reports that as an error
			pass


class Tui:
	_t: Tui | None = None

	def __init__(self, theme: Theme = DEFAULT_THEME) -> None:
		self._theme = theme

	@property
	def screen(self) -> curses.window:
		return self._screen

	@staticmethod
	def t() -> 'Tui':
		assert Tui._t is not None
		return Tui._t

	@staticmethod
	def shutdown() -> None:
		if Tui._t is None:
			return

		Tui.t().stop()

	def init(self) -> 'Tui':
		self._screen = curses.initscr()
		curses.noecho()
		curses.cbreak()
		curses.curs_set(0)
		curses.set_escdelay(25)

		self._screen.keypad(True)

		if self._theme.color and curses.has_colors():
			curses.start_color()
			curses.use_default_colors()
			self._set_up_colors()

		self._screen.refresh()

		return self

	def stop(self) -> None:
		try:
			curses.nocbreak()

			try:
				self.screen.keypad(False)
			except Exception:
				pass

			curses.echo()
			curses.curs_set(True)
			curses.endwin()
		except Exception:
			# this may happen when curses has not been initialized
			pass

		Tui._t = None

	@staticmethod
	def print(text: str, endl: str = '\n') -> None:
		if Tui._t is None:
			print(text, end=endl)
			sys.stdout.flush()
			return

		# a curses session owns the terminal; the message
		# has already been written to the log file by log()

	@staticmethod
	def attr(style: STYLE) -> int:
		if Tui._t is None:
			return curses.A_NORMAL
		return Tui._t.get_color(style)

	@staticmethod
	def run(component: ServiceBrowser, theme: Theme = DEFAULT_THEME) -> Result:
		if Tui._t is None:
			tui = Tui(theme).init()
			Tui._t = tui
			try:
				tui.screen.clear()
				return tui._main_loop(component)
			finally:
				tui.stop()
		else:
			tui = Tui._t
			tui.screen.clear()
			return tui._main_loop(component)

	def _main_loop(self, component: ServiceBrowser) -> Result:
		self._screen.refresh()
		return component.kickoff(self._screen)

	def _set_up_colors(self) -> None:
		for style, style_def in self._theme.styles.items():
			curses.init_pair(style.value, style_def.fg, style_def.bg)

	def get_color(self, style: STYLE) -> int:
		style_def = self._theme.style(style)
		attr = curses.A_NORMAL

		if self._theme.color and curses.has_colors():
			attr |= curses.color_pair(style.value)
		if style_def.bold:
			attr |= curses.A_BOLD
		if style_def.underline:
			attr |= curses.A_UNDERLINE

		return attr
