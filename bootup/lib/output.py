import logging
import os
import sys
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

from .storage import storage
from .utils.unicode import unicode_ljust

DEFAULT_LOG_DIR = Path(os.environ.get('BOOTUP_LOG_DIR', '/var/log/bootup'))


class FormattedOutput:
	@classmethod
	def as_columns(cls, entries: list[str], cols: int, width: int = 30) -> str:
		"""
		Will format a list into a given number of columns
		"""
		output = ''

		for i in range(0, len(entries), cols):
			row = entries[i : i + cols]
			output += ' '.join(unicode_ljust(e, width) for e in row).rstrip() + '\n'

		return output

	@classmethod
	def as_groups(cls, groups: dict[str, list[str]], indent: int = 2) -> str:
		"""
		Renders titled groups, one entry per line below each title
		and an empty line between the groups.
		"""
		blocks = []

		for title, entries in groups.items():
			lines = [f'{title}:']
			lines += [' ' * indent + e for e in entries]
			blocks.append('\n'.join(lines))

		return '\n\n'.join(blocks) + '\n' if blocks else ''


class Logger:
	def __init__(self, path: Path = DEFAULT_LOG_DIR) -> None:
		self._path = path

	@property
	def path(self) -> Path:
		return self._path / 'bootup.log'

	@property
	def directory(self) -> Path:
		return self._path

	def set_directory(self, path: Path) -> None:
		self._path = path

	def _check_permissions(self) -> None:
		log_file = self.path

		try:
			self._path.mkdir(exist_ok=True, parents=True)
			log_file.touch(exist_ok=True)

			with log_file.open('a') as f:
				f.write('')
		except PermissionError:
			# Fallback to creating the log file in the current folder
			self._path = Path('./').absolute()

			warn(f'Not enough permission to place log file at {log_file}, creating it in {self.path} instead')

	def log(self, level: int, content: str) -> None:
		self._check_permissions()

		with self.path.open('a') as f:
			ts = _timestamp()
			level_name = logging.getLevelName(level)
			f.write(f'[{ts}] - {level_name} - {content}\n')


logger = Logger()


def _supports_color() -> bool:
	"""
	Return True if the running system's terminal supports color
	and color output has not been switched off, False otherwise.
	"""
	if not storage.get('color', True):
		return False

	if 'NO_COLOR' in os.environ:
		return False

	is_a_tty = hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()
	return sys.platform != 'win32' and is_a_tty


class Font(Enum):
	bold = '1'
	italic = '3'
	underscore = '4'
	reverse = '7'


def _stylize_output(
	text: str,
	fg: str,
	bg: str | None,
	reset: bool,
	font: list[Font] = [],
) -> str:
	"""
	Adds styling to a text given a set of color arguments.
	"""
	colors = {
		'black': '0',
		'red': '1',
		'green': '2',
		'yellow': '3',
		'blue': '4',
		'magenta': '5',
		'cyan': '6',
		'white': '7',
		'orange': '8;5;208',
		'gray': '8;5;246',
	}

	foreground = {key: f'3{colors[key]}' for key in colors}
	background = {key: f'4{colors[key]}' for key in colors}
	code_list = []

	if text == '' and reset:
		return '\x1b[0m'

	code_list.append(foreground[str(fg)])

	if bg:
		code_list.append(background[str(bg)])

	for o in font:
		code_list.append(o.value)

	ansi = ';'.join(code_list)

	return f'\033[{ansi}m{text}\033[0m'


def _timestamp() -> str:
	now = datetime.now(tz=UTC)
	return now.strftime('%Y-%m-%d %H:%M:%S')


def info(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'white',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def success(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'green',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def debug(
	*msgs: str,
	level: int = logging.DEBUG,
	fg: str = 'white',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def error(
	*msgs: str,
	level: int = logging.ERROR,
	fg: str = 'red',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def warn(
	*msgs: str,
	level: int = logging.WARNING,
	fg: str = 'yellow',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	log(*msgs, level=level, fg=fg, bg=bg, reset=reset, font=font)


def log(
	*msgs: str,
	level: int = logging.INFO,
	fg: str = 'white',
	bg: str | None = None,
	reset: bool = False,
	font: list[Font] = [],
) -> None:
	text = ' '.join([str(x) for x in msgs])

	logger.log(level, text)

	if level == logging.DEBUG and not storage.get('debug', False):
		return

	if _supports_color():
		text = _stylize_output(text, fg, bg, reset, font)

	from bootup.tui.curses_menu import Tui

	Tui.print(text)
