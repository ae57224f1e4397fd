import unicodedata
from functools import lru_cache


@lru_cache(maxsize=128)
def _is_wide_character(char: str) -> bool:
	return unicodedata.east_asian_width(char) in 'FW'


def _count_wchars(string: str) -> int:
	"Count the total number of wide characters contained in a string"
	return sum(_is_wide_character(c) for c in string)


def display_width(string: str) -> int:
	"""Return the number of terminal cells the string occupies.
	>>> display_width('nginx')
	5
	>>> display_width('你好')
	4
	"""
	return len(string) + _count_wchars(string)


def unicode_ljust(string: str, width: int, fillbyte: str = ' ') -> str:
	"""Return a left-justified unicode string of length width.
	>>> unicode_ljust('Hello', 15, '*')
	'Hello**********'
	>>> unicode_ljust('你好', 15, '*')
	'你好***********'
	"""
	return string.ljust(width - _count_wchars(string), fillbyte)


def unicode_truncate(string: str, width: int) -> str:
	"""Cut the string so that it occupies at most width terminal cells.
	>>> unicode_truncate('postgresql', 4)
	'post'
	>>> unicode_truncate('你好', 3)
	'你'
	"""
	if width <= 0:
		return ''

	used = 0
	for idx, char in enumerate(string):
		used += 2 if _is_wide_character(char) else 1
		if used > width:
			return string[:idx]

	return string
