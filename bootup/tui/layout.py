from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from .entry import CatalogEntry


class LineKind(Enum):
	BLANK = auto()
	CATEGORY = auto()
	ENTRY = auto()


@dataclass(frozen=True)
class Line:
	kind: LineKind
	text: str = ''
	entry_index: int | None = None


def _starts_category(entries: Sequence[CatalogEntry], index: int) -> bool:
	return index == 0 or entries[index].category != entries[index - 1].category


def layout_lines(entries: Sequence[CatalogEntry]) -> list[Line]:
	"""
	Flattens the entries into display lines: every new category starts
	with a blank separator (except the first one) and a header line,
	followed by one line per entry.
	"""
	lines: list[Line] = []

	for idx, entry in enumerate(entries):
		if _starts_category(entries, idx):
			if idx > 0:
				lines.append(Line(LineKind.BLANK))
			lines.append(Line(LineKind.CATEGORY, f'{entry.category}:'))

		lines.append(Line(LineKind.ENTRY, entry.name, idx))

	return lines


def line_of(entries: Sequence[CatalogEntry], index: int) -> int:
	"""
	Line number of the entry's own line
	"""
	line = 0

	for idx in range(index + 1):
		if _starts_category(entries, idx):
			line += 2 if idx > 0 else 1
		if idx < index:
			line += 1

	return line


def header_line_of(entries: Sequence[CatalogEntry], index: int) -> int:
	"""
	Line number of the category header the entry belongs to
	"""
	first = index
	while not _starts_category(entries, first):
		first -= 1

	return line_of(entries, first) - 1


def total_lines(entries: Sequence[CatalogEntry]) -> int:
	if not entries:
		return 0
	return line_of(entries, len(entries) - 1) + 1
