import pytest

from bootup.tui.entry import CatalogEntry
from bootup.tui.viewport import adjust_viewport, clamp_top, viewport_height


@pytest.mark.parametrize(
	'height, expected',
	[
		(40, 33),
		(24, 17),
		(10, 3),
		(9, 4),
		(7, 2),
		(6, 1),
		(5, 1),
		(3, 1),
	],
)
def test_viewport_height(height: int, expected: int) -> None:
	assert viewport_height(height) == expected


def test_scroll_down_to_next_category(sample_entries: tuple[CatalogEntry, ...]) -> None:
	assert adjust_viewport(sample_entries, 2, 0, 2) == 4


def test_visible_cursor_keeps_top(sample_entries: tuple[CatalogEntry, ...]) -> None:
	assert adjust_viewport(sample_entries, 1, 1, 2) == 1
	assert adjust_viewport(sample_entries, 2, 0, 17) == 0


def test_scroll_up_reveals_header(sample_entries: tuple[CatalogEntry, ...]) -> None:
	# cursor line 2, header line 0, both fit into three lines
	assert adjust_viewport(sample_entries, 1, 4, 3) == 0


def test_scroll_up_header_too_far(sample_entries: tuple[CatalogEntry, ...]) -> None:
	# with a two line viewport the header would push B out
	assert adjust_viewport(sample_entries, 1, 4, 2) == 1


def test_scroll_up_deep_in_category(many_entries: tuple[CatalogEntry, ...]) -> None:
	# databases-5 sits on line 12, its header on line 6
	assert adjust_viewport(many_entries, 9, 14, 3) == 10
	assert adjust_viewport(many_entries, 9, 14, 7) == 6


def test_empty_entries() -> None:
	assert adjust_viewport([], 0, 3, 5) == 0
	assert clamp_top([], 3, 5) == 0


def test_clamp_top(sample_entries: tuple[CatalogEntry, ...]) -> None:
	assert clamp_top(sample_entries, 4, 2) == 4
	assert clamp_top(sample_entries, 4, 4) == 2
	assert clamp_top(sample_entries, 4, 17) == 0
