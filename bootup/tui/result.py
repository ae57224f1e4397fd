from dataclasses import dataclass
from enum import Enum, auto


class ResultType(Enum):
	Selection = auto()
	Quit = auto()


@dataclass(frozen=True)
class Result:
	type_: ResultType
	_item: str | None

	def has_item(self) -> bool:
		return self._item is not None

	def item(self) -> str:
		assert self._item is not None
		return self._item
