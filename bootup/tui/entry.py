from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from bootup.lib.output import debug

if TYPE_CHECKING:
	from bootup.lib.catalog import ServiceInfo


class ServiceSource(Protocol):
	def list_entries(self) -> list[ServiceInfo]: ...

	def category_order(self) -> list[str]: ...

	def is_installed(self, name: str) -> bool: ...


@dataclass(frozen=True)
class CatalogEntry:
	id: str
	name: str
	description: str
	category: str
	installed: bool = False


def _check_installed(catalog: ServiceSource, name: str) -> bool:
	try:
		return bool(catalog.is_installed(name))
	except Exception as err:
		debug(f'Installed check for {name} failed, assuming not installed: {err}')
		return False


def build_entries(catalog: ServiceSource, check_installed: bool = True) -> tuple[CatalogEntry, ...]:
	"""
	Flattens the catalog into the list shown by the browser.

	Services are grouped following the category order and keep the
	catalog order inside a category; categories which are not part of
	the order are left out. The installed state is queried once here
	unless check_installed is turned off.
	"""
	services = catalog.list_entries()
	entries: list[CatalogEntry] = []

	for category in dict.fromkeys(catalog.category_order()):
		for service in services:
			if service.category != category:
				continue

			entries.append(
				CatalogEntry(
					id=service.name,
					name=service.title,
					description=service.description,
					category=service.category,
					installed=check_installed and _check_installed(catalog, service.name),
				)
			)

	return tuple(entries)
