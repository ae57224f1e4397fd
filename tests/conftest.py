from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from bootup.lib.catalog import Catalog, ServiceInfo
from bootup.lib.exceptions import ServiceException
from bootup.lib.output import logger
from bootup.lib.storage import storage
from bootup.tui.entry import CatalogEntry


class FakeInstaller:
	def __init__(self, error: str | None = None) -> None:
		self.calls = 0
		self.error = error

	def __call__(self) -> None:
		self.calls += 1

		if self.error is not None:
			raise ServiceException(self.error)


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path: Path) -> Iterator[None]:
	previous = logger.directory
	logger.set_directory(tmp_path / 'log')
	storage.clear()

	yield

	storage.clear()
	logger.set_directory(previous)


@pytest.fixture
def sample_entries() -> tuple[CatalogEntry, ...]:
	return (
		CatalogEntry('a', 'A', 'first service', 'cat1'),
		CatalogEntry('b', 'B', 'second service', 'cat1', installed=True),
		CatalogEntry('c', 'C', 'third service', 'cat2'),
	)


@pytest.fixture
def many_entries() -> tuple[CatalogEntry, ...]:
	sizes = {'Web Servers': 4, 'Databases': 6, 'Monitoring': 3}
	entries = []

	for category, size in sizes.items():
		for idx in range(size):
			name = f'{category.split()[0].lower()}-{idx}'
			entries.append(CatalogEntry(name, name.title(), f'{category} service {idx}', category))

	return tuple(entries)


def make_service(
	name: str,
	category: str,
	installed: bool | Callable[[], bool] = False,
	installer: Callable[[], None] | None = None,
) -> ServiceInfo:
	check = installed if callable(installed) else (lambda: installed)

	return ServiceInfo(
		name=name,
		description=f'{name} description',
		category=category,
		installer=installer or FakeInstaller(),
		installed_check=check,
	)


@pytest.fixture
def fake_catalog() -> Catalog:
	services = [
		make_service('nginx', 'Web Servers', installed=True),
		make_service('postgresql', 'Databases'),
		make_service('redis', 'Databases'),
		make_service('prometheus', 'Monitoring'),
		make_service('caddy', 'Web Servers'),
		make_service('broken', 'Databases', installer=FakeInstaller('apt-get install -y broken exited with abnormal exit code [100]')),
	]
	return Catalog(services, ['Web Servers', 'Storage', 'Databases', 'Monitoring'])


@pytest.fixture
def service_factory() -> Callable[..., ServiceInfo]:
	return make_service


@pytest.fixture
def installer_factory() -> type[FakeInstaller]:
	return FakeInstaller


@pytest.fixture(scope='session')
def config_fixture() -> Path:
	return Path(__file__).parent / 'data' / 'test_config.json'
