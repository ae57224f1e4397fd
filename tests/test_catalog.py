from collections.abc import Callable

import pytest

from bootup.lib.catalog import CATEGORY_ORDER, Catalog, ServiceInfo, default_catalog
from bootup.lib.exceptions import UnknownServiceError
from bootup.lib.installers import PackageInstaller
from bootup.tui.entry import build_entries


def test_default_catalog_services() -> None:
	catalog = default_catalog()
	names = catalog.service_names()

	assert len(names) == len(set(names)) == 14
	assert names[:3] == ['nginx', 'caddy', 'postgresql']

	for service in catalog.list_entries():
		assert service.category in CATEGORY_ORDER
		assert service.description
		assert isinstance(service.installer, PackageInstaller)


def test_default_catalog_groups() -> None:
	entries = build_entries(default_catalog(), check_installed=False)

	# nothing is registered for storage yet
	assert list(dict.fromkeys(e.category for e in entries)) == ['Web Servers', 'Databases', 'Development', 'Message Brokers', 'Monitoring']
	assert [e.id for e in entries if e.category == 'Development'] == ['nodejs', 'golang', 'python', 'php', 'docker']


def test_service_title(service_factory: Callable[..., ServiceInfo]) -> None:
	nginx = default_catalog().get_service_info('nginx')

	assert nginx.title == 'Nginx'
	assert nginx.category == 'Web Servers'
	assert service_factory('redis', 'Databases').title == 'redis'


def test_unknown_service(fake_catalog: Catalog) -> None:
	assert not fake_catalog.is_valid_service('nope')

	with pytest.raises(UnknownServiceError) as err:
		fake_catalog.get_service_info('nope')

	assert err.value.service == 'nope'
	assert 'nope' in str(err.value)

	with pytest.raises(UnknownServiceError):
		fake_catalog.install('nope')


def test_duplicate_registration(fake_catalog: Catalog, service_factory: Callable[..., ServiceInfo]) -> None:
	with pytest.raises(ValueError):
		fake_catalog.register(service_factory('redis', 'Databases'))


def test_install_calls_installer(service_factory: Callable[..., ServiceInfo], installer_factory: type) -> None:
	installer = installer_factory()
	catalog = Catalog([service_factory('redis', 'Databases', installer=installer)], ['Databases'])

	catalog.install('redis')

	assert installer.calls == 1
	assert catalog.get_installer('redis') is installer


def test_installed_check(fake_catalog: Catalog) -> None:
	assert fake_catalog.is_installed('nginx')
	assert not fake_catalog.is_installed('redis')


def test_category_order_is_a_copy(fake_catalog: Catalog) -> None:
	fake_catalog.category_order().append('Other')

	assert 'Other' not in fake_catalog.category_order()
