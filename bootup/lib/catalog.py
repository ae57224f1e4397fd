from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import UnknownServiceError
from .installers import PackageInstaller


@dataclass(frozen=True)
class ServiceInfo:
	name: str
	description: str
	category: str
	installer: Callable[[], None]
	installed_check: Callable[[], bool]
	display_name: str | None = None

	@property
	def title(self) -> str:
		return self.display_name or self.name


class Catalog:
	"""
	Registry of the installable services.

	Services keep the order in which they were registered, the
	category order is given separately and decides how the
	services are grouped when displayed.
	"""

	def __init__(self, services: list[ServiceInfo], category_order: list[str]) -> None:
		self._registry: dict[str, ServiceInfo] = {}
		self._category_order = list(category_order)

		for service in services:
			self.register(service)

	def register(self, service: ServiceInfo) -> None:
		if service.name in self._registry:
			raise ValueError(f'Service {service.name} is already registered')

		self._registry[service.name] = service

	def list_entries(self) -> list[ServiceInfo]:
		return list(self._registry.values())

	def category_order(self) -> list[str]:
		return list(self._category_order)

	def service_names(self) -> list[str]:
		return list(self._registry.keys())

	def is_valid_service(self, name: str) -> bool:
		return name in self._registry

	def get_service_info(self, name: str) -> ServiceInfo:
		try:
			return self._registry[name]
		except KeyError:
			raise UnknownServiceError(name) from None

	def get_installer(self, name: str) -> Callable[[], None]:
		return self.get_service_info(name).installer

	def is_installed(self, name: str) -> bool:
		return self.get_service_info(name).installed_check()

	def install(self, name: str) -> None:
		self.get_installer(name)()


def _package_service(
	name: str,
	description: str,
	category: str,
	packages: list[str],
	units: list[str] | None = None,
	binary: str | None = None,
	display_name: str | None = None,
) -> ServiceInfo:
	installer = PackageInstaller(packages, units or [], binary)

	return ServiceInfo(
		name=name,
		description=description,
		category=category,
		installer=installer,
		installed_check=installer.is_installed,
		display_name=display_name,
	)


CATEGORY_ORDER = [
	'Web Servers',
	'Databases',
	'Storage',
	'Development',
	'Message Brokers',
	'Monitoring',
]


def default_catalog() -> Catalog:
	services = [
		_package_service('nginx', 'High-performance web server', 'Web Servers', ['nginx', 'apache2-utils'], ['nginx'], 'nginx', display_name='Nginx'),
		_package_service('caddy', 'Modern web server with automatic HTTPS', 'Web Servers', ['caddy'], ['caddy'], 'caddy', display_name='Caddy'),
		_package_service('postgresql', 'Powerful relational database', 'Databases', ['postgresql', 'postgresql-contrib'], ['postgresql'], 'psql', display_name='PostgreSQL'),
		_package_service('mysql', 'Popular open source relational database', 'Databases', ['mysql-server'], ['mysql'], 'mysqld', display_name='MySQL'),
		_package_service('redis', 'In-memory data structure store', 'Databases', ['redis-server'], ['redis-server'], 'redis-server', display_name='Redis'),
		_package_service('nodejs', 'JavaScript runtime environment', 'Development', ['nodejs', 'npm'], binary='node', display_name='Node.js'),
		_package_service('golang', 'Go programming language compiler and tools', 'Development', ['golang-go'], binary='go', display_name='Go'),
		_package_service('python', 'Python 3 interpreter with pip and venv', 'Development', ['python3', 'python3-pip', 'python3-venv'], binary='pip3', display_name='Python'),
		_package_service('php', 'PHP FastCGI process manager and CLI', 'Development', ['php-fpm', 'php-cli'], binary='php', display_name='PHP'),
		_package_service('rabbitmq', 'Message broker implementing AMQP', 'Message Brokers', ['rabbitmq-server'], ['rabbitmq-server'], 'rabbitmqctl', display_name='RabbitMQ'),
		_package_service('prometheus', 'Monitoring and alerting toolkit', 'Monitoring', ['prometheus'], ['prometheus'], 'prometheus', display_name='Prometheus'),
		_package_service('alertmanager', 'Handles alerts from Prometheus', 'Monitoring', ['prometheus-alertmanager'], ['prometheus-alertmanager'], 'prometheus-alertmanager', display_name='Alertmanager'),
		_package_service('node-exporter', 'Prometheus exporter for machine metrics', 'Monitoring', ['prometheus-node-exporter'], ['prometheus-node-exporter'], 'prometheus-node-exporter', display_name='Node Exporter'),
		_package_service('docker', 'Container platform for building and running applications', 'Development', ['docker.io'], ['docker'], 'docker', display_name='Docker'),
	]

	return Catalog(services, CATEGORY_ORDER)
