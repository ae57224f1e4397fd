import sys
from itertools import groupby

from bootup.tui import ResultType, ServiceBrowser, Theme, build_entries

from .catalog import Catalog
from .exceptions import RequirementError, ServiceException, SysCallError, UnknownServiceError
from .output import FormattedOutput, debug, error, info, success


def list_services(catalog: Catalog, show_installed: bool = False, check_char: str = '✓') -> int:
	print('Available services:')
	print('To install a service, use the command: `bootup install [service]`')
	print()

	entries = build_entries(catalog, check_installed=show_installed)
	groups: dict[str, list[str]] = {}

	for category, members in groupby(entries, key=lambda e: e.category):
		lines = []
		for entry in members:
			line = f'- {entry.id}: {entry.description}'
			if entry.installed:
				line += f' {check_char}'
			lines.append(line)
		groups[category] = lines

	print(FormattedOutput.as_groups(groups), end='')
	return 0


def install_service(catalog: Catalog, name: str) -> int:
	"""
	Runs the install action of a single service, failures are
	reported to the user and turned into a non-zero return code.
	"""
	info(f'🚀 Installing {name}...')

	try:
		catalog.install(name)
	except UnknownServiceError:
		error(f'Service {name} is not supported yet')
		return 1
	except (ServiceException, SysCallError, RequirementError) as err:
		error(f'❌ Failed to install {name}: {err}')
		return 1

	success(f'✅ {name} installed successfully!')
	return 0


def install_services(catalog: Catalog, names: list[str]) -> int:
	unknown = [name for name in names if not catalog.is_valid_service(name)]

	if unknown:
		for name in unknown:
			error(f'Service {name} is not supported yet')

		columns = FormattedOutput.as_columns(catalog.service_names(), 4, width=16)
		info('Supported services:\n' + columns.rstrip('\n'))
		return 1

	for name in names:
		if (rc := install_service(catalog, name)) != 0:
			return rc

	return 0


def _has_terminal() -> bool:
	return sys.stdin.isatty() and sys.stdout.isatty()


def browse(catalog: Catalog, theme: Theme) -> int:
	if not _has_terminal():
		error('The interactive browser needs a terminal, use `bootup list` and `bootup install [service]` instead')
		return 1

	entries = build_entries(catalog)
	result = ServiceBrowser(entries, theme).run()

	# the curses session has ended at this point, the installation
	# output goes straight to the regular terminal
	if result.type_ == ResultType.Selection:
		return install_service(catalog, result.item())

	debug('Browser closed without a selection')
	print('Thanks for using Bootup CLI! 👋')
	return 0
