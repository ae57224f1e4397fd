"""Bootup - install and configure common server apps and tools."""

import traceback

from .lib.args import BootupConfig, BootupConfigHandler
from .lib.catalog import Catalog, ServiceInfo, default_catalog
from .lib.commands import browse, install_services, list_services
from .lib.exceptions import RequirementError, ServiceException, SysCallError, UnknownServiceError
from .lib.general import SysCommand, run_command
from .lib.output import FormattedOutput, debug, error, info, log, logger, warn
from .lib.storage import storage
from .tui import Theme, Tui


def _theme(config: BootupConfig) -> Theme:
	return Theme(
		cursor_char=config.cursor_char,
		check_char=config.check_char,
		color=config.color,
	)


def main(argv: list[str] | None = None, catalog: Catalog | None = None) -> int:
	"""
	Entry point of the `bootup` command.
	Without a sub-command the interactive service browser is started.
	"""
	handler = BootupConfigHandler(argv)
	config = handler.config
	args = handler.args

	logger.set_directory(handler.log_dir)
	storage['dry_run'] = config.dry_run
	storage['color'] = config.color
	storage['debug'] = config.debug

	if catalog is None:
		catalog = default_catalog()

	debug(f'Running bootup with command {args.command or "browse"} (dry run: {config.dry_run})')

	match args.command:
		case 'list':
			return list_services(catalog, args.installed, config.check_char)
		case 'install':
			return install_services(catalog, args.services)
		case _:
			return browse(catalog, _theme(config))


def run_as_a_module() -> None:
	rc = 0
	exc = None

	try:
		rc = main()
	except SystemExit as e:
		# argparse and the configuration handling exit early
		rc = e.code if isinstance(e.code, int) else int(e.code is not None)
	except KeyboardInterrupt:
		warn('Interrupted')
		rc = 130
	except Exception as e:
		exc = e
	finally:
		# restore the terminal to the original state
		Tui.shutdown()

		if exc:
			err = ''.join(traceback.format_exception(exc))
			error(err)

			text = (
				'Bootup experienced the above error. If you think this is a bug, please report it\n'
				f'and include the log file "{logger.path}".\n'
			)

			warn(text)
			rc = 1

		exit(rc)


__all__ = [
	'Catalog',
	'FormattedOutput',
	'RequirementError',
	'ServiceException',
	'ServiceInfo',
	'SysCallError',
	'SysCommand',
	'Tui',
	'UnknownServiceError',
	'debug',
	'default_catalog',
	'error',
	'info',
	'log',
	'main',
	'run_as_a_module',
	'run_command',
	'warn',
]
