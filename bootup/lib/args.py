import argparse
import json
import os
from argparse import ArgumentParser
from dataclasses import field
from importlib.metadata import version
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.dataclasses import dataclass as p_dataclass

from .output import DEFAULT_LOG_DIR, error
from .utils.unicode import display_width


@p_dataclass
class Arguments:
	command: str | None = None
	services: list[str] = field(default_factory=list)
	installed: bool = False
	config: Path | None = None
	log_dir: Path | None = None
	debug: bool = False
	dry_run: bool = False
	no_color: bool = False


class BootupConfig(BaseModel):
	"""
	Settings read from the optional JSON configuration file.
	Values given on the command line take precedence.
	"""

	model_config = ConfigDict(extra='forbid')

	log_dir: Path | None = None
	color: bool = True
	dry_run: bool = False
	debug: bool = False
	cursor_char: str = '▶'
	check_char: str = '✓'

	@field_validator('cursor_char', 'check_char')
	@classmethod
	def _narrow_marker(cls, value: str) -> str:
		if not value or display_width(value) > 2:
			raise ValueError('markers must be one or two terminal cells wide')
		return value


class BootupConfigHandler:
	def __init__(self, argv: list[str] | None = None) -> None:
		self._parser: ArgumentParser = self._define_arguments()
		self._args: Arguments = self._parse_args(argv)
		self._config: BootupConfig = self._parse_config()

	@property
	def config(self) -> BootupConfig:
		return self._config

	@property
	def args(self) -> Arguments:
		return self._args

	@property
	def log_dir(self) -> Path:
		return self._config.log_dir or DEFAULT_LOG_DIR

	def _get_version(self) -> str:
		try:
			return version('bootup')
		except Exception:
			return 'Bootup version not found'

	def _define_arguments(self) -> ArgumentParser:
		parser = ArgumentParser(
			prog='bootup',
			description='Bootup helps you install and configure common server apps and tools.',
			formatter_class=argparse.ArgumentDefaultsHelpFormatter,
		)
		parser.add_argument(
			'-v',
			'--version',
			action='version',
			version='%(prog)s ' + self._get_version(),
		)
		parser.add_argument(
			'--config',
			type=Path,
			nargs='?',
			default=None,
			help='JSON configuration file',
		)
		parser.add_argument(
			'--log-dir',
			type=Path,
			nargs='?',
			default=None,
			help=f'Directory for the log files (default: {DEFAULT_LOG_DIR})',
		)
		parser.add_argument(
			'--debug',
			action='store_true',
			default=False,
			help='Print debug messages to the terminal as well as the log',
		)
		parser.add_argument(
			'--dry-run',
			'--dry_run',
			action='store_true',
			default=False,
			help='Print the commands an installation would run instead of running them',
		)
		parser.add_argument(
			'--no-color',
			action='store_true',
			default=False,
			help='Disable colored output',
		)

		subparsers = parser.add_subparsers(dest='command', metavar='{list,install}')

		list_parser = subparsers.add_parser('list', help='List available services')
		list_parser.add_argument(
			'--installed',
			action='store_true',
			default=False,
			help='Mark the services which are already installed',
		)

		install_parser = subparsers.add_parser('install', help='Install one or more services')
		install_parser.add_argument(
			'services',
			nargs='+',
			metavar='service',
			help='Name of the service to install',
		)

		return parser

	def _parse_args(self, argv: list[str] | None) -> Arguments:
		argparse_args = vars(self._parser.parse_args(argv))
		return Arguments(**argparse_args)

	def _parse_config(self) -> BootupConfig:
		config_path = self._args.config

		if config_path is None and (env_path := os.environ.get('BOOTUP_CONFIG')):
			config_path = Path(env_path)

		try:
			if config_path is not None:
				config = BootupConfig.model_validate(self._read_file(config_path))
			else:
				config = BootupConfig()
		except ValueError as err:
			error(f'Invalid configuration file {config_path}: {err}')
			exit(1)

		return self._apply_args(config)

	def _apply_args(self, config: BootupConfig) -> BootupConfig:
		overrides: dict[str, Any] = {}

		if self._args.log_dir is not None:
			overrides['log_dir'] = self._args.log_dir
		if self._args.no_color:
			overrides['color'] = False
		if self._args.dry_run:
			overrides['dry_run'] = True
		if self._args.debug:
			overrides['debug'] = True

		return config.model_copy(update=overrides)

	def _read_file(self, path: Path) -> dict[str, Any]:
		if not path.exists():
			error(f'Could not find file {path}')
			exit(1)

		data: dict[str, Any] = json.loads(path.read_text())
		return data
