from __future__ import annotations

import os
import re
import shlex
import stat
import subprocess
import time
from collections.abc import Iterator
from shutil import which
from typing import override

from .exceptions import RequirementError, SysCallError
from .output import debug, info, logger
from .storage import storage

# https://stackoverflow.com/a/43627833/929999
_VT100_ESCAPE_REGEX = r'\x1B\[[?0-9;]*[a-zA-Z]'
_VT100_ESCAPE_REGEX_BYTES = _VT100_ESCAPE_REGEX.encode()


def locate_binary(name: str) -> str:
	if path := which(name):
		return path
	raise RequirementError(f'Binary {name} does not exist.')


def clear_vt100_escape_codes(data: bytes) -> bytes:
	return re.sub(_VT100_ESCAPE_REGEX_BYTES, b'', data)


def clear_vt100_escape_codes_from_str(data: str) -> str:
	return re.sub(_VT100_ESCAPE_REGEX, '', data)


def is_root() -> bool:
	return os.geteuid() == 0


def privileged(cmd: list[str]) -> list[str]:
	"""
	Prefixes the command with sudo unless we already run as root.
	"""
	if is_root():
		return list(cmd)
	return ['sudo', *cmd]


class SysCommand:
	"""
	Runs a command to completion and keeps its combined stdout/stderr.
	Used for short queries whose output we inspect, never for the
	long running install steps (see run_command() for those).
	"""

	def __init__(
		self,
		cmd: str | list[str],
		environment_vars: dict[str, str] | None = None,
		working_directory: str | None = None,
		remove_vt100_escape_codes: bool = True,
	):
		if isinstance(cmd, str):
			cmd = shlex.split(cmd)
		else:
			cmd = list(cmd)

		if cmd and not cmd[0].startswith(('/', './')):
			cmd[0] = locate_binary(cmd[0])

		self.cmd = cmd
		# define the standard locale for command outputs, can be overridden
		self.environment_vars = {'LC_ALL': 'C'}
		if environment_vars:
			self.environment_vars.update(environment_vars)

		self.working_directory = working_directory
		self.remove_vt100_escape_codes = remove_vt100_escape_codes

		self.exit_code: int | None = None
		self.started: float | None = None
		self.ended: float | None = None
		self._trace_log = b''

		self.execute()

	def __iter__(self) -> Iterator[bytes]:
		for line in filter(None, self._trace_log.splitlines()):
			if self.remove_vt100_escape_codes:
				line = clear_vt100_escape_codes(line)

			yield line + b'\n'

	@override
	def __str__(self) -> str:
		return self.decode(strip=False)

	@override
	def __repr__(self) -> str:
		return f'SysCommand({self.cmd!r}, exit_code={self.exit_code})'

	def execute(self) -> None:
		_log_cmd(self.cmd)

		self.started = time.time()
		result = subprocess.run(
			self.cmd,
			stdout=subprocess.PIPE,
			stderr=subprocess.STDOUT,
			env={**os.environ, **self.environment_vars},
			cwd=self.working_directory,
		)
		self.ended = time.time()

		self.exit_code = result.returncode
		self._trace_log = result.stdout

		if self.exit_code != 0:
			raise SysCallError(
				f'{self.cmd} exited with abnormal exit code [{self.exit_code}]: {str(self)[-500:]}',
				self.exit_code,
				worker_log=self._trace_log,
			)

	def decode(self, encoding: str = 'utf-8', errors: str = 'backslashreplace', strip: bool = True) -> str:
		val = self._trace_log.decode(encoding, errors=errors)

		if self.remove_vt100_escape_codes:
			val = clear_vt100_escape_codes_from_str(val)

		if strip:
			return val.strip()
		return val


def _log_cmd(cmd: list[str]) -> None:
	history_logfile = logger.directory / 'cmd_history.txt'

	change_perm = False
	if history_logfile.exists() is False:
		change_perm = True

	try:
		with history_logfile.open('a') as cmd_log:
			cmd_log.write(f'{time.time()} {cmd}\n')

		if change_perm:
			history_logfile.chmod(stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP)
	except (PermissionError, FileNotFoundError):
		# If history_logfile does not exist, ignore the error
		pass


def run_command(
	cmd: list[str],
	elevate: bool = False,
	environment_vars: dict[str, str] | None = None,
) -> None:
	"""
	Runs a command with the terminal attached so that its progress
	is shown to the user as it happens. A non-zero exit raises SysCallError.

	With --dry-run the command line is printed instead of executed.
	"""
	if elevate:
		cmd = privileged(cmd)

	command_line = shlex.join(cmd)

	if storage.get('dry_run', False):
		info(f'[dry-run] {command_line}')
		return

	executable = locate_binary(cmd[0])
	_log_cmd(cmd)
	debug(f'Executing: {command_line}')

	env = {**os.environ, **(environment_vars or {})}
	result = subprocess.run([executable, *cmd[1:]], env=env)

	if result.returncode != 0:
		raise SysCallError(
			f'{command_line} exited with abnormal exit code [{result.returncode}]',
			result.returncode,
		)
