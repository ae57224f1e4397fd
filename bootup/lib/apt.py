from .exceptions import SysCallError
from .general import SysCommand, run_command
from .output import debug, info


class Apt:
	def __init__(self) -> None:
		self.synced = False

	@staticmethod
	def run(*args: str) -> None:
		"""
		A centralized function to call `apt-get` from.
		Runs non-interactively and with root privileges.
		"""
		run_command(['env', 'DEBIAN_FRONTEND=noninteractive', 'apt-get', *args], elevate=True)

	def update(self) -> None:
		if self.synced:
			return

		info('Updating package list...')
		self.run('update', '-y')
		self.synced = True

	def install(self, packages: str | list[str]) -> None:
		if isinstance(packages, str):
			packages = [packages]

		self.update()

		info(f'Installing packages: {" ".join(packages)}')
		self.run('install', '-y', *packages)

	@staticmethod
	def is_package_installed(name: str) -> bool:
		try:
			status = SysCommand(['dpkg-query', '-W', '-f=${Status}', name]).decode()
		except SysCallError as err:
			debug(f'dpkg-query for {name} failed: {err.exit_code}')
			return False

		return status == 'install ok installed'


apt = Apt()
