from dataclasses import dataclass, field
from shutil import which

from .apt import apt
from .exceptions import RequirementError, ServiceException, SysCallError
from .output import debug, info
from .storage import storage
from .systemd import enable_and_start, service_state


@dataclass(frozen=True)
class PackageInstaller:
	"""
	Installs a service from the distribution repositories:
	the packages are installed through apt and the listed
	systemd units are enabled and started afterwards.
	"""

	packages: list[str]
	units: list[str] = field(default_factory=list)
	binary: str | None = None

	def __call__(self) -> None:
		try:
			apt.install(self.packages)

			for unit in self.units:
				enable_and_start(unit)

				if not storage.get('dry_run', False):
					info(f'{unit} is {service_state(unit)}')
		except (SysCallError, RequirementError) as err:
			raise ServiceException(f'Failed to install {", ".join(self.packages)}: {err}') from err

	def is_installed(self) -> bool:
		if self.binary is not None:
			found = which(self.binary) is not None
			debug(f'Installed check for binary {self.binary}: {found}')
			return found

		return apt.is_package_installed(self.packages[0])
