import os

from .general import SysCommand, run_command
from .output import info


def _unit_name(service_name: str) -> str:
	if os.path.splitext(service_name)[1] != '.service':
		service_name += '.service'  # Just to be safe
	return service_name


def service_state(service_name: str) -> str:
	service_name = _unit_name(service_name)

	state = b''.join(SysCommand(f'systemctl show --no-pager -p SubState --value {service_name}', environment_vars={'SYSTEMD_COLORS': '0'}))

	return state.strip().decode('UTF-8')


def enable_and_start(service_name: str) -> None:
	unit = _unit_name(service_name)

	info(f'Enabling and starting {unit}...')
	run_command(['systemctl', 'enable', unit], elevate=True)
	run_command(['systemctl', 'start', unit], elevate=True)
