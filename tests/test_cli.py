from pathlib import Path

import pytest
from pytest import MonkeyPatch

import bootup
from bootup import main
from bootup.lib.catalog import Catalog
from bootup.lib.storage import storage
from bootup.tui import Result, ResultType, ServiceBrowser


@pytest.fixture
def base_args(tmp_path: Path, monkeypatch: MonkeyPatch) -> list[str]:
	monkeypatch.delenv('BOOTUP_CONFIG', raising=False)
	return ['--log-dir', str(tmp_path)]


def test_list(base_args: list[str], fake_catalog: Catalog, capsys: pytest.CaptureFixture[str]) -> None:
	assert main(base_args + ['list'], catalog=fake_catalog) == 0

	assert capsys.readouterr().out == (
		'Available services:\n'
		'To install a service, use the command: `bootup install [service]`\n'
		'\n'
		'Web Servers:\n'
		'  - nginx: nginx description\n'
		'  - caddy: caddy description\n'
		'\n'
		'Databases:\n'
		'  - postgresql: postgresql description\n'
		'  - redis: redis description\n'
		'  - broken: broken description\n'
		'\n'
		'Monitoring:\n'
		'  - prometheus: prometheus description\n'
	)


def test_list_installed(base_args: list[str], fake_catalog: Catalog, capsys: pytest.CaptureFixture[str]) -> None:
	assert main(base_args + ['list', '--installed'], catalog=fake_catalog) == 0

	out = capsys.readouterr().out
	assert '  - nginx: nginx description ✓\n' in out
	assert '  - caddy: caddy description\n' in out


def test_install(base_args: list[str], fake_catalog: Catalog, capsys: pytest.CaptureFixture[str]) -> None:
	assert main(base_args + ['install', 'redis'], catalog=fake_catalog) == 0

	out = capsys.readouterr().out
	assert '🚀 Installing redis...' in out
	assert '✅ redis installed successfully!' in out
	assert fake_catalog.get_installer('redis').calls == 1


def test_install_unknown(base_args: list[str], fake_catalog: Catalog, capsys: pytest.CaptureFixture[str]) -> None:
	assert main(base_args + ['install', 'nope'], catalog=fake_catalog) == 1

	out = capsys.readouterr().out
	assert 'Service nope is not supported yet' in out
	assert 'Supported services:\n' + 'nginx'.ljust(17) + 'postgresql' in out


def test_install_failure(base_args: list[str], fake_catalog: Catalog, capsys: pytest.CaptureFixture[str]) -> None:
	assert main(base_args + ['install', 'broken'], catalog=fake_catalog) == 1

	out = capsys.readouterr().out
	assert '❌ Failed to install broken: apt-get install -y broken exited with abnormal exit code [100]' in out
	assert 'installed successfully' not in out


def test_install_several(base_args: list[str], fake_catalog: Catalog) -> None:
	assert main(base_args + ['install', 'redis', 'caddy'], catalog=fake_catalog) == 0

	assert fake_catalog.get_installer('redis').calls == 1
	assert fake_catalog.get_installer('caddy').calls == 1


def test_install_stops_at_first_failure(base_args: list[str], fake_catalog: Catalog) -> None:
	assert main(base_args + ['install', 'broken', 'redis'], catalog=fake_catalog) == 1

	assert fake_catalog.get_installer('redis').calls == 0


def test_unknown_names_are_rejected_upfront(base_args: list[str], fake_catalog: Catalog, capsys: pytest.CaptureFixture[str]) -> None:
	assert main(base_args + ['install', 'redis', 'nope'], catalog=fake_catalog) == 1

	assert fake_catalog.get_installer('redis').calls == 0
	assert 'Service nope is not supported yet' in capsys.readouterr().out


def test_dry_run_flag(base_args: list[str], fake_catalog: Catalog) -> None:
	main(base_args + ['--dry-run', '--no-color', 'list'], catalog=fake_catalog)

	assert storage['dry_run']
	assert not storage['color']


def test_log_file(base_args: list[str], fake_catalog: Catalog, tmp_path: Path) -> None:
	main(base_args + ['install', 'nope'], catalog=fake_catalog)

	content = (tmp_path / 'bootup.log').read_text()
	assert 'ERROR - Service nope is not supported yet' in content


def test_browse_installs_selection(
	base_args: list[str],
	fake_catalog: Catalog,
	monkeypatch: MonkeyPatch,
	capsys: pytest.CaptureFixture[str],
) -> None:
	monkeypatch.setattr('bootup.lib.commands._has_terminal', lambda: True)
	monkeypatch.setattr(ServiceBrowser, 'run', lambda self: Result(ResultType.Selection, 'postgresql'))

	assert main(base_args, catalog=fake_catalog) == 0

	assert fake_catalog.get_installer('postgresql').calls == 1
	assert '✅ postgresql installed successfully!' in capsys.readouterr().out


def test_browse_failed_install(base_args: list[str], fake_catalog: Catalog, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr('bootup.lib.commands._has_terminal', lambda: True)
	monkeypatch.setattr(ServiceBrowser, 'run', lambda self: Result(ResultType.Selection, 'broken'))

	assert main(base_args, catalog=fake_catalog) == 1


def test_browse_quit(
	base_args: list[str],
	fake_catalog: Catalog,
	monkeypatch: MonkeyPatch,
	capsys: pytest.CaptureFixture[str],
) -> None:
	monkeypatch.setattr('bootup.lib.commands._has_terminal', lambda: True)
	monkeypatch.setattr(ServiceBrowser, 'run', lambda self: Result(ResultType.Quit, None))

	assert main(base_args, catalog=fake_catalog) == 0

	assert 'Thanks for using Bootup CLI! 👋' in capsys.readouterr().out
	assert all(s.installer.calls == 0 for s in fake_catalog.list_entries())


def test_browse_without_terminal(base_args: list[str], fake_catalog: Catalog, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr('bootup.lib.commands._has_terminal', lambda: False)

	assert main(base_args, catalog=fake_catalog) == 1


def test_run_as_a_module_exit_code(base_args: list[str], monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr('sys.argv', ['bootup', *base_args, 'upgrade'])

	with pytest.raises(SystemExit) as err:
		bootup.run_as_a_module()

	assert err.value.code == 2


def test_run_as_a_module_reports_crash(monkeypatch: MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
	def crash() -> int:
		raise RuntimeError('catalog exploded')

	monkeypatch.setattr('bootup.main', crash)

	with pytest.raises(SystemExit) as err:
		bootup.run_as_a_module()

	assert err.value.code == 1

	out = capsys.readouterr().out
	assert 'RuntimeError: catalog exploded' in out
	assert 'please report it' in out


def test_run_as_a_module_interrupted(monkeypatch: MonkeyPatch) -> None:
	def interrupt() -> int:
		raise KeyboardInterrupt

	monkeypatch.setattr('bootup.main', interrupt)

	with pytest.raises(SystemExit) as err:
		bootup.run_as_a_module()

	assert err.value.code == 130
