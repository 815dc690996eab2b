import getpass

import pytest

import laravel_docker_setup
from conftest import FakeRunner
from env_file import get_env_value
from laravel_docker_setup import LaravelDockerSetup, main, main_interactive
from setup_errors import MissingFileError
from setup_steps import INTERACTIVE


@pytest.fixture(autouse=True)
def app_answers(monkeypatch):
    monkeypatch.setattr('setup_steps.containers_step.http_probe', lambda url: (True, 'HTTP 200'))


def _tails(runner):
    return [command[-2:] for command in runner.commands]


def test_auto_run_executes_pipeline_in_order(runner, config, project):
    setup = LaravelDockerSetup(config, project_dir=str(project), runner=runner)

    assert [step.get_name() for step in setup.steps] == [
        'EnsureDocker', 'RelocateBundle', 'ConfigureEnv', 'StartContainers',
        'InstallDependencies', 'LaravelSetup', 'ShowInfo',
    ]
    assert setup.run() is True

    assert runner.commands[0] == ['docker-compose', 'up', '-d', '--build']
    assert _tails(runner)[1:] == [
        ['composer', 'install'],
        ['artisan', 'key:generate'],
        ['migrate', '--force'],
    ]
    text = (project / '.env').read_text(encoding='utf-8')
    assert get_env_value(text, 'DB_HOST') == 'mysql'
    assert not (project / 'docker-compose.yml.backup').exists()


def test_interactive_variant_steps(runner, config, project):
    setup = LaravelDockerSetup(config, project_dir=str(project), variant=INTERACTIVE, runner=runner)
    names = [step.get_name() for step in setup.steps]
    assert 'CollectDbConfig' in names and 'UpdateComposeFile' in names
    assert 'RelocateBundle' not in names


def test_missing_compose_file_stops_before_containers(runner, config, project):
    (project / 'docker-compose.yml').unlink()
    setup = LaravelDockerSetup(config, project_dir=str(project), runner=runner)

    with pytest.raises(MissingFileError):
        setup.run()
    assert runner.commands == []


def test_main_exit_codes(monkeypatch, project):
    runner = FakeRunner()
    monkeypatch.setattr(laravel_docker_setup, 'CommandRunner', lambda: runner)
    monkeypatch.chdir(project)

    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 0


def test_main_propagates_command_exit_code(monkeypatch, project):
    runner = FakeRunner(fail_when=lambda command: 'composer' in command)
    monkeypatch.setattr(laravel_docker_setup, 'CommandRunner', lambda: runner)

    with pytest.raises(SystemExit) as excinfo:
        main(['--project-dir', str(project)])

    assert excinfo.value.code == 2
    assert not any('artisan' in command for command in runner.commands)


def test_main_missing_compose_exits_1(monkeypatch, project):
    (project / 'docker-compose.yml').unlink()
    runner = FakeRunner()
    monkeypatch.setattr(laravel_docker_setup, 'CommandRunner', lambda: runner)

    with pytest.raises(SystemExit) as excinfo:
        main(['--project-dir', str(project)])
    assert excinfo.value.code == 1


def test_main_interactive_uses_answers(monkeypatch, project):
    runner = FakeRunner()
    monkeypatch.setattr(laravel_docker_setup, 'CommandRunner', lambda: runner)
    monkeypatch.setattr('builtins.input', lambda prompt: 'shop')
    monkeypatch.setattr(getpass, 'getpass', lambda prompt: '')

    with pytest.raises(SystemExit) as excinfo:
        main_interactive(['--project-dir', str(project)])

    assert excinfo.value.code == 0
    env = (project / '.env').read_text(encoding='utf-8')
    assert get_env_value(env, 'DB_DATABASE') == 'shop'
    assert get_env_value(env, 'DB_PASSWORD') == 'root'
    compose = (project / 'docker-compose.yml').read_text(encoding='utf-8')
    assert 'MYSQL_DATABASE: shop' in compose
    assert (project / 'docker-compose.yml.backup').exists()
