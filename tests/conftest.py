import pytest

from config_loader import SetupConfig
from setup_context import SetupContext
from setup_errors import CommandFailedError

CLASSIC_ENV = (
    "APP_NAME=Laravel\n"
    "APP_ENV=local\n"
    "APP_KEY=\n"
    "APP_DEBUG=true\n"
    "APP_URL=http://localhost\n"
    "\n"
    "LOG_CHANNEL=stack\n"
    "\n"
    "DB_CONNECTION=sqlite\n"
    "DB_HOST=127.0.0.1\n"
    "DB_PORT=3306\n"
    "DB_DATABASE=homestead\n"
    "DB_USERNAME=homestead\n"
    "DB_PASSWORD=secret\n"
    "\n"
    "BROADCAST_DRIVER=log\n"
    "CACHE_DRIVER=file\n"
)

COMMENTED_ENV = (
    "APP_NAME=Laravel\n"
    "APP_KEY=base64:9qW0oXn0cFQ0bW1TcmVrZXktZm9yLXRlc3Rz\n"
    "\n"
    "DB_CONNECTION=sqlite\n"
    "# DB_HOST=127.0.0.1\n"
    "# DB_PORT=3306\n"
    "# DB_DATABASE=laravel\n"
    "# DB_USERNAME=root\n"
    "# DB_PASSWORD=\n"
    "\n"
    "SESSION_DRIVER=database\n"
)

COMPOSE_YML = """version: '3.8'

services:
  laravel-app:
    build: .
    container_name: laravel-apache
    ports:
      - "80:80"
    # the app waits for the database container
    depends_on:
      - mysql

  mysql:
    image: mysql:8.0
    container_name: laravel-mysql
    environment:
      MYSQL_DATABASE: laravel
      MYSQL_ROOT_PASSWORD: root
    volumes:
      - mysql_data:/var/lib/mysql

volumes:
  mysql_data:
"""


class FakeRunner:
    """Records commands instead of running them"""

    def __init__(self, available=('docker', 'docker-compose'), fail_when=None, probe_results=None):
        self.available = set(available)
        self.fail_when = fail_when
        self.probe_results = list(probe_results or [])
        self.commands = []
        self.probes = []

    def command_exists(self, name):
        return name in self.available

    def run(self, command, cwd=None, timeout=None):
        self.commands.append(list(command))
        if self.fail_when and self.fail_when(command):
            raise CommandFailedError(command, 2)

    def probe(self, command, cwd=None, timeout=30):
        self.probes.append(list(command))
        if self.probe_results:
            return self.probe_results.pop(0)
        return True, ''


@pytest.fixture()
def runner():
    return FakeRunner()


@pytest.fixture()
def config(tmp_path, monkeypatch):
    # keep a laravel-docker.config.yml in the developer's cwd out of the tests
    monkeypatch.chdir(tmp_path)
    return SetupConfig()


@pytest.fixture()
def project(tmp_path):
    root = tmp_path / 'app'
    root.mkdir()
    (root / '.env').write_text(CLASSIC_ENV, encoding='utf-8')
    (root / 'docker-compose.yml').write_text(COMPOSE_YML, encoding='utf-8')
    return root


@pytest.fixture()
def context(project, config):
    return SetupContext(str(project), config)
