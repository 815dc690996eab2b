#!/usr/bin/env python3
"""
Thin wrapper over the docker-compose CLI for the setup workflow
"""

import sys
from typing import List, Optional, Tuple

import requests

from command_runner import CommandRunner


class DockerCompose:
    """Runs docker-compose commands against one project directory"""

    def __init__(self, runner: CommandRunner, project_root: str, compose_command: Optional[List[str]] = None,
                 interactive: Optional[bool] = None):
        self.runner = runner
        self.project_root = str(project_root)
        self.compose_command = list(compose_command or ['docker-compose'])
        if interactive is None:
            interactive = sys.stdin.isatty()
        self.interactive = interactive

    def up(self):
        """Build images and start all services in the background"""
        self.runner.run(self.compose_command + ['up', '-d', '--build'], cwd=self.project_root)

    def exec(self, service: str, command: List[str]):
        """Run a command inside a running service container"""
        args = ['exec']
        if not self.interactive:
            args.append('-T')
        self.runner.run(self.compose_command + args + [service] + list(command), cwd=self.project_root)

    def database_probe(self, service: str, username: str, password: str) -> Tuple[bool, str]:
        """Check the MySQL server inside service answers a ping"""
        command = self.compose_command + [
            'exec', '-T', service,
            'mysqladmin', 'ping', '-h', '127.0.0.1', f'-u{username}', f'-p{password}', '--silent',
        ]
        return self.runner.probe(command, cwd=self.project_root)


def http_probe(url: str, timeout: float = 5) -> Tuple[bool, str]:
    """Check the application answers HTTP requests without a server error"""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        return False, str(e)
    if response.status_code >= 500:
        return False, f"HTTP {response.status_code}"
    return True, f"HTTP {response.status_code}"
