#!/usr/bin/env python3
"""
Local command execution for the setup workflow
Runs external tools (package manager, docker, docker-compose) on the executing host
"""

import shutil
import subprocess
from typing import List, Optional, Tuple

from setup_errors import CommandFailedError


class CommandRunner:
    """Runs external commands one at a time, echoing each before execution"""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def command_exists(self, name: str) -> bool:
        """Check if an executable is available on PATH"""
        return shutil.which(name) is not None

    def run(self, command: List[str], cwd: Optional[str] = None, timeout: Optional[float] = None) -> None:
        """
        Run a required command with inherited stdio

        Raises:
            CommandFailedError: the command exited non-zero or could not be started
        """
        self._show_command(command, cwd)
        try:
            result = subprocess.run(command, cwd=cwd, timeout=timeout)
        except FileNotFoundError:
            print(f"❌ Command not found: {command[0]}")
            raise CommandFailedError(command, 127)
        except subprocess.TimeoutExpired:
            print(f"⏰ Command timed out after {timeout} seconds")
            raise CommandFailedError(command, 124)

        if result.returncode != 0:
            print(f"❌ FAILED (exit code: {result.returncode})")
            raise CommandFailedError(command, result.returncode)

    def probe(self, command: List[str], cwd: Optional[str] = None, timeout: Optional[float] = 30) -> Tuple[bool, str]:
        """
        Run a check command quietly, capturing its output

        Returns:
            tuple: (success: bool, output: str)
        """
        try:
            result = subprocess.run(command, cwd=cwd, capture_output=True, text=True, timeout=timeout)
        except FileNotFoundError:
            return False, f"Command not found: {command[0]}"
        except subprocess.TimeoutExpired:
            return False, f"Command timed out after {timeout} seconds"

        if result.returncode == 0:
            return True, result.stdout.strip()
        return False, (result.stderr or result.stdout).strip()

    def _show_command(self, command: List[str], cwd: Optional[str]):
        if not self.verbose:
            return
        print("─" * 60)
        print(f"📡 Running{f' in {cwd}' if cwd else ''}:")
        print(f"   {' '.join(command)}")
        print("─" * 60)
