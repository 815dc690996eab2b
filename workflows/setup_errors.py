"""
Error types raised by the Laravel Docker setup workflow.
Each error carries the process exit code the CLI should terminate with.
"""


class SetupError(Exception):
    """Base class for setup failures that abort the run"""

    exit_code = 1


class MissingFileError(SetupError):
    """A file the current step cannot work without is absent"""

    def __init__(self, path, hint: str = ''):
        self.path = str(path)
        self.hint = hint
        message = f"{self.path} not found"
        if hint:
            message += f" ({hint})"
        super().__init__(message)


class CommandFailedError(SetupError):
    """An external command exited with a non-zero status"""

    def __init__(self, command, returncode: int, output: str = ''):
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        self.exit_code = returncode if returncode > 0 else 1
        super().__init__(f"Command failed (exit code {returncode}): {' '.join(self.command)}")


class ReadinessTimeoutError(SetupError):
    """A service did not become ready within the configured timeout"""

    exit_code = 124

    def __init__(self, probe_name: str, timeout: float, attempts: int):
        self.probe_name = probe_name
        self.timeout = timeout
        self.attempts = attempts
        super().__init__(
            f"{probe_name} was not ready after {timeout:g}s ({attempts} attempts)"
        )


class ComposeFileError(SetupError):
    """The compose definition could not be updated consistently"""
