"""
Base step class for the setup pipeline.
"""

from command_runner import CommandRunner
from docker_compose import DockerCompose
from setup_context import SetupContext


class BaseStep:
    """Base class for all setup steps"""

    title = ''

    def __init__(self, runner: CommandRunner, context: SetupContext):
        """
        Initialize step

        Args:
            runner: CommandRunner used for every external command
            context: SetupContext holding paths and database choices
        """
        self.runner = runner
        self.context = context
        self.config = context.config

    @property
    def compose(self) -> DockerCompose:
        # Built on demand since bundle relocation can move the project root
        return DockerCompose(self.runner, self.context.project_root, self.config.get_compose_command())

    def execute(self) -> bool:
        """
        Run the step.
        Must be implemented by subclasses.

        Returns:
            bool: True if the step succeeded, False otherwise
        """
        raise NotImplementedError("Subclasses must implement execute()")

    def get_name(self) -> str:
        """Get the name of this step"""
        return self.__class__.__name__.replace('Step', '')
