"""Factory for building the setup pipeline"""
from typing import List

from .base_step import BaseStep
from .docker_step import EnsureDockerStep
from .bundle_step import RelocateBundleStep
from .database_step import CollectDbConfigStep
from .env_step import ConfigureEnvStep
from .compose_step import UpdateComposeFileStep
from .containers_step import StartContainersStep
from .dependencies_step import InstallDependenciesStep
from .laravel_step import LaravelSetupStep
from .info_step import ShowInfoStep

AUTO = 'auto'
INTERACTIVE = 'interactive'


class StepFactory:
    """Factory for creating the ordered steps of a setup variant"""

    @staticmethod
    def create_steps(runner, context, variant: str = AUTO, bundle_dir=None) -> List[BaseStep]:
        """
        Create the steps for a variant

        Args:
            runner: CommandRunner instance
            context: SetupContext instance
            variant: 'auto' (bundle relocation, default database) or
                'interactive' (prompted database, compose file rewrite)
            bundle_dir: Directory the bundle was unpacked into (auto variant)

        Returns:
            List of step instances in execution order
        """
        if variant not in (AUTO, INTERACTIVE):
            raise ValueError(f"Unknown setup variant: {variant}")

        steps = [EnsureDockerStep(runner, context)]

        if variant == AUTO:
            steps.append(RelocateBundleStep(runner, context, bundle_dir))
        else:
            steps.append(CollectDbConfigStep(runner, context))

        steps.append(ConfigureEnvStep(runner, context))

        if variant == INTERACTIVE:
            steps.append(UpdateComposeFileStep(runner, context))

        steps.extend([
            StartContainersStep(runner, context),
            InstallDependenciesStep(runner, context),
            LaravelSetupStep(runner, context),
            ShowInfoStep(runner, context),
        ])
        return steps
