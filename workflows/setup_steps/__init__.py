"""
Setup steps for provisioning a Laravel application with Docker.
Each step handles one stage of the pipeline and runs in a fixed order.
"""

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
from .step_factory import StepFactory, AUTO, INTERACTIVE

__all__ = [
    'BaseStep',
    'EnsureDockerStep',
    'RelocateBundleStep',
    'CollectDbConfigStep',
    'ConfigureEnvStep',
    'UpdateComposeFileStep',
    'StartContainersStep',
    'InstallDependenciesStep',
    'LaravelSetupStep',
    'ShowInfoStep',
    'StepFactory',
    'AUTO',
    'INTERACTIVE',
]
