"""
Run state shared by the setup steps.
Paths are always derived from an explicit project root, never from the working directory.
"""

import os
from typing import Dict

from config_loader import SetupConfig


class SetupContext:
    """Project location and database choices for one setup run"""

    def __init__(self, project_root: str, config: SetupConfig):
        self.project_root = os.path.abspath(project_root)
        self.config = config
        self.db_settings: Dict[str, str] = config.get_database_settings()

    def path(self, name: str) -> str:
        """Absolute path of a project file named in the 'project' config section"""
        return os.path.join(self.project_root, self.config.get(f'project.{name}'))

    @property
    def env_path(self) -> str:
        return self.path('env_file')

    @property
    def env_template_path(self) -> str:
        return self.path('env_template')

    @property
    def env_backup_path(self) -> str:
        return self.path('env_backup')

    @property
    def compose_path(self) -> str:
        return self.path('compose_file')

    @property
    def compose_backup_path(self) -> str:
        return self.path('compose_backup')

    @property
    def dependency_dir(self) -> str:
        return self.path('dependency_dir')

    @property
    def db_name(self) -> str:
        return self.db_settings['name']

    @property
    def db_password(self) -> str:
        return self.db_settings['password']

    def set_database(self, name: str, password: str):
        self.db_settings['name'] = name
        self.db_settings['password'] = password
