"""docker-compose.yml database settings"""
import os

from .base_step import BaseStep
from compose_file import ComposeFile


class UpdateComposeFileStep(BaseStep):
    """Writes the chosen database name and password into the MySQL service"""

    title = "Updating docker-compose.yml"

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")
        compose = ComposeFile(self.context.compose_path)
        compose.require()

        missing = compose.update_environment({
            'MYSQL_DATABASE': self.context.db_name,
            'MYSQL_ROOT_PASSWORD': self.context.db_password,
        }, self.context.compose_backup_path)

        for key in missing:
            print(f"⚠️  {key} not found in {os.path.basename(compose.path)}, left unchanged")
        print(f"✅ docker-compose.yml updated (backup saved as {os.path.basename(self.context.compose_backup_path)})")
        return True
