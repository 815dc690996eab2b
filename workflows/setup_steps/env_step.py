"""Laravel .env configuration"""
import os
import shutil

from .base_step import BaseStep
from env_file import database_env_values, update_env_file


class ConfigureEnvStep(BaseStep):
    """Points the application's .env at the Docker database"""

    title = "Configuring environment"

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")
        env_path = self.context.env_path
        template_path = self.context.env_template_path

        if not os.path.isfile(env_path):
            if os.path.isfile(template_path):
                shutil.copyfile(template_path, env_path)
                print(f"✅ Created {os.path.basename(env_path)} from {os.path.basename(template_path)}")
            else:
                print(f"⚠️  {os.path.basename(env_path)} file not found and no {os.path.basename(template_path)} available")
                print("ℹ️  You'll need to create .env manually")
                return True
        else:
            print(f"✅ {os.path.basename(env_path)} file already exists")

        values = database_env_values(self.context.db_settings)
        if update_env_file(env_path, values, self.context.env_backup_path):
            print(f"✅ .env updated for Docker (backup saved as {os.path.basename(self.context.env_backup_path)})")
        else:
            print("✅ .env already configured for Docker")
        return True
