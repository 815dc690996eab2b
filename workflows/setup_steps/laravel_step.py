"""Laravel application key and migrations"""
import os

from .base_step import BaseStep
from env_file import has_app_key
from file_ops import read_text


class LaravelSetupStep(BaseStep):
    """Generates the application key when missing and migrates the database"""

    title = "Setting up Laravel"

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")
        app_service = self.config.get_app_service()
        env_path = self.context.env_path

        if os.path.isfile(env_path) and has_app_key(read_text(env_path)):
            print("✅ Application key already exists")
        else:
            print("🔑 Generating application key...")
            self.compose.exec(app_service, ['php', 'artisan', 'key:generate'])
            print("✅ Application key generated!")

        print("🗄️  Running database migrations...")
        self.compose.exec(app_service, ['php', 'artisan', 'migrate', '--force'])
        print("✅ Database migrations completed!")
        return True
