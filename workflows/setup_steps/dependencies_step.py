"""Composer dependencies"""
import os

from .base_step import BaseStep


class InstallDependenciesStep(BaseStep):
    """Runs composer install in the app container unless vendor/ is present"""

    title = "Installing Laravel dependencies"

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")
        if os.path.isdir(self.context.dependency_dir):
            print("✅ Dependencies already installed")
            return True

        print("📦 Running composer install...")
        self.compose.exec(self.config.get_app_service(), ['composer', 'install'])
        print("✅ Dependencies installed successfully!")
        return True
