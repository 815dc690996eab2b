"""Final summary"""
from .base_step import BaseStep


class ShowInfoStep(BaseStep):
    """Prints where the application runs and how to manage it"""

    def execute(self) -> bool:
        compose = ' '.join(self.config.get_compose_command())
        container = self.config.get('docker.app_container', 'laravel-apache')
        port = self.config.get('database.port', 3306)

        print("🎉 Setup completed successfully!")
        print()
        print("=== Docker Laravel Setup Complete ===")
        print(f"Application URL: {self.config.get_app_url()}")
        print(f"Database: MySQL '{self.context.db_name}' on port {port} (internal)")
        print()
        print("Useful commands:")
        print(f"  {compose} ps          # Check container status")
        print(f"  {compose} logs        # View logs")
        print(f"  {compose} down        # Stop containers")
        print(f"  docker exec -it {container} bash  # Enter container")
        print()
        print("Happy coding! 🚀")
        return True
