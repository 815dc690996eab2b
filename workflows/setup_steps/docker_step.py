"""Docker installation check"""
from .base_step import BaseStep
from os_detector import OSDetector


class EnsureDockerStep(BaseStep):
    """Makes sure the container runtime and its compose tool are installed"""

    title = "Checking Docker installation"

    def __init__(self, runner, context, os_type=None, os_info=None, use_sudo=None):
        super().__init__(runner, context)
        if os_type is None or os_info is None:
            os_type, os_info = OSDetector.detect_host_os()
        if use_sudo is None:
            use_sudo = OSDetector.needs_sudo()
        self.os_type = os_type
        self.os_info = os_info
        self.pkg_commands = OSDetector.get_package_manager_commands(os_info['package_manager'], use_sudo)
        self.svc_commands = OSDetector.get_service_commands(os_info['service_manager'], use_sudo)
        self.packages = OSDetector.get_docker_packages(os_info['package_manager'])

    def find_compose_command(self):
        """
        Find a compose CLI that works on this host.

        The configured standalone binary wins if it is on PATH; otherwise the
        Docker CLI plugin is tried with 'docker compose version'.

        Returns:
            list: compose argv prefix, or None if neither is available
        """
        configured = self.config.get_compose_command()
        if configured[0] != 'docker' and self.runner.command_exists(configured[0]):
            return configured
        available, _ = self.runner.probe(['docker', 'compose', 'version'])
        if available:
            return ['docker', 'compose']
        return None

    def use_compose_command(self, command):
        if command != self.config.get_compose_command():
            print(f"ℹ️  Using '{' '.join(command)}' for Docker Compose")
        self.config.set('docker.compose_command', ' '.join(command))

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")

        if not self.runner.command_exists('docker'):
            print("❌ Docker is not installed!")
            print(f"🔧 Installing Docker with {self.os_info['package_manager']}...")
            self.runner.run(self.pkg_commands['update'])
            self.runner.run(self.pkg_commands['install'] + self.packages['docker'])
            self.runner.run(self.svc_commands['start'] + ['docker'])
            self.runner.run(self.svc_commands['enable'] + ['docker'])
            print("✅ Docker installed successfully!")
            # the docker package list already carries the compose tool
            self.use_compose_command(self.packages['compose_command'])
            return True

        print("✅ Docker is already installed")
        compose_command = self.find_compose_command()
        if compose_command is None:
            print("❌ Docker Compose is not installed!")
            print("🔧 Installing Docker Compose...")
            self.runner.run(self.pkg_commands['install'] + self.packages['compose'])
            print("✅ Docker Compose installed successfully!")
            compose_command = self.packages['compose_command']
        else:
            print("✅ Docker Compose is already installed")

        self.use_compose_command(compose_command)
        return True
