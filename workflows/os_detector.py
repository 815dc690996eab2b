#!/usr/bin/env python3
"""
Operating System Detection Utility for local Docker provisioning
Detects the host operating system and package manager from /etc/os-release
"""

import os
import re
from typing import Tuple, Dict, List

OS_RELEASE_PATH = '/etc/os-release'


class OSDetector:
    """Detects operating system and package manager of the executing host"""

    # os-release ID / ID_LIKE patterns for different operating systems
    OS_PATTERNS = {
        'ubuntu': {
            'patterns': [r'ubuntu', r'debian'],
            'package_manager': 'apt',
            'service_manager': 'systemd',
        },
        'amazon_linux': {
            'patterns': [r'amzn', r'amazon'],
            'package_manager': 'yum',
            'service_manager': 'systemd',
        },
        'centos': {
            'patterns': [r'centos', r'rocky', r'almalinux'],
            'package_manager': 'yum',
            'service_manager': 'systemd',
        },
        'rhel': {
            'patterns': [r'rhel', r'fedora'],
            'package_manager': 'yum',
            'service_manager': 'systemd',
        }
    }

    @staticmethod
    def parse_os_release(text: str) -> Dict[str, str]:
        """Parse the KEY=value lines of an os-release file"""
        fields = {}
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, value = line.split('=', 1)
            fields[key] = value.strip().strip('"\'')
        return fields

    @classmethod
    def detect_os(cls, os_release_text: str) -> Tuple[str, Dict[str, str]]:
        """
        Detect operating system from os-release content

        Args:
            os_release_text: Content of /etc/os-release

        Returns:
            Tuple of (os_type, os_info) where os_info contains package_manager and service_manager
        """
        fields = cls.parse_os_release(os_release_text)
        search_text = f"{fields.get('ID', '')} {fields.get('ID_LIKE', '')}".lower()

        for os_type, os_config in cls.OS_PATTERNS.items():
            for pattern in os_config['patterns']:
                if re.search(pattern, search_text):
                    return os_type, {
                        'package_manager': os_config['package_manager'],
                        'service_manager': os_config['service_manager'],
                    }

        # Default fallback - assume Ubuntu-like system
        return 'unknown', {
            'package_manager': 'apt',
            'service_manager': 'systemd',
        }

    @classmethod
    def detect_host_os(cls, os_release_path: str = OS_RELEASE_PATH) -> Tuple[str, Dict[str, str]]:
        """Detect the operating system of the machine running the setup"""
        try:
            with open(os_release_path, 'r') as f:
                text = f.read()
        except OSError:
            text = ''
        return cls.detect_os(text)

    @staticmethod
    def needs_sudo() -> bool:
        """Check whether privileged commands must be prefixed with sudo"""
        return hasattr(os, 'geteuid') and os.geteuid() != 0

    @classmethod
    def get_package_manager_commands(cls, package_manager: str, use_sudo: bool = True) -> Dict[str, List[str]]:
        """
        Get package manager specific commands as argv prefixes

        Args:
            package_manager: Package manager type ('apt', 'yum', 'dnf')
            use_sudo: Prefix commands with sudo
        """
        sudo = ['sudo'] if use_sudo else []
        if package_manager == 'apt':
            return {
                'update': sudo + ['apt', 'update'],
                'install': sudo + ['apt', 'install', '-y'],
            }
        elif package_manager in ['yum', 'dnf']:
            return {
                'update': sudo + [package_manager, 'makecache'],
                'install': sudo + [package_manager, 'install', '-y'],
            }
        else:
            return cls.get_package_manager_commands('apt', use_sudo)

    @classmethod
    def get_service_commands(cls, service_manager: str, use_sudo: bool = True) -> Dict[str, List[str]]:
        """
        Get service manager specific commands as argv prefixes

        Args:
            service_manager: Service manager type ('systemd')
            use_sudo: Prefix commands with sudo
        """
        sudo = ['sudo'] if use_sudo else []
        # Most modern systems use systemd
        return {
            'start': sudo + ['systemctl', 'start'],
            'enable': sudo + ['systemctl', 'enable'],
        }

    @classmethod
    def get_docker_packages(cls, package_manager: str) -> Dict[str, List[str]]:
        """
        Get package names for the container runtime and its compose tool

        Returns:
            Dictionary with 'docker' (runtime plus compose) and 'compose' package lists,
            and the 'compose_command' argv those packages provide
        """
        if package_manager in ['yum', 'dnf']:
            return {
                'docker': ['docker', 'docker-compose-plugin'],
                'compose': ['docker-compose-plugin'],
                'compose_command': ['docker', 'compose'],
            }
        return {
            'docker': ['docker.io', 'docker-compose'],
            'compose': ['docker-compose'],
            'compose_command': ['docker-compose'],
        }


if __name__ == "__main__":
    os_type, os_info = OSDetector.detect_host_os()
    print(f"OS: {os_type}, Package Manager: {os_info['package_manager']}")
