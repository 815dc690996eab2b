#!/usr/bin/env python3
"""
Configuration loader for the Laravel Docker setup workflow
This module provides utilities to load and access configuration from YAML files
"""

import copy
import os
import sys
import yaml
from typing import Dict, Any, Optional, List

DEFAULT_CONFIG_FILE = 'laravel-docker.config.yml'

DEFAULT_CONFIG: Dict[str, Any] = {
    'project': {
        'bundle_name': 'docker-experiment',
        'env_file': '.env',
        'env_template': '.env.example',
        'env_backup': '.env.backup',
        'compose_file': 'docker-compose.yml',
        'compose_backup': 'docker-compose.yml.backup',
        'dependency_dir': 'vendor',
    },
    'database': {
        'connection': 'mysql',
        'host': 'mysql',
        'port': 3306,
        'name': 'laravel',
        'username': 'root',
        'password': 'root',
    },
    'docker': {
        'compose_command': 'docker-compose',
        'app_service': 'laravel-app',
        'app_container': 'laravel-apache',
        'db_service': 'mysql',
        'db_container': 'laravel-mysql',
        'db_image': 'mysql:8.0',
        'network': 'laravel',
        'volume': 'mysql_data',
        'php_version': '8.2',
        'http_port': 80,
    },
    'readiness': {
        'enabled': True,
        'timeout': 120,
        'initial_delay': 1,
        'max_delay': 10,
        'backoff': 2,
        'fixed_delay': 10,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into a copy of base, recursing into nested dicts"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SetupConfig:
    """Configuration loader and accessor for the setup workflow"""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration loader

        Args:
            config_file: Path to the configuration YAML file. When omitted the
                default file is used if present, otherwise built-in defaults.
        """
        self.config_file = config_file
        self.config_path = None
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and merge it over the defaults"""
        if self.config_file:
            possible_paths = [self.config_file]
        else:
            possible_paths = [
                os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE),
                os.path.join(os.path.dirname(__file__), '..', DEFAULT_CONFIG_FILE),
            ]

        for path in possible_paths:
            if os.path.exists(path):
                self.config_path = path
                break

        if not self.config_path:
            if self.config_file:
                raise FileNotFoundError(f"Configuration file not found. Searched: {possible_paths}")
            return copy.deepcopy(DEFAULT_CONFIG)

        try:
            with open(self.config_path, 'r') as file:
                loaded = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {self.config_path}: {e}")

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")

        print(f"✅ Configuration loaded from: {self.config_path}")
        return _deep_merge(DEFAULT_CONFIG, loaded)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            key_path: Dot-separated path to the configuration value (e.g., 'database.name')
            default: Default value if key is not found
        """
        keys = key_path.split('.')
        value = self.config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key_path: str, value: Any):
        """Set a configuration value using dot notation"""
        keys = key_path.split('.')
        node = self.config
        for key in keys[:-1]:
            node = node.setdefault(key, {})
        node[keys[-1]] = value

    def get_bundle_name(self) -> str:
        return self.get('project.bundle_name', 'docker-experiment')

    def get_database_settings(self) -> Dict[str, str]:
        """Get the database connection settings as strings, keyed like the config"""
        db = self.get('database', {})
        return {key: str(value) for key, value in db.items()}

    def get_compose_command(self) -> List[str]:
        """Get the compose CLI as an argv prefix ('docker-compose' or 'docker compose')"""
        return str(self.get('docker.compose_command', 'docker-compose')).split()

    def get_app_service(self) -> str:
        return self.get('docker.app_service', 'laravel-app')

    def get_db_service(self) -> str:
        return self.get('docker.db_service', 'mysql')

    def get_app_url(self) -> str:
        """Get the URL the application answers on; derived from docker.http_port unless set"""
        app_url = self.get('docker.app_url')
        if app_url:
            return app_url
        port = int(self.get('docker.http_port', 80))
        return 'http://localhost' if port == 80 else f'http://localhost:{port}'

    def get_readiness_config(self) -> Dict[str, Any]:
        """Get readiness wait configuration"""
        return self.get('readiness', copy.deepcopy(DEFAULT_CONFIG['readiness']))

    def print_config_summary(self):
        """Print a summary of key configuration values"""
        print("📋 Configuration Summary:")
        print(f"  Config File: {self.config_path or 'built-in defaults'}")
        print(f"  Database: {self.get('database.name')} on {self.get('database.host')}:{self.get('database.port')}")
        print(f"  Compose Command: {' '.join(self.get_compose_command())}")
        print(f"  App Service: {self.get_app_service()}")
        print(f"  DB Service: {self.get_db_service()}")
        print(f"  Readiness Timeout: {self.get('readiness.timeout')}s")


def load_setup_config(config_file: Optional[str] = None) -> SetupConfig:
    """
    Convenience function to load setup configuration

    Args:
        config_file: Path to configuration file

    Returns:
        SetupConfig instance
    """
    return SetupConfig(config_file)


if __name__ == '__main__':
    try:
        config = load_setup_config(sys.argv[1] if len(sys.argv) > 1 else None)
        config.print_config_summary()
    except Exception as e:
        print(f"❌ Configuration test failed: {e}")
        sys.exit(1)
