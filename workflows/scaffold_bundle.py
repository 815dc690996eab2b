#!/usr/bin/env python3
"""
Scaffold the Docker files of the Laravel setup bundle

Writes a Dockerfile (PHP + Apache image) and a docker-compose.yml (app and
MySQL services) into the target directory.

Usage:
    laravel-docker-scaffold [--target-dir DIR] [--config-file FILE] [--force]
"""

import argparse
import os
import sys
from typing import Any, Dict

import yaml

from config_loader import SetupConfig
from file_ops import atomic_write_text

PHP_EXTENSIONS = ['pdo_mysql', 'mbstring', 'zip', 'bcmath']


def render_dockerfile(config: SetupConfig) -> str:
    """Dockerfile for the Laravel application image"""
    php_version = config.get('docker.php_version', '8.2')
    return f'''FROM php:{php_version}-apache

RUN apt-get update && apt-get install -y \\
    libzip-dev zip unzip git curl libonig-dev libxml2-dev \\
    && docker-php-ext-install {' '.join(PHP_EXTENSIONS)} \\
    && a2enmod rewrite

ENV APACHE_DOCUMENT_ROOT /var/www/html/public
RUN sed -ri -e 's!/var/www/html!${{APACHE_DOCUMENT_ROOT}}!g' /etc/apache2/sites-available/000-default.conf \\
    && echo '<Directory /var/www/html/public>\\n\\
    AllowOverride All\\n\\
</Directory>' >> /etc/apache2/apache2.conf

WORKDIR /var/www/html
COPY --chown=www-data:www-data . .

RUN chmod -R 775 storage bootstrap/cache

CMD php artisan config:clear && \\
    php artisan key:generate && \\
    php artisan storage:link && \\
    php artisan migrate --force && \\
    apache2-foreground

EXPOSE 80
'''


def build_compose_definition(config: SetupConfig) -> Dict[str, Any]:
    """Compose document with the application and database services"""
    network = config.get('docker.network', 'laravel')
    volume = config.get('docker.volume', 'mysql_data')
    db_service = config.get_db_service()
    db_port = str(config.get('database.port', 3306))

    return {
        'services': {
            config.get_app_service(): {
                'build': {'context': '.', 'dockerfile': 'Dockerfile'},
                'container_name': config.get('docker.app_container', 'laravel-apache'),
                'restart': 'unless-stopped',
                'ports': [f"{config.get('docker.http_port', 80)}:80"],
                'depends_on': [db_service],
                'networks': [network],
            },
            db_service: {
                'image': config.get('docker.db_image', 'mysql:8.0'),
                'container_name': config.get('docker.db_container', 'laravel-mysql'),
                'restart': 'unless-stopped',
                'environment': {
                    'MYSQL_DATABASE': str(config.get('database.name', 'laravel')),
                    'MYSQL_ROOT_PASSWORD': str(config.get('database.password', 'root')),
                },
                'expose': [db_port],
                'volumes': [f'{volume}:/var/lib/mysql'],
                'networks': [network],
            },
        },
        'networks': {network: {'driver': 'bridge'}},
        'volumes': {volume: {}},
    }


def render_compose_file(config: SetupConfig) -> str:
    return yaml.safe_dump(build_compose_definition(config), sort_keys=False, default_flow_style=False)


def write_bundle_files(target_dir: str, config: SetupConfig, force: bool = False) -> Dict[str, bool]:
    """
    Write the bundle files into target_dir

    Returns:
        dict: file name -> True if written, False if an existing file was kept
    """
    files = {
        'Dockerfile': render_dockerfile(config),
        config.get('project.compose_file', 'docker-compose.yml'): render_compose_file(config),
    }
    results = {}
    for name, content in files.items():
        path = os.path.join(target_dir, name)
        if os.path.exists(path) and not force:
            print(f"⚠️  {name} already exists, skipping (use --force to overwrite)")
            results[name] = False
            continue
        atomic_write_text(path, content)
        print(f"✅ Wrote {path}")
        results[name] = True
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description='Write the Dockerfile and docker-compose.yml for a Laravel project')
    parser.add_argument('--target-dir', default=os.getcwd(), help='Directory to write into (default: current directory)')
    parser.add_argument('--config-file', help='Path to configuration file')
    parser.add_argument('--force', action='store_true', help='Overwrite existing files')
    args = parser.parse_args(argv)

    try:
        config = SetupConfig(args.config_file)
        if not os.path.isdir(args.target_dir):
            print(f"❌ Target directory not found: {args.target_dir}")
            sys.exit(1)
        write_bundle_files(args.target_dir, config, force=args.force)
    except Exception as e:
        print(f"❌ Scaffolding failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
