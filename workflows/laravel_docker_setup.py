#!/usr/bin/env python3
"""
Automated setup for a Laravel application with Docker (Apache + MySQL)
Checks Docker, prepares .env and docker-compose.yml, starts the containers
and runs the Laravel setup commands inside them
"""

import argparse
import os
import sys
import traceback

from command_runner import CommandRunner
from config_loader import SetupConfig
from setup_context import SetupContext
from setup_errors import SetupError
from setup_steps import StepFactory, AUTO, INTERACTIVE


class LaravelDockerSetup:
    def __init__(self, config: SetupConfig, project_dir=None, variant=AUTO, bundle_dir=None, runner=None):
        self.config = config
        self.variant = variant
        self.runner = runner or CommandRunner()
        project_dir = project_dir or bundle_dir or os.getcwd()
        self.context = SetupContext(project_dir, config)
        self.steps = StepFactory.create_steps(self.runner, self.context, variant, bundle_dir or project_dir)

    def run(self) -> bool:
        """Run every step in order, stopping at the first failure"""
        print("=" * 60)
        print("🐳 DOCKER LARAVEL SETUP")
        print("=" * 60)
        print(f"📁 Project: {self.context.project_root}")
        print(f"🏷️  Mode: {self.variant}")
        self.config.print_config_summary()

        if hasattr(os, 'geteuid') and os.geteuid() == 0:
            print("⚠️  Running as root. Some commands may behave differently.")

        total = len(self.steps)
        for number, step in enumerate(self.steps, 1):
            print("\n" + "=" * 60)
            print(f"[{number}/{total}] {step.get_name()}")
            print("=" * 60)
            if not step.execute():
                print(f"❌ Step {step.get_name()} failed")
                return False
        return True


def build_parser(variant: str) -> argparse.ArgumentParser:
    description = 'Set up a Laravel application with Docker (Apache + MySQL)'
    if variant == INTERACTIVE:
        description += ', asking for the database settings'
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument('--config-file', help='Path to configuration file (default: laravel-docker.config.yml if present)')
    parser.add_argument('--project-dir', help='Laravel project root (default: current directory)')
    if variant == AUTO:
        parser.add_argument('--bundle-dir',
                            help='Directory the setup bundle was unpacked into (default: current directory)')
    return parser


def main(argv=None, variant=AUTO):
    parser = build_parser(variant)
    args = parser.parse_args(argv)

    try:
        config = SetupConfig(args.config_file)
        setup = LaravelDockerSetup(
            config,
            project_dir=args.project_dir,
            variant=variant,
            bundle_dir=getattr(args, 'bundle_dir', None),
        )

        if setup.run():
            sys.exit(0)
        else:
            print("❌ Setup failed")
            sys.exit(1)

    except SetupError as e:
        print(f"❌ {e}")
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        print("\n⚠️  Setup interrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"❌ Error during setup: {str(e)}")
        traceback.print_exc()
        sys.exit(1)


def main_interactive(argv=None):
    main(argv, variant=INTERACTIVE)


if __name__ == '__main__':
    main()
