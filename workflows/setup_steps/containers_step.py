"""Container start-up and readiness wait"""
import time

from .base_step import BaseStep
from compose_file import ComposeFile
from docker_compose import http_probe
from readiness import wait_until_ready
from setup_errors import ComposeFileError


class StartContainersStep(BaseStep):
    """Builds and starts the containers, then waits until they answer"""

    title = "Building and starting Docker containers"

    def __init__(self, runner, context, sleep=time.sleep, clock=time.monotonic, app_probe=None):
        super().__init__(runner, context)
        self.sleep = sleep
        self.clock = clock
        self.app_probe = app_probe or http_probe

    def list_services(self):
        compose_file = ComposeFile(self.context.compose_path)
        compose_file.require()
        # compose itself reports real syntax errors on 'up'
        try:
            services = compose_file.service_names()
        except ComposeFileError as e:
            print(f"⚠️  Could not list services: {e}")
            return
        print(f"📋 Services: {', '.join(services)}")

    def execute(self) -> bool:
        print(f"🔧 {self.title}...")
        self.list_services()

        self.compose.up()
        print("✅ Docker containers started successfully!")

        readiness = self.config.get_readiness_config()
        if not readiness.get('enabled', True):
            delay = readiness.get('fixed_delay', 10)
            print(f"⏳ Waiting {delay}s for services to be ready...")
            self.sleep(delay)
            return True

        timeout = readiness.get('timeout', 120)
        print(f"⏳ Waiting up to {timeout}s for services to be ready...")
        compose = self.compose
        db = self.context.db_settings
        db_service = self.config.get_db_service()
        app_url = self.config.get_app_url()
        # both waits share one deadline
        options = dict(
            timeout=timeout,
            deadline=self.clock() + timeout,
            initial_delay=readiness.get('initial_delay', 1),
            max_delay=readiness.get('max_delay', 10),
            factor=readiness.get('backoff', 2),
            sleep=self.sleep,
            clock=self.clock,
        )

        wait_until_ready(
            f"database ({db_service})",
            lambda: compose.database_probe(db_service, db['username'], db['password']),
            **options
        )
        wait_until_ready(f"application ({app_url})", lambda: self.app_probe(app_url), **options)
        return True
