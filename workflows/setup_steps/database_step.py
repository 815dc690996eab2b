"""Interactive database settings"""
import getpass

from .base_step import BaseStep

DEFAULT_DB_NAME = 'laravel'
DEFAULT_DB_PASSWORD = 'root'


def ask(prompt, text: str) -> str:
    """Call a prompt function, reading a closed stdin as an empty answer"""
    try:
        return prompt(text).strip()
    except EOFError:
        print()
        return ''


class CollectDbConfigStep(BaseStep):
    """Asks for the database name and password, falling back to defaults"""

    title = "Database configuration"

    def __init__(self, runner, context, prompt=None, secret_prompt=None):
        super().__init__(runner, context)
        self.prompt = prompt or input
        self.secret_prompt = secret_prompt or getpass.getpass

    def execute(self) -> bool:
        print(f"🔧 {self.title}")
        name = ask(self.prompt, f"Database name [{DEFAULT_DB_NAME}]: ") or DEFAULT_DB_NAME
        password = ask(self.secret_prompt, f"Database password [{DEFAULT_DB_PASSWORD}]: ") or DEFAULT_DB_PASSWORD
        self.context.set_database(name, password)
        print(f"✅ Using database '{name}'")
        return True
