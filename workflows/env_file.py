"""
Editing of Laravel .env files.

Only the lines carrying the keys being set are touched; every other line,
including comments, blank lines and line endings, is kept byte for byte.
"""

import re
from collections import OrderedDict
from typing import Dict, List, Optional

from file_ops import atomic_write_text, backup_file, read_text

DB_KEYS = ('DB_CONNECTION', 'DB_HOST', 'DB_PORT', 'DB_DATABASE', 'DB_USERNAME', 'DB_PASSWORD')

_NEEDS_QUOTES = re.compile(r'[\s#"\'$\\]')


def database_env_values(db_settings: Dict[str, str]) -> "OrderedDict[str, str]":
    """Map the configured database settings onto the Laravel DB_* keys"""
    settings = ('connection', 'host', 'port', 'name', 'username', 'password')
    return OrderedDict((key, str(db_settings[name])) for key, name in zip(DB_KEYS, settings))


def format_value(value: str) -> str:
    """Quote a value when it would not survive unquoted"""
    if not _NEEDS_QUOTES.search(value):
        return value
    if "'" not in value:
        return f"'{value}'"
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def parse_value(raw: str) -> str:
    """Decode the right-hand side of a KEY=value line"""
    raw = raw.strip()
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in '"\'':
        inner = raw[1:-1]
        if raw[0] == '"':
            inner = re.sub(r'\\(["\\])', r'\1', inner)
        return inner
    if ' #' in raw:
        raw = raw.split(' #', 1)[0].rstrip()
    return raw


def _active_pattern(key: str):
    return re.compile(r'^[ \t]*(?:export[ \t]+)?' + re.escape(key) + r'[ \t]*=(.*)$')


def _commented_pattern(key: str):
    return re.compile(r'^[ \t]*#[ \t]*' + re.escape(key) + r'[ \t]*=')


def _split_lines(text: str) -> List[str]:
    return [line for line in re.split(r'(?<=\n)', text) if line]


def _line_ending(line: str) -> str:
    if line.endswith('\r\n'):
        return '\r\n'
    if line.endswith('\n'):
        return '\n'
    return ''


def _strip_ending(line: str) -> str:
    return line[:len(line) - len(_line_ending(line))]


def get_env_value(text: str, key: str) -> Optional[str]:
    """Return the value of the first active assignment of key, or None"""
    pattern = _active_pattern(key)
    for line in _split_lines(text):
        match = pattern.match(_strip_ending(line))
        if match:
            return parse_value(match.group(1))
    return None


def count_active(text: str, key: str) -> int:
    pattern = _active_pattern(key)
    return sum(1 for line in _split_lines(text) if pattern.match(_strip_ending(line)))


def is_configured(text: str, values: Dict[str, str]) -> bool:
    """Check every key already has exactly one active line with the wanted value"""
    return all(
        count_active(text, key) == 1 and get_env_value(text, key) == value
        for key, value in values.items()
    )


def has_app_key(text: str) -> bool:
    """Check the file carries a non-empty APP_KEY"""
    return bool(get_env_value(text, 'APP_KEY'))


def apply_values(text: str, values: Dict[str, str]) -> str:
    """
    Set each key to its value and return the new file content.

    The first active line of a key is rewritten and later active duplicates
    are dropped. A key with no active line takes over its first commented-out
    assignment; failing that it is appended at the end of the file.
    """
    lines = _split_lines(text)
    newline = '\r\n' if '\r\n' in text else '\n'

    for key, value in values.items():
        assignment = f"{key}={format_value(value)}"
        active = _active_pattern(key)
        commented = _commented_pattern(key)

        target = None
        duplicates = []
        for index, line in enumerate(lines):
            if active.match(_strip_ending(line)):
                if target is None:
                    target = index
                else:
                    duplicates.append(index)

        if target is None:
            for index, line in enumerate(lines):
                if commented.match(_strip_ending(line)):
                    target = index
                    break

        if target is None:
            if lines and not _line_ending(lines[-1]):
                lines[-1] += newline
            lines.append(assignment + newline)
            continue

        lines[target] = assignment + (_line_ending(lines[target]) or '')
        for index in reversed(duplicates):
            del lines[index]

    return ''.join(lines)


def update_env_file(env_path, values: Dict[str, str], backup_path) -> bool:
    """
    Apply values to the .env file, keeping a backup of the previous content.

    Returns:
        bool: True if the file changed, False if it already held the values
    """
    original = read_text(env_path)
    if is_configured(original, values):
        return False

    backup_file(env_path, backup_path)
    atomic_write_text(env_path, apply_values(original, values))
    return True
