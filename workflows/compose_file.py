"""
Reading and editing docker-compose.yml.

The compose file is parsed with PyYAML to inspect services, but edits are
made line by line so comments and layout survive. The edited text is parsed
again and checked before it replaces the file.
"""

import os
import re
from typing import Any, Dict, List, Optional

import yaml

from file_ops import atomic_write_text, backup_file, read_text
from setup_errors import ComposeFileError, MissingFileError

_PLAIN_SCALAR = re.compile(r'^[A-Za-z0-9_./@%+=-]+$')
# a quoted scalar, or the shortest plain text before an optional comment
_MAPPING_VALUE = r"'(?:[^']|'')*'|\"(?:[^\"\\]|\\.)*\"|[^\r\n]*?"
_TRAILING_COMMENT = r'([ \t]+#[^\r\n]*)?'


class ComposeLoader(yaml.SafeLoader):
    """SafeLoader that also reads Compose's local tags such as !reset and !override"""


def _construct_local_tag(loader, tag_suffix, node):
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_scalar(node)


ComposeLoader.add_multi_constructor('!', _construct_local_tag)


def parse_compose(text: str) -> Any:
    return yaml.load(text, Loader=ComposeLoader) or {}


def yaml_scalar(value: str) -> str:
    """Render a string so YAML reads it back as the same string"""
    if _PLAIN_SCALAR.match(value):
        try:
            if yaml.safe_load(value) == value:
                return value
        except yaml.YAMLError:
            pass
    return "'" + value.replace("'", "''") + "'"


def service_environment(service: Dict[str, Any]) -> Dict[str, str]:
    """Normalize a service's environment block (mapping or KEY=value list) to a dict"""
    environment = (service or {}).get('environment') or {}
    if isinstance(environment, dict):
        return {str(k): '' if v is None else str(v) for k, v in environment.items()}
    result = {}
    for item in environment:
        key, _, value = str(item).partition('=')
        result[key] = value
    return result


class ComposeFile:
    """A docker-compose.yml on disk"""

    def __init__(self, path):
        self.path = str(path)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def require(self):
        if not self.exists():
            raise MissingFileError(
                self.path, "make sure you're in the correct directory with Docker configuration"
            )

    def load(self) -> Dict[str, Any]:
        self.require()
        try:
            document = parse_compose(read_text(self.path))
        except yaml.YAMLError as e:
            raise ComposeFileError(f"Invalid YAML in {self.path}: {e}")
        if not isinstance(document, dict):
            raise ComposeFileError(f"{self.path} does not contain a compose mapping")
        return document

    def service_names(self) -> List[str]:
        return list((self.load().get('services') or {}).keys())

    def find_service_with(self, key: str, document: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """Name of the first service whose environment defines key"""
        document = document if document is not None else self.load()
        for name, service in (document.get('services') or {}).items():
            if key in service_environment(service):
                return name
        return None

    def get_environment(self, service_name: str) -> Dict[str, str]:
        services = self.load().get('services') or {}
        return service_environment(services.get(service_name))

    def update_environment(self, values: Dict[str, str], backup_path) -> List[str]:
        """
        Set environment entries wherever they appear in the file.

        Returns:
            list: keys that were not found in the file
        """
        original = read_text(self.path)
        updated, missing = replace_environment_values(original, values)

        try:
            document = parse_compose(updated)
        except yaml.YAMLError as e:
            raise ComposeFileError(f"Updated compose file would not be valid YAML: {e}")

        for key, value in values.items():
            if key in missing:
                continue
            service = self.find_service_with(key, document)
            actual = service_environment(document['services'][service]).get(key) if service else None
            if actual != value:
                raise ComposeFileError(f"{key} reads back as {actual!r} instead of {value!r}")

        backup_file(self.path, backup_path)
        atomic_write_text(self.path, updated)
        return missing


def replace_environment_values(text: str, values: Dict[str, str]):
    """
    Rewrite KEY: value and - KEY=value lines for every key in values.
    A trailing comment on a rewritten line is kept.

    Returns:
        tuple: (new_text, keys_not_found)
    """
    lines = re.split(r'(?<=\n)', text)
    missing = []

    for key, value in values.items():
        mapping_form = re.compile(
            r'^(\s*)(["\']?)' + re.escape(key) + r'\2(\s*):[ \t]*(' + _MAPPING_VALUE + r')'
            + _TRAILING_COMMENT + r'[ \t]*(\r?\n?)$'
        )
        list_form = re.compile(
            r'^(\s*-[ \t]*)(["\']?)' + re.escape(key) + r'=(.*?)\2' + _TRAILING_COMMENT + r'[ \t]*(\r?\n?)$'
        )
        found = False

        for index, line in enumerate(lines):
            match = list_form.match(line)
            if match:
                item = yaml_scalar(f"{key}={value}")
                lines[index] = f"{match.group(1)}{item}{match.group(4) or ''}{match.group(5)}"
                found = True
                continue
            match = mapping_form.match(line)
            if match:
                lines[index] = (f"{match.group(1)}{key}{match.group(3)}: {yaml_scalar(value)}"
                                f"{match.group(5) or ''}{match.group(6)}")
                found = True

        if not found:
            missing.append(key)

    return ''.join(lines), missing
