"""
JSON and YAML file handlers used to read and write option tables.
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union


class ConfigFile:
    """
    Base class for a structured data file with load and save methods.

    Usage:
        config_file('/path/to/options.yaml').save({'options': []})
        data = config_file('/path/to/options.yaml').load()
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self, f) -> Any:
        raise NotImplementedError

    def _write(self, data: Dict[str, Any], f):
        raise NotImplementedError

    def load(self) -> Dict[str, Any]:
        """
        Load and parse the file.

        :return: Parsed content
        :raises FileNotFoundError: If the file doesn't exist
        """
        with open(self.path, 'r') as f:
            return self._read(f)

    def save(self, data: Dict[str, Any]) -> None:
        """
        Save data to the file, creating parent directories as needed.

        :param data: Dictionary to write
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            self._write(data, f)


class JsonFile(ConfigFile):
    """JSON option table. Invalid content raises json.JSONDecodeError."""

    def __init__(self, path: Union[str, Path], indent: int = 2):
        super().__init__(path)
        self.indent = indent

    def _read(self, f):
        return json.load(f)

    def _write(self, data, f):
        json.dump(data, f, indent=self.indent)


class YamlFile(ConfigFile):
    """YAML option table. An empty file loads as {}; invalid content raises yaml.YAMLError."""

    def _read(self, f):
        return yaml.safe_load(f) or {}

    def _write(self, data, f):
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def config_file(path: Union[str, Path]) -> Optional[ConfigFile]:
    """
    Pick the file handler matching a path's suffix.

    :param path: Path ending in .json, .yaml or .yml
    :return: A JsonFile or YamlFile, or None for unknown suffixes
    """
    suffix = Path(path).suffix.lower()
    if suffix == '.json':
        return JsonFile(path)
    if suffix in ('.yaml', '.yml'):
        return YamlFile(path)
    return None
