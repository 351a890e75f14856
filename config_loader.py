"""
Configuration Loader
Reads, writes and validates the dbds key:"value" configuration file
"""

import os
import tempfile
from pathlib import Path
from typing import NamedTuple

from errors import DataFormatError, SystemIOError


class DbdsConfig(NamedTuple):
    connection_string: str
    db_type: str


# Config file keys mapped to DbdsConfig fields, in the order they are written
CONFIG_KEYS = {
    'connectionString': 'connection_string',
    'dbType': 'db_type',
}


def split_first(line, delimiter=':'):
    """Split on the first delimiter; a line without one is all key"""
    key, _, value = line.partition(delimiter)
    return key, value


def trim_quotes(value):
    """Remove one pair of surrounding double quotes, if both are present"""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


class ConfigLoader:
    """Loads and writes the dbds configuration file"""

    @staticmethod
    def load(config_path):
        """
        Load config file and validate required fields

        Args:
            config_path: Path to dbds.cfg

        Returns:
            DbdsConfig: connection string and database type, quotes stripped

        Raises:
            SystemIOError: If the file cannot be opened or read
            DataFormatError: If a line is malformed, a key is unknown
                or a required value is missing
        """
        try:
            with open(config_path, 'r', encoding='utf-8-sig') as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SystemIOError(f"Error reading file: {e}")

        return ConfigLoader.parse_lines(lines)

    @staticmethod
    def parse_lines(lines):
        """
        Parse config lines into a DbdsConfig

        Every non-blank line is split on its first ':'. Blank lines are skipped.
        """
        values = {field: '' for field in CONFIG_KEYS.values()}

        for line in lines:
            key, raw_value = split_first(line)
            if key in CONFIG_KEYS:
                values[CONFIG_KEYS[key]] = trim_quotes(raw_value)
            elif line.strip():
                if ':' not in line:
                    raise DataFormatError(
                        f"Invalid config format. Use key:\"value\". (From line: '{line}')"
                    )
                raise DataFormatError(f"Invalid config key '{key}' found.")

        ConfigLoader._validate_config(values)

        return DbdsConfig(**values)

    @staticmethod
    def _validate_config(values):
        """Check that every required field has a value"""
        for key, field in CONFIG_KEYS.items():
            if values[field] == '':
                raise DataFormatError(f"Did not find configuration value for '{key}'.")

    @staticmethod
    def dumps(connection_string, db_type):
        """Serialize both fields as key:"value" lines"""
        values = {'connection_string': connection_string, 'db_type': db_type}
        return '\n'.join(f'{key}:"{values[field]}"' for key, field in CONFIG_KEYS.items())

    @staticmethod
    def write(config_path, connection_string='', db_type=''):
        """
        Write the config file

        Content goes to a temporary file in the same directory which then
        replaces config_path, so a failed write leaves no partial file.

        Raises:
            SystemIOError: On any filesystem failure
        """
        config_path = Path(config_path)
        content = ConfigLoader.dumps(connection_string, db_type)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{config_path.name}.", suffix='.tmp', dir=config_path.parent
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            os.replace(tmp_name, config_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise SystemIOError(f"Error writing to file {config_path}: {e}")
