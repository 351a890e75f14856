"""
Settings
Fixed file names, placeholder texts and exit codes used by dbds
"""

from typing import NamedTuple, Tuple


class ExitCode:
    """Process exit statuses"""
    SUCCESS = 0
    GENERAL = 1
    COMMAND_NOT_FOUND = 27
    COMMAND_LINE = 64
    DATA_FORMAT = 65
    SYSTEM = 71


class ScriptSpec(NamedTuple):
    """One of the four rebuild scripts"""
    name: str
    filename: str
    placeholder: str
    done_message: str


class Settings(NamedTuple):
    """Immutable set of names the CLI hands to every component"""
    config_file: str
    scripts_dir: str
    scripts: Tuple[ScriptSpec, ...]
    supported_db_type: str = 'postgres'


DEFAULT_SETTINGS = Settings(
    config_file='dbds.cfg',
    scripts_dir='dbds_scripts',
    scripts=(
        ScriptSpec('drop', 'schemas_drop.sql',
                   "-- Insert your 'DROP TABLE' statements here", 'Tables dropped'),
        ScriptSpec('create', 'schemas_create.sql',
                   "-- Insert your 'CREATE TABLE' statements here", 'Tables created'),
        ScriptSpec('indexes', 'schemas_indexes.sql',
                   "-- Insert your 'CREATE INDEX' statements here", 'Indexes created'),
        ScriptSpec('populate', 'schemas_populate.sql',
                   "-- Insert your 'INSERT INTO' statements here", 'Tables populated'),
    ),
)
