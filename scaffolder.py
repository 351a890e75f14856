"""
Script Scaffolder
Creates the scripts directory, the four placeholder SQL files and the default
config file. Asks before replacing an existing setup.
"""

import sys
from pathlib import Path

from config_loader import ConfigLoader
from errors import DbdsError, SystemIOError
from settings import DEFAULT_SETTINGS, ExitCode

AWAITING_INPUT = 'awaiting_input'
CONFIRMED = 'confirmed'
DECLINED = 'declined'

ANSWERS = {'y': CONFIRMED, 'n': DECLINED}


def confirm_overwrite(read_line, config_file, scripts_dir):
    """
    Ask until the user answers 'y' or 'n'

    Args:
        read_line: Callable returning one line of input, '' at end of input
        config_file: Config file name shown in the prompt
        scripts_dir: Scripts directory name shown in the prompt

    Returns:
        bool: True on 'y', False on 'n'

    Raises:
        DbdsError: If input cannot be read or ends before an answer
    """
    state = AWAITING_INPUT
    while state == AWAITING_INPUT:
        print(f"Configuration file '{config_file}' already exists.")
        print(f"Force delete existing dbds config and sql scripts under {scripts_dir}? (y/n)")
        try:
            line = read_line()
        except OSError as e:
            raise DbdsError(f"Error reading input: {e}", ExitCode.GENERAL)
        if not line:
            raise DbdsError("Error reading input: EOF", ExitCode.GENERAL)

        state = ANSWERS.get(line.strip().lower(), AWAITING_INPUT)
        if state == AWAITING_INPUT:
            print("Invalid input. Please enter 'y' or 'n'.")

    return state == CONFIRMED


def delete_file_if_exists(path):
    """Delete path; a missing file is not an error"""
    try:
        Path(path).unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        raise SystemIOError(f"Failed to delete file {path}: {e}")


class ScriptScaffolder:
    """Builds the dbds scaffold for the user to fill in"""

    def __init__(self, settings=DEFAULT_SETTINGS, read_line=None):
        """
        Args:
            settings: Fixed names to scaffold
            read_line: Line reader for the overwrite prompt (default: stdin)
        """
        self.settings = settings
        self.read_line = read_line or sys.stdin.readline

    def initialize(self, scripts_dir, config_path):
        """
        Create scripts and config

        Args:
            scripts_dir: Directory to hold the SQL scripts
            config_path: Config file to create

        Returns:
            bool: True if the scaffold was written, False if the user declined

        Raises:
            SystemIOError: On any directory or file creation failure
        """
        scripts_dir = Path(scripts_dir)
        config_path = Path(config_path)
        script_paths = [scripts_dir / script.filename for script in self.settings.scripts]

        if config_path.exists():
            if not confirm_overwrite(self.read_line, config_path.name, scripts_dir.name):
                print("dbds terminated")
                return False
            for path in script_paths:
                delete_file_if_exists(path)

        try:
            scripts_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise SystemIOError(f"Error creating directory: {e}")

        for path, script in zip(script_paths, self.settings.scripts):
            self._create_script(path, script.placeholder)

        ConfigLoader.write(config_path)
        print(f"Config file '{config_path.name}' created.")
        print("Please fill out the required information to the configuration file and the sql scripts.")
        return True

    def _create_script(self, path, text):
        try:
            f = open(path, 'w', encoding='utf-8')
        except OSError as e:
            raise SystemIOError(f"Error creating file {path}: {e}")
        with f:
            print(f"Sql file '{path}' created")
            try:
                f.write(text)
            except OSError as e:
                raise SystemIOError(f"Error writing to file {path}: {e}")
        print(f"Text written to file '{text}'")
