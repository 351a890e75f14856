"""
dbds - database seeding tool
Main entry point - scaffolds SQL scripts and rebuilds the database from them
"""

import sys
import argparse
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from config_loader import ConfigLoader
from database import open_engine, mask_connection_string
from errors import DbdsError, ExecutionError, UsageError, CommandNotFoundError
from rebuild_pipeline import rebuild
from scaffolder import ScriptScaffolder
from settings import DEFAULT_SETTINGS, ExitCode

USAGE_LINES = [
    "dbds usage:",
    "[dbds init]    -> Initialize new configuration and create base sql scripts. Fill the required data in them.",
    "[dbds rebuild] -> Start database seed with existing config and sql scripts.",
]


class CommandLineParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting"""

    def error(self, message):
        raise UsageError(f"{self.prog}: {message}")


def build_parser(command):
    """Commands take no arguments of their own; anything after one is a usage error"""
    return CommandLineParser(prog=f"dbds {command}", add_help=False)


def print_usage():
    for line in USAGE_LINES:
        print(line)


def init_command(base_dir, settings, read_line):
    """Scaffold scripts and config; declining the overwrite prompt still succeeds"""
    scaffolder = ScriptScaffolder(settings, read_line)
    scaffolder.initialize(base_dir / settings.scripts_dir, base_dir / settings.config_file)
    return ExitCode.SUCCESS


def rebuild_command(base_dir, settings, read_line=None):
    """Validate config, connect, then run the rebuild scripts"""
    config = ConfigLoader.load(base_dir / settings.config_file)

    if config.db_type != settings.supported_db_type:
        print(f"Found config dbType: '{config.db_type}'. "
              f"However, {settings.supported_db_type} is the only supported type.")
        return ExitCode.GENERAL

    print(f"Connecting to database: {mask_connection_string(config.connection_string)}")
    try:
        engine = open_engine(config.connection_string)
        connection = engine.connect()
    except (SQLAlchemyError, ValueError) as e:
        # malformed URL parts (e.g. a non-numeric port) surface as ValueError
        raise ExecutionError(f"Could not connect to database: {e}")

    try:
        with connection:
            rebuild(connection, base_dir / settings.scripts_dir, settings)
    finally:
        engine.dispose()

    print("dbds rebuild completed")
    return ExitCode.SUCCESS


COMMANDS = {
    'init': init_command,
    'rebuild': rebuild_command,
}


def run(argv, base_dir=None, read_line=None, settings=DEFAULT_SETTINGS):
    """
    Run one dbds command

    Args:
        argv: Command line arguments, without the program name
        base_dir: Directory holding config and scripts (default: current directory)
        read_line: Line reader for interactive prompts (default: stdin)
        settings: Fixed file names and supported engine

    Returns:
        int: Process exit code
    """
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    try:
        if not argv:
            print_usage()
            return ExitCode.GENERAL

        command = COMMANDS.get(argv[0])
        if command is None:
            raise CommandNotFoundError(argv[0])

        build_parser(argv[0]).parse_args(argv[1:])

        return command(base_dir, settings, read_line)

    except ExecutionError as e:
        print(f"\n✗ Fatal error: {e}")
        return e.exit_code
    except DbdsError as e:
        print(f"✗ {e}")
        return e.exit_code


def main(argv=None):
    """Main entry point for dbds; exits the process with the command's exit code"""
    sys.exit(run(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
