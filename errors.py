"""
Errors
Exception types raised by dbds components. Each carries the exit code
the CLI uses when it stops on that error.
"""

from settings import ExitCode


class DbdsError(Exception):
    """Base class for every error dbds reports to the user"""

    exit_code = ExitCode.GENERAL

    def __init__(self, message, exit_code=None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(DbdsError):
    """Bad command line (extra arguments, unknown flags)"""
    exit_code = ExitCode.COMMAND_LINE


class CommandNotFoundError(DbdsError):
    """First argument is not a known command"""
    exit_code = ExitCode.COMMAND_NOT_FOUND

    def __init__(self, command):
        super().__init__(f"Unknown command: {command}")
        self.command = command


class DataFormatError(DbdsError):
    """Malformed config line, unknown key or missing field"""
    exit_code = ExitCode.DATA_FORMAT


class SystemIOError(DbdsError):
    """Filesystem failure while reading config or scaffolding files"""
    exit_code = ExitCode.SYSTEM


class ExecutionError(DbdsError):
    """Fatal rebuild failure: missing script, unreadable script, SQL or connection error"""
    exit_code = ExitCode.GENERAL
