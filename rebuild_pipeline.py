"""
Rebuild Pipeline
Drops, creates, indexes and populates the database from the four scripts
"""

from batch_executor import BatchExecutor
from errors import ExecutionError
from script_locator import locate_scripts
from settings import DEFAULT_SETTINGS


def rebuild(connection, scripts_dir, settings=DEFAULT_SETTINGS):
    """
    Run the rebuild scripts in their fixed order

    All scripts are located before the first one runs. Scripts already
    applied stay applied when a later one fails.

    Args:
        connection: Open database connection
        scripts_dir: Directory holding the scripts
        settings: Fixed script names and order

    Returns:
        list: Per-script execution records

    Raises:
        ExecutionError: On a missing script, a read failure or a failed batch
    """
    steps = locate_scripts(scripts_dir, settings)

    executor = BatchExecutor(connection)
    success, results = executor.execute_scripts(steps)
    if not success:
        raise ExecutionError(results[-1]['error'])

    return results
