"""
Script Locator
Resolves the fixed script filenames inside the scripts directory
"""

from pathlib import Path

from errors import ExecutionError


def locate_script(scripts_dir, filename):
    """
    Join scripts_dir and filename and make sure the file exists

    Raises:
        ExecutionError: If nothing exists at the resulting path
    """
    script_path = Path(scripts_dir) / filename
    if not filename or not script_path.exists():
        raise ExecutionError(f"Could not find script from path: {script_path}")
    return script_path


def locate_scripts(scripts_dir, settings):
    """
    Locate every script in rebuild order

    Returns:
        list: (ScriptSpec, Path) pairs

    Raises:
        ExecutionError: For the first missing script in that order
    """
    return [(script, locate_script(scripts_dir, script.filename)) for script in settings.scripts]
