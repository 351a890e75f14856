"""
Batch Executor
Executes SQL scripts sequentially over one database connection.
Each script is sent to the driver as a single batch; its statements are never split.
"""

from datetime import datetime
from pathlib import Path

from sqlalchemy.exc import ProgrammingError, SQLAlchemyError


def read_script(script_path):
    """Read the whole script as text, dropping a leading BOM some editors add"""
    return Path(script_path).read_text(encoding='utf-8').lstrip("\ufeff")


def is_empty_query(error):
    """True for the driver error raised when a batch holds only comments or whitespace"""
    return isinstance(error, ProgrammingError) and "empty query" in str(error.orig)


class BatchExecutor:
    """Executes SQL batches with progress output and error handling"""

    def __init__(self, connection):
        """
        Initialize batch executor

        Args:
            connection: SQLAlchemy Connection (anything with exec_driver_sql() and commit())
        """
        self.connection = connection
        self.batch_results = []

    def execute_scripts(self, steps):
        """
        Execute all scripts in sequence, stopping at the first failure.

        Args:
            steps: List of (ScriptSpec, script path) pairs, in execution order

        Returns:
            tuple: (success: bool, results: list)
        """
        for script, script_path in steps:
            start_time = datetime.now()

            try:
                sql = read_script(script_path)
            except (OSError, UnicodeDecodeError) as e:
                self._record_failure(script.name, str(script_path), f"Could not read script: {e}",
                                     start_time)
                return False, self.batch_results

            try:
                self.connection.exec_driver_sql(sql)
                self.connection.commit()
            except SQLAlchemyError as e:
                # comment-only scripts, such as untouched placeholders, run as no-ops
                if not is_empty_query(e):
                    self._record_failure(script.name, str(script_path), f"Script failed: {e}",
                                         start_time)
                    return False, self.batch_results

            self._record_success(script.name, str(script_path), start_time)
            print(script.done_message)

        return True, self.batch_results

    def _record_success(self, batch_name, script_path, start_time):
        """Record successful batch execution"""
        end_time = datetime.now()
        self.batch_results.append({
            'batch_name': batch_name,
            'script': script_path,
            'status': 'SUCCESS',
            'duration_seconds': round((end_time - start_time).total_seconds(), 2),
            'start_time': start_time.isoformat(),
            'end_time': end_time.isoformat()
        })

    def _record_failure(self, batch_name, script_path, error_msg, start_time):
        """Record failed batch execution"""
        end_time = datetime.now()
        self.batch_results.append({
            'batch_name': batch_name,
            'script': script_path,
            'status': 'FAILED',
            'error': error_msg,
            'duration_seconds': round((end_time - start_time).total_seconds(), 2),
            'start_time': start_time.isoformat(),
            'end_time': end_time.isoformat()
        })
