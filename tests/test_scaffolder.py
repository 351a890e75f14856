import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from errors import DbdsError, SystemIOError
from scaffolder import ScriptScaffolder, confirm_overwrite
from settings import DEFAULT_SETTINGS, ExitCode


def line_reader(*lines):
    remaining = iter(lines)
    return lambda: next(remaining, "")


def no_prompt():
    raise AssertionError("prompt should not be shown")


def scaffold_paths(tmp_path):
    return tmp_path / "dbds_scripts", tmp_path / "dbds.cfg"


def test_fresh_init_creates_scripts_and_config(tmp_path):
    scripts_dir, config_path = scaffold_paths(tmp_path)

    created = ScriptScaffolder(read_line=no_prompt).initialize(scripts_dir, config_path)

    assert created
    assert sorted(p.name for p in scripts_dir.iterdir()) == sorted(
        s.filename for s in DEFAULT_SETTINGS.scripts
    )
    drop = (scripts_dir / "schemas_drop.sql").read_text(encoding="utf-8")
    assert drop == "-- Insert your 'DROP TABLE' statements here"
    assert config_path.read_text(encoding="utf-8") == 'connectionString:""\ndbType:""'


def test_existing_scripts_dir_is_not_an_error(tmp_path):
    scripts_dir, config_path = scaffold_paths(tmp_path)
    scripts_dir.mkdir()
    assert ScriptScaffolder(read_line=no_prompt).initialize(scripts_dir, config_path)


def test_declined_overwrite_leaves_files_untouched(tmp_path, capsys):
    scripts_dir, config_path = scaffold_paths(tmp_path)
    scripts_dir.mkdir()
    config_path.write_text('connectionString:"dsn"\ndbType:"postgres"', encoding="utf-8")
    drop = scripts_dir / "schemas_drop.sql"
    drop.write_text("DROP TABLE users;", encoding="utf-8")

    created = ScriptScaffolder(read_line=line_reader("n\n")).initialize(scripts_dir, config_path)

    assert not created
    assert config_path.read_text(encoding="utf-8") == 'connectionString:"dsn"\ndbType:"postgres"'
    assert drop.read_text(encoding="utf-8") == "DROP TABLE users;"
    assert sorted(p.name for p in scripts_dir.iterdir()) == ["schemas_drop.sql"]
    assert "dbds terminated" in capsys.readouterr().out


def test_confirmed_overwrite_replaces_scripts(tmp_path):
    scripts_dir, config_path = scaffold_paths(tmp_path)
    scripts_dir.mkdir()
    config_path.write_text('connectionString:"dsn"\ndbType:"postgres"', encoding="utf-8")
    (scripts_dir / "schemas_create.sql").write_text("CREATE TABLE users (id int);", encoding="utf-8")

    created = ScriptScaffolder(read_line=line_reader(" Y \n")).initialize(scripts_dir, config_path)

    assert created
    create = (scripts_dir / "schemas_create.sql").read_text(encoding="utf-8")
    assert create == "-- Insert your 'CREATE TABLE' statements here"
    assert config_path.read_text(encoding="utf-8") == 'connectionString:""\ndbType:""'


def test_invalid_answer_prompts_again(capsys):
    confirmed = confirm_overwrite(line_reader("maybe\n", "yes\n", "y\n"), "dbds.cfg", "dbds_scripts")

    assert confirmed
    out = capsys.readouterr().out
    assert out.count("Invalid input. Please enter 'y' or 'n'.") == 2
    assert out.count("(y/n)") == 3


def test_decline_is_case_insensitive():
    assert not confirm_overwrite(line_reader("  N\n"), "dbds.cfg", "dbds_scripts")


def test_end_of_input_is_general_error():
    with pytest.raises(DbdsError) as exc_info:
        confirm_overwrite(line_reader(), "dbds.cfg", "dbds_scripts")
    assert exc_info.value.exit_code == ExitCode.GENERAL


def test_unreadable_input_is_general_error():
    def broken_reader():
        raise OSError("stdin closed")

    with pytest.raises(DbdsError, match="stdin closed"):
        confirm_overwrite(broken_reader, "dbds.cfg", "dbds_scripts")


def test_directory_creation_failure_is_system_error(tmp_path):
    scripts_dir = tmp_path / "missing_parent" / "dbds_scripts"
    with pytest.raises(SystemIOError) as exc_info:
        ScriptScaffolder(read_line=no_prompt).initialize(scripts_dir, tmp_path / "dbds.cfg")
    assert exc_info.value.exit_code == ExitCode.SYSTEM
    assert not (tmp_path / "dbds.cfg").exists()


def test_script_creation_failure_is_system_error(tmp_path):
    scripts_dir, config_path = scaffold_paths(tmp_path)
    (scripts_dir / "schemas_drop.sql").mkdir(parents=True)

    with pytest.raises(SystemIOError, match="Error creating file"):
        ScriptScaffolder(read_line=no_prompt).initialize(scripts_dir, config_path)
    assert not config_path.exists()


def test_progress_lines(tmp_path, capsys):
    scripts_dir, config_path = scaffold_paths(tmp_path)
    ScriptScaffolder(read_line=no_prompt).initialize(scripts_dir, config_path)

    out = capsys.readouterr().out
    assert out.count("Sql file '") == 4
    assert out.count("Text written to file '") == 4
    assert "Config file 'dbds.cfg' created." in out
