import logging
import os
from pathlib import Path

from folder_manager import cli
from folder_manager.errors import NoHomeDirectoryError
from folder_manager.logging_utils import level_for_verbosity
from folder_manager.openers import NullOpener


def _feed_input(monkeypatch, *answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def _set_home(monkeypatch, home: Path) -> None:
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


def test_cli_requires_folder_name(capsys):
    exit_code = cli.main([])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "usage: folder-manager" in err
    assert "folder_name" in err


def test_cli_rejects_extra_arguments_with_exit_status_one(capsys):
    assert cli.main(["a", "b"]) == 1

    err = capsys.readouterr().err
    assert "usage: folder-manager" in err
    assert "unrecognized arguments: b" in err


def test_cli_rejects_unknown_options_with_exit_status_one(capsys):
    assert cli.main(["--bogus", "demo"]) == 1
    assert "unrecognized arguments: --bogus" in capsys.readouterr().err


def test_cli_accepts_dash_leading_name_after_double_dash(monkeypatch, capsys):
    seen = {}

    def fake_run(config):
        seen["config"] = config
        return Path("unused")

    monkeypatch.setattr("folder_manager.cli.run_folder_manager", fake_run)

    # Without the separator the name looks like an option.
    assert cli.main(["-draft"]) == 1
    assert "unrecognized arguments: -draft" in capsys.readouterr().err

    assert cli.main(["--", "-draft"]) == 0
    assert seen["config"].folder_name == "-draft"


def test_cli_passes_options_to_run(monkeypatch):
    seen = {}

    def fake_run(config):
        seen["config"] = config
        return Path("unused")

    monkeypatch.setattr("folder_manager.cli.run_folder_manager", fake_run)

    assert cli.main(["--no-open", "-vv", "my folder"]) == 0
    config = seen["config"]
    assert config.folder_name == "my folder"
    assert config.open_folders is False
    assert config.verbosity == 2


def test_cli_reports_errors_with_exit_status_one(monkeypatch, capsys):
    def fake_run(config):
        raise NoHomeDirectoryError("could not determine user profile directory ($HOME is not set)")

    monkeypatch.setattr("folder_manager.cli.run_folder_manager", fake_run)

    assert cli.main(["demo"]) == 1
    assert "folder-manager: error: could not determine user profile directory" in capsys.readouterr().err


def test_cli_ctrl_c_exits_130(monkeypatch):
    def fake_run(config):
        raise KeyboardInterrupt

    monkeypatch.setattr("folder_manager.cli.run_folder_manager", fake_run)

    assert cli.main(["demo"]) == 130


def test_cli_first_run_end_to_end(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    base = tmp_path / "work"
    base.mkdir()
    _set_home(monkeypatch, home)
    # Accept the name, decline the default base, type our own.
    _feed_input(monkeypatch, "y", "n", str(base))

    exit_code = cli.main(["--no-open", "Quarterly report?"])

    assert exit_code == 0
    project = base / "Quarterly_report"
    assert project.is_dir()
    assert Path(os.getcwd()).resolve() == project.resolve()
    out = capsys.readouterr().out
    assert 'Sanitized folder name: "Quarterly_report"' in out
    assert "Saved base directory to config file." in out

    # Second run: the stored base is reused and the folder already exists.
    monkeypatch.chdir(tmp_path)
    _feed_input(monkeypatch, "y")

    assert cli.main(["--no-open", "Quarterly report?"]) == 0
    out = capsys.readouterr().out
    assert "Config file not found." not in out
    assert f"Directory already exists: {project}" in out


def test_cli_fails_when_home_is_unset(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("USERPROFILE", raising=False)
    _feed_input(monkeypatch, "y")

    assert cli.main(["--no-open", "demo"]) == 1
    assert "could not determine user profile directory" in capsys.readouterr().err


def test_cli_fails_when_base_directory_is_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _set_home(monkeypatch, tmp_path / "home")
    _feed_input(monkeypatch, "y", "n", str(tmp_path / "nowhere"))

    assert cli.main(["--no-open", "demo"]) == 1
    assert "does not exist" in capsys.readouterr().err
    assert not (tmp_path / "nowhere").exists()


def test_cli_opens_folders_through_desktop_opener_by_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    (home / "Projects").mkdir(parents=True)
    _set_home(monkeypatch, home)
    _feed_input(monkeypatch, "y", "y")

    opener = NullOpener()
    monkeypatch.setattr("folder_manager.app.DesktopOpener", lambda: opener)

    assert cli.main(["demo"]) == 0
    assert opener.opened_paths == [home / "Projects" / "demo"]
    assert opener.downloads_opened == 1


def test_verbosity_maps_to_logging_levels():
    assert level_for_verbosity(0) == logging.WARNING
    assert level_for_verbosity(1) == logging.INFO
    assert level_for_verbosity(2) == logging.DEBUG
    assert level_for_verbosity(5) == logging.DEBUG


def test_cli_fails_when_config_cannot_be_written(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _set_home(monkeypatch, tmp_path / "home")
    _feed_input(monkeypatch, "y", "y")
    original_open = Path.open

    def failing_open(self, mode="r", *args, **kwargs):
        if "w" in mode:
            raise PermissionError("permission denied")
        return original_open(self, mode, *args, **kwargs)

    monkeypatch.setattr(Path, "open", failing_open)

    assert cli.main(["--no-open", "demo"]) == 1
    assert "folder-manager: error: could not write config file" in capsys.readouterr().err


def test_cli_fails_when_working_directory_cannot_change(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    (home / "Projects").mkdir(parents=True)
    _set_home(monkeypatch, home)
    _feed_input(monkeypatch, "y", "y")

    def denied_chdir(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("folder_manager.workspace.os.chdir", denied_chdir)

    assert cli.main(["--no-open", "demo"]) == 1
    assert "folder-manager: error: could not change directory" in capsys.readouterr().err
    # The folder created before the failure is left in place.
    assert (home / "Projects" / "demo").is_dir()
