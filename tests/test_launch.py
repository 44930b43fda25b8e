"""Tests for launch.py - the command-line entry point."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from launch import main, report_launch
from daylaunch.controller import InputEvent, SelectionController
from daylaunch.providers import ExecutableSpec, Group, InputError, LaunchError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Config with an empty group and a two-app group."""
    path = tmp_path / "groups.json"
    path.write_text(
        json.dumps(
            {
                "groups": [
                    {"name": "Nothing"},
                    {
                        "name": "Study",
                        "apps": [
                            {"name": "Obsidian", "command": "obsidian"},
                            {"name": "Pipe", "command": "echo hi | cat", "shell": True},
                        ],
                    },
                ]
            }
        )
    )
    return path


class TestReportLaunch:
    """Tests for report_launch function."""

    def test_all_started(self, capsys: pytest.CaptureFixture) -> None:
        group = Group("Dev", (ExecutableSpec("Code", "code"),))
        assert report_launch(group, []) == 0
        assert "Dev: launched 1/1" in capsys.readouterr().out

    def test_failures_go_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        group = Group("Dev", (ExecutableSpec("Code", "code"), ExecutableSpec("Bad", "bad")))
        errors = [LaunchError("Bad", FileNotFoundError("bad"))]

        assert report_launch(group, errors) == 1

        captured = capsys.readouterr()
        assert "Error: failed to launch 'Bad'" in captured.err
        assert "Dev: launched 1/2" in captured.out

    def test_empty_group(self, capsys: pytest.CaptureFixture) -> None:
        assert report_launch(Group("Nothing"), []) == 0
        assert "nothing to launch" in capsys.readouterr().out


class TestMain:
    """Tests for main function."""

    def test_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        with patch("daylaunch.app.run") as run:
            code = main(["--config", str(tmp_path / "missing.json")])

        assert code == 1
        run.assert_not_called()
        assert "Config not found" in capsys.readouterr().err

    def test_empty_groups_fails_before_ui(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "groups.json"
        path.write_text(json.dumps({"groups": []}))

        with patch("daylaunch.app.run") as run:
            code = main(["--config", str(path)])

        assert code == 1
        run.assert_not_called()
        assert "at least one group" in capsys.readouterr().err

    def test_list(self, config_file: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["--config", str(config_file), "--list"]) == 0

        out = capsys.readouterr().out
        assert "Nothing (0 apps)" in out
        assert "Study (2 apps)" in out
        assert "Pipe: $ echo hi | cat" in out

    def test_init_writes_config(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "cfg" / "groups.json"
        assert main(["--config", str(path), "--init"]) == 0
        assert path.exists()
        assert "Wrote starter config" in capsys.readouterr().out

    def test_init_unwritable_path(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("")

        code = main(["--init", "--config", str(blocker / "sub" / "groups.json")])

        assert code == 1
        assert "Error: Cannot write" in capsys.readouterr().err

    def test_undecodable_config(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "groups.json"
        path.write_bytes(b'{"groups": [{"name": "\xff\xfe"}]}')

        with patch("daylaunch.app.run") as run:
            code = main(["--config", str(path)])

        assert code == 1
        run.assert_not_called()
        assert "Error: Cannot read" in capsys.readouterr().err

    def test_init_refuses_overwrite(self, config_file: Path, capsys: pytest.CaptureFixture) -> None:
        before = config_file.read_text()
        assert main(["--config", str(config_file), "--init"]) == 1
        assert config_file.read_text() == before
        assert "already exists" in capsys.readouterr().err

    def test_group_launches_without_menu(self, config_file: Path) -> None:
        with patch("daylaunch.process_launcher.launch_group", return_value=[]) as launch_group:
            code = main(["--config", str(config_file), "--group", "study"])

        assert code == 0
        assert launch_group.call_args.args[0].name == "Study"

    def test_unknown_group(self, config_file: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["--config", str(config_file), "--group", "Gaming"]) == 1
        err = capsys.readouterr().err
        assert "Unknown group: Gaming" in err
        assert "Nothing, Study" in err

    def test_menu_quit(self, config_file: Path, capsys: pytest.CaptureFixture) -> None:
        def fake_run(model):
            controller = SelectionController(model, lambda group: [])
            controller.dispatch(InputEvent.QUIT)
            return controller

        with patch("daylaunch.app.run", side_effect=fake_run):
            assert main(["--config", str(config_file)]) == 0
        assert capsys.readouterr().out == ""

    def test_menu_confirm_with_failure(self, config_file: Path, capsys: pytest.CaptureFixture) -> None:
        def fake_run(model):
            controller = SelectionController(
                model, lambda group: [LaunchError("Pipe", OSError("no shell"))]
            )
            controller.dispatch(InputEvent.NAVIGATE_DOWN)
            controller.dispatch(InputEvent.CONFIRM)
            return controller

        with patch("daylaunch.app.run", side_effect=fake_run):
            assert main(["--config", str(config_file)]) == 1

        captured = capsys.readouterr()
        assert "Study: launched 1/2" in captured.out
        assert "failed to launch 'Pipe'" in captured.err

    def test_input_error_reported(self, config_file: Path, capsys: pytest.CaptureFixture) -> None:
        with patch("daylaunch.app.run", side_effect=InputError("menu stopped unexpectedly")):
            assert main(["--config", str(config_file)]) == 1
        assert "Error: menu stopped unexpectedly" in capsys.readouterr().err
