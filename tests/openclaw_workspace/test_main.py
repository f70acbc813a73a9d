"""Tests for main.main() entry point — command dispatch and output."""

import json
import sys
from pathlib import Path

import pytest

from openclaw_workspace.main import _parse_args, main


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["openclaw-workspace", *args])
    monkeypatch.setattr("openclaw_workspace.main._configure_logging", lambda verbose: None)
    main()


class TestParseArgs:
    def test_positional_and_flags(self):
        positionals, options = _parse_args(["/ws", "--no-templates", "-v"])
        assert positionals == ["/ws"]
        assert options == {"no_templates": True, "verbose": True}

    def test_session_forms(self):
        assert _parse_args(["--session", "agent:main:cron:x"])[1]["session"] == "agent:main:cron:x"
        assert _parse_args(["--session=agent:main:main"])[1]["session"] == "agent:main:main"

    def test_session_requires_value(self):
        with pytest.raises(ValueError, match="requires a value"):
            _parse_args(["--session"])

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown option"):
            _parse_args(["--bogus"])

    def test_too_many_positionals(self):
        with pytest.raises(ValueError, match="Unexpected argument"):
            _parse_args(["a", "b"])


class TestMain:
    def test_no_command_exits_with_usage(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["openclaw-workspace"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 2
        assert "Usage" in capsys.readouterr().err

    def test_bad_option_exits(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "init", "--bogus")
        assert exc.value.code == 2

    def test_init_seeds_workspace(self, monkeypatch, capsys, tmp_path: Path):
        ws = tmp_path / "ws"
        _run(monkeypatch, "init", str(ws))

        out = capsys.readouterr().out
        assert "Detected:  new" in out
        assert "created BOOTSTRAP.md" in out
        assert (ws / "BOOTSTRAP.md").is_file()
        state_json = out[out.index("{") :]
        assert "bootstrapSeededAt" in json.loads(state_json)

    def test_init_no_templates(self, monkeypatch, capsys, tmp_path: Path):
        ws = tmp_path / "ws"
        _run(monkeypatch, "init", str(ws), "--no-templates")
        assert ws.is_dir()
        assert list(ws.iterdir()) == []

    def test_files_lists_entries(self, monkeypatch, capsys, tmp_path: Path):
        ws = tmp_path / "ws"
        ws.mkdir()
        (ws / "AGENTS.md").write_text("agents")
        monkeypatch.delenv("OPENCLAW_PROFILE", raising=False)

        _run(monkeypatch, "files", str(ws))

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "AGENTS.md\t6 chars"
        assert "HEARTBEAT.md\tmissing" in lines

    def test_files_with_session_filter(self, monkeypatch, capsys, tmp_path: Path):
        ws = tmp_path / "ws"
        ws.mkdir()
        monkeypatch.delenv("OPENCLAW_PROFILE", raising=False)

        _run(monkeypatch, "files", str(ws), "--session", "agent:main:cron:job")

        out = capsys.readouterr().out
        assert "AGENTS.md" in out
        assert "HEARTBEAT.md" not in out

    def test_status_reports_legacy_without_writing(
        self, monkeypatch, capsys, tmp_path: Path
    ):
        ws = tmp_path / "ws"
        (ws / ".git").mkdir(parents=True)

        _run(monkeypatch, "status", str(ws))

        out = capsys.readouterr().out
        assert "Status:    legacy" in out
        assert "Evidence:  vcs_metadata" in out
        assert not (ws / ".openclaw").exists()

    def test_status_missing_workspace(self, monkeypatch, capsys, tmp_path: Path):
        _run(monkeypatch, "status", str(tmp_path / "nope"))
        assert "does not exist" in capsys.readouterr().out

    def test_os_error_exits_1(self, monkeypatch, capsys, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "init", str(blocker / "ws"))
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_files_with_non_utf8_document(self, monkeypatch, capsys, tmp_path: Path):
        ws = tmp_path / "ws"
        ws.mkdir()
        (ws / "USER.md").write_bytes(b"Jos\xe9")
        monkeypatch.delenv("OPENCLAW_PROFILE", raising=False)

        _run(monkeypatch, "files", str(ws))

        assert "USER.md\t4 chars" in capsys.readouterr().out
