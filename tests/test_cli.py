"""Tests for the quotable command line."""

from __future__ import annotations

import io
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from quotable.quotable import make_formatter, run

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def cli(tmp_path):
    """Run the CLI in-process and return (exit_code, stdout)."""

    def _run(*argv: str, stdin: bytes = b"", cwd: Path | None = None) -> tuple[int, str]:
        out = io.StringIO()
        code = run(list(argv), stdin=io.BytesIO(stdin), stdout=out, cwd=cwd or tmp_path)
        return code, out.getvalue()

    return _run


class TestRun:
    def test_demo_without_arguments(self, cli):
        assert cli() == (0, "'hi'\\''there'\\''yall'\n")

    def test_shell_is_default(self, cli):
        assert cli("it's", "a b") == (0, "'it'\\''s'\n'a b'\n")

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            ("shell", "'a\"b'\n"),
            ("c", 'a\\"b\n'),
            ("hex", "612262\n"),
            ("ascii", '"a\\"b"\n'),
        ],
    )
    def test_formats(self, cli, fmt, expected):
        assert cli("-f", fmt, 'a"b') == (0, expected)

    def test_separator_flag(self, cli):
        assert cli("-s", ",", "-f", "hex", "a", "b") == (0, "61,62,")

    def test_separator_escape(self, cli):
        assert cli("-s", "\\s", "x", "y") == (0, "'x' 'y' ")

    def test_stdin_bytes(self, cli):
        assert cli("-f", "c", "--stdin", stdin=b"a\nb\xff") == (0, "a\\nb\\xff\n")

    def test_stdin_after_arguments(self, cli):
        assert cli("-f", "hex", "--stdin", "a", stdin=b"b") == (0, "61\n62\n")

    def test_config_supplies_defaults(self, cli, tmp_path):
        (tmp_path / ".quotable").write_text("set format ascii\nset separator \\s\n")
        assert cli("x") == (0, '"x" ')

    def test_flags_override_config(self, cli, tmp_path):
        (tmp_path / ".quotable").write_text("set format ascii\n")
        assert cli("-f", "hex", "x") == (0, "78\n")

    def test_invalid_config(self, cli, tmp_path, capsys):
        (tmp_path / ".quotable").write_text("set format yaml\n")
        code, out = cli("x")
        assert code == 1
        assert out == ""
        assert "invalid config" in capsys.readouterr().err

    def test_verbose(self, cli, tmp_path, capsys):
        (tmp_path / ".quotable").write_text("set verbose\n")
        assert cli("x") == (0, "'x'\n")
        assert "rendered 1 item(s) as shell" in capsys.readouterr().err

    def test_write_failure(self, tmp_path, capsys):
        out = io.StringIO()
        out.close()
        assert run(["x"], stdout=out, cwd=tmp_path) == 1
        assert "write failed" in capsys.readouterr().err

    def test_logs_render(self, cli, tmp_path):
        log_path = tmp_path / "quotable.log"
        (tmp_path / ".quotable").write_text(f"set log {log_path}\n")
        assert cli("-f", "hex", "a", "b")[0] == 0
        entry = json.loads(log_path.read_text().splitlines()[-1])
        assert entry["event"] == "rendered"
        assert entry["format"] == "hex"
        assert entry["items"] == 2

    def test_undecodable_argv_bytes(self, cli):
        assert cli("-f", "hex", "\udcff") == (0, "ff\n")
        assert cli("-f", "ascii", "a\udcff") == (0, "\"a\\xff\"\n")
        assert cli("a\udcff") == (0, "'a\\xff'\n")

    def test_unwritable_log_path(self, cli, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        (tmp_path / ".quotable").write_text(f"set log {blocker / 'quotable.log'}\n")
        assert cli("x") == (1, "")
        assert "cannot open log" in capsys.readouterr().err

    def test_demo_write_failure(self, tmp_path, capsys):
        out = io.StringIO()
        out.close()
        assert run([], stdout=out, cwd=tmp_path) == 1
        assert "write failed" in capsys.readouterr().err

    def test_unknown_format_is_usage_error(self, cli):
        with pytest.raises(SystemExit) as exc:
            cli("-f", "base64", "x")
        assert exc.value.code == 2


class TestMakeFormatter:
    def test_shell_decodes_bytes(self):
        assert str(make_formatter("shell", b"it's")) == "'it'\\''s'"

    def test_byte_formatters_take_text(self):
        assert str(make_formatter("hex", "é")) == "c3a9"


class TestEntryPoint:
    def test_module_runs(self, tmp_path):
        env = {**os.environ, "PYTHONPATH": str(REPO_ROOT / "src"), "HOME": str(tmp_path)}
        env.pop("QUOTABLE_CONFIG", None)
        result = subprocess.run(
            [sys.executable, "-m", "quotable.quotable", "-f", "hex", "hello"],
            capture_output=True,
            cwd=tmp_path,
            env=env,
            timeout=10,
        )
        assert result.returncode == 0
        assert result.stdout == b"68656c6c6f\n"
