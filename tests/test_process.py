"""Tests for the external process invoker."""

import logging
import os
import sys
from unittest.mock import patch

import pytest

from tenex_tasks.errors import ProcessError
from tenex_tasks.process import COMMAND_NOT_FOUND, payload_file, run_command, run_passthrough


class TestPayloadFile:
    def test_file_holds_payload_and_is_removed(self):
        with payload_file("hello prompt") as path:
            assert os.path.exists(path)
            with open(path, encoding="utf-8") as f:
                assert f.read() == "hello prompt"

        assert not os.path.exists(path)

    def test_removed_when_block_raises(self):
        with pytest.raises(RuntimeError):
            with payload_file("x") as path:
                raise RuntimeError("boom")

        assert not os.path.exists(path)

    def test_names_are_unique(self):
        with payload_file("a") as first, payload_file("b") as second:
            assert first != second

    def test_failed_removal_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tenex_tasks.process"):
            with payload_file("x") as path:
                os.unlink(path)

        assert "Could not delete temporary file" in caplog.text


class TestRunCommand:
    def test_captures_trimmed_stdout(self):
        result = run_command(sys.executable, ["-c", "print('  hi  ')"])

        assert result.ok
        assert result.stdout == "hi"

    def test_pipes_payload_to_stdin(self):
        result = run_command(
            sys.executable,
            ["-c", "import sys; print(sys.stdin.read().upper())"],
            payload="shipyard",
        )

        assert result.stdout == "SHIPYARD"

    def test_stderr_is_logged_not_fatal(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tenex_tasks.process"):
            result = run_command(
                sys.executable,
                ["-c", "import sys; sys.stderr.write('pulling manifest'); print('ok')"],
            )

        assert result.stdout == "ok"
        assert "pulling manifest" in caplog.text

    def test_nonzero_exit_is_returned(self):
        result = run_command(sys.executable, ["-c", "import sys; sys.exit(3)"])

        assert not result.ok
        assert result.returncode == 3

    def test_missing_command_raises(self):
        with pytest.raises(ProcessError, match="Command not found"):
            run_command("definitely-not-a-real-command-xyz")

    def test_undecodable_output_is_replaced(self):
        result = run_command(sys.executable, ["-c", "import sys; sys.stdout.buffer.write(b'ok \\xff\\xfe')"])

        assert result.stdout.startswith("ok ")
        assert "\ufffd" in result.stdout

    def test_missing_command_still_removes_payload_file(self, tmp_path):
        with patch("tempfile.tempdir", str(tmp_path)):
            with pytest.raises(ProcessError):
                run_command("definitely-not-a-real-command-xyz", ["run", "m"], payload="prompt")

        assert list(tmp_path.iterdir()) == []

    def test_payload_file_removed_after_call(self, tmp_path):
        with patch("tempfile.tempdir", str(tmp_path)):
            run_command(sys.executable, ["-c", "pass"], payload="prompt")

        assert list(tmp_path.iterdir()) == []


class TestRunPassthrough:
    def test_returns_exit_code(self):
        assert run_passthrough(sys.executable, ["-c", "import sys; sys.exit(0)"]) == 0
        assert run_passthrough(sys.executable, ["-c", "import sys; sys.exit(4)"]) == 4

    def test_missing_command(self):
        assert run_passthrough("definitely-not-a-real-command-xyz") == COMMAND_NOT_FOUND
