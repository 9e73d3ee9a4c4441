"""Tests for the go doc invocation."""

import subprocess
from unittest.mock import patch

import pytest

from gomark.godoc import get_go_doc
from gomark.utils.config import GoDocConfig
from gomark.utils.errors import GoDocError


def _completed(returncode: int, stdout: str) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(
        args=["go"], returncode=returncode, stdout=stdout
    )


class TestGetGoDoc:
    """Test running go doc through subprocess."""

    def test_returns_output(self):
        with patch("gomark.godoc.subprocess.run", return_value=_completed(0, "package x\n")) as run:
            assert get_go_doc("./pkg") == "package x\n"

        args, kwargs = run.call_args
        assert args[0] == ["go", "doc", "-all", "./pkg"]
        assert kwargs["stderr"] == subprocess.STDOUT
        assert kwargs["timeout"] is None

    def test_uses_configured_binary_and_timeout(self):
        config = GoDocConfig(go_binary="/usr/local/go/bin/go", timeout=5)
        with patch("gomark.godoc.subprocess.run", return_value=_completed(0, "")) as run:
            get_go_doc(".", config)

        args, kwargs = run.call_args
        assert args[0][0] == "/usr/local/go/bin/go"
        assert kwargs["timeout"] == 5

    def test_non_zero_exit_carries_output(self):
        output = "doc: no such package ./missing\n"
        with patch("gomark.godoc.subprocess.run", return_value=_completed(1, output)):
            with pytest.raises(GoDocError) as exc_info:
                get_go_doc("./missing")

        assert exc_info.value.output == output
        assert exc_info.value.message == 'error while running "go doc":\n' + output

    def test_missing_binary(self):
        with patch("gomark.godoc.subprocess.run", side_effect=FileNotFoundError("go")):
            with pytest.raises(GoDocError) as exc_info:
                get_go_doc()
        assert exc_info.value.recovery_hint

    def test_timeout(self):
        error = subprocess.TimeoutExpired(cmd="go", timeout=1)
        with patch("gomark.godoc.subprocess.run", side_effect=error):
            with pytest.raises(GoDocError):
                get_go_doc(".", GoDocConfig(timeout=1))
