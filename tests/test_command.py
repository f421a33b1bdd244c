"""Tests for the subprocess wrapper."""

import logging

import pytest

from autodeploy.lib.command import CommandError, fmt_argv, run_cmd


def test_run_cmd_returns_captured_output(fake_run) -> None:
    fake_run.respond(["echo"], stdout="hi\n")

    result = run_cmd(["echo", "hi"], capture=True)

    assert result.ok
    assert result.stdout == "hi\n"
    assert fake_run.calls == [["echo", "hi"]]


def test_sudo_prefixes_argv(fake_run) -> None:
    result = run_cmd(["apt", "update"], sudo=True)

    assert fake_run.calls == [["sudo", "apt", "update"]]
    assert result.argv == ["sudo", "apt", "update"]


def test_input_text_is_passed_to_stdin(fake_run) -> None:
    run_cmd(["fish", "-c", "source /dev/stdin"], input_text="echo installer")

    assert fake_run.inputs == ["echo installer"]


def test_dry_run_does_not_execute(fake_run, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="autodeploy.lib.command"):
        result = run_cmd(["rm", "-rf", "/tmp/x y"], dry_run=True)

    assert fake_run.calls == []
    assert result.ok
    assert "CMD rm -rf '/tmp/x y'" in caplog.text


def test_failure_raises_command_error_when_checked(fake_run) -> None:
    fake_run.respond(["git", "clone"], returncode=128, stderr="destination path already exists")

    with pytest.raises(CommandError) as exc_info:
        run_cmd(["git", "clone", "https://example.invalid/repo", "dest"], capture=True)

    assert exc_info.value.result.returncode == 128
    assert "Command failed (128)" in str(exc_info.value)
    assert "destination path already exists" in str(exc_info.value)


def test_failure_is_logged_when_unchecked(fake_run, caplog) -> None:
    fake_run.respond(["false"], returncode=1)

    with caplog.at_level(logging.WARNING, logger="autodeploy.lib.command"):
        result = run_cmd(["false"], check=False)

    assert not result.ok
    assert "Command failed (1), continuing: false" in caplog.text


def test_missing_binary_reports_127(monkeypatch) -> None:
    def _missing(*args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "nosuchtool")

    monkeypatch.setattr("autodeploy.lib.command.subprocess.run", _missing)

    result = run_cmd(["nosuchtool"], check=False)

    assert result.returncode == 127
    assert "No such file or directory" in result.stderr


def test_fmt_argv_quotes_arguments() -> None:
    assert fmt_argv(["fish", "-c", "omf install chain; exit"]) == "fish -c 'omf install chain; exit'"


def test_real_subprocess_roundtrip() -> None:
    # No fake here: `true` exists on any system running these tests.
    result = run_cmd(["true"])
    assert result.returncode == 0


def test_output_is_not_captured_by_default(fake_run) -> None:
    fake_run.respond(["apt"], stdout="Reading package lists...\n")

    result = run_cmd(["apt", "update"])

    assert result.stdout == ""


def test_captured_stderr_of_failure_is_logged_as_warning(fake_run, caplog) -> None:
    fake_run.respond(["curl"], returncode=22, stderr="curl: (22) The requested URL returned error: 404")

    with caplog.at_level(logging.WARNING, logger="autodeploy.lib.command"):
        run_cmd(["curl", "-fsSL", "https://example.invalid/x"], capture=True, check=False)

    assert "STDERR curl: (22) The requested URL returned error: 404" in caplog.text


class TestTerminal:
    """Real subprocesses: what the tool prints must reach the terminal."""

    def test_failing_command_prompt_and_error_reach_terminal(self, capfd) -> None:
        script = "printf 'Password: ' >&2; printf 'E: Unable to locate package nope\\n' >&2; exit 100"

        result = run_cmd(["sh", "-c", script], check=False)

        out, err = capfd.readouterr()
        assert result.returncode == 100
        assert "Password:" in out + err
        assert "E: Unable to locate package nope" in out + err

    def test_stdout_reaches_terminal(self, capfd) -> None:
        run_cmd(["sh", "-c", "echo upgraded 3 packages"])

        out, _ = capfd.readouterr()
        assert "upgraded 3 packages" in out

    def test_captured_output_stays_off_terminal(self, capfd) -> None:
        result = run_cmd(["sh", "-c", "echo installer-body"], capture=True)

        out, _ = capfd.readouterr()
        assert result.stdout == "installer-body\n"
        assert "installer-body" not in out
