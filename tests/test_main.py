"""Tests for the autodeploy command line."""

import pytest

from autodeploy.main import build_steps, main, run


def write_config(tmp_path, body: str) -> str:
    p = tmp_path / "autodeploy.yaml"
    p.write_text(body, encoding="utf-8")
    return str(p)


def test_step_order() -> None:
    assert [s.step_id for s in build_steps()] == [
        "10_system_update",
        "20_remove_telemetry",
        "30_shell_setup",
        "40_desktop_setup",
        "50_docker_kali",
        "60_xhost_unit",
        "70_kali_wrapper",
        "80_kali_tools",
    ]


def test_list_steps(capsys) -> None:
    assert main(["--list-steps"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "10_system_update\tSystem update & cleanup"
    assert len(out) == 8


def test_unknown_step_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--start-at", "99_nope"])

    assert exc_info.value.code == 2
    assert "Unknown step id" in capsys.readouterr().err


def test_dry_run_executes_nothing(fake_run, tmp_path) -> None:
    cfg = write_config(tmp_path, f"home: {tmp_path / 'home'}\nuser: alice\n")

    code = main(["--config", cfg, "--log", str(tmp_path / "run.log"), "--dry-run"])

    assert code == 0
    assert fake_run.calls == []
    log = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert "CMD sudo apt update" in log
    assert "CMD sudo docker pull kalilinux/kali-rolling" in log


def test_run_records_summary(fake_run, tmp_path) -> None:
    state = run(
        log_path=str(tmp_path / "run.log"),
        start_at="60_xhost_unit",
        stop_after="70_kali_wrapper",
        overrides={"home": str(tmp_path / "home"), "user": "alice"},
    )

    assert state["execution"]["summary"] == {
        "ran_steps": ["60_xhost_unit", "70_kali_wrapper"],
        "skipped_steps": [],
        "failed_steps": [],
        "error_count": 0,
    }
    assert (tmp_path / "home/.config/systemd/user/xhost.service").exists()


def test_failures_give_exit_status_1(fake_run, tmp_path) -> None:
    fake_run.respond(["sudo", "apt"], returncode=100)
    cfg = write_config(tmp_path, f"home: {tmp_path / 'home'}\nuser: alice\n")

    code = main(["--config", cfg, "--log", str(tmp_path / "run.log"), "--start-at", "10_system_update", "--stop-after", "10_system_update"])

    assert code == 1
    # Every command still ran.
    assert len(fake_run.calls) == 3


def test_strict_stops_and_returns_1(fake_run, tmp_path) -> None:
    fake_run.respond(["sudo", "apt", "update"], returncode=100)
    cfg = write_config(tmp_path, f"home: {tmp_path / 'home'}\nuser: alice\n")

    code = main(["--config", cfg, "--log", str(tmp_path / "run.log"), "--strict"])

    assert code == 1
    assert fake_run.calls == [["sudo", "apt", "update"]]


def test_config_skip_steps(fake_run, tmp_path) -> None:
    cfg = write_config(
        tmp_path,
        f"home: {tmp_path / 'home'}\nuser: alice\nskip_steps: [10_system_update, 20_remove_telemetry]\n",
    )

    state = run(config_path=cfg, log_path=str(tmp_path / "run.log"), stop_after="20_remove_telemetry")

    assert fake_run.calls == []
    assert state["execution"]["summary"]["skipped_steps"] == ["10_system_update", "20_remove_telemetry"]


def test_reversed_range_is_a_usage_error(fake_run, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--start-at", "60_xhost_unit", "--stop-after", "30_shell_setup"])

    assert exc_info.value.code == 2
    assert "stop_after 30_shell_setup comes before start_at 60_xhost_unit" in capsys.readouterr().err
    assert fake_run.calls == []
