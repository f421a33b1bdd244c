from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Iterable, Optional

from .config import ensure_defaults, load_config
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import run_pipeline, validate_selection
from .steps import (
    DesktopSetupStep,
    DockerKaliStep,
    KaliToolsStep,
    KaliWrapperStep,
    RemoveTelemetryStep,
    ShellSetupStep,
    SystemUpdateStep,
    XhostUnitStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        SystemUpdateStep(),
        RemoveTelemetryStep(),
        ShellSetupStep(),
        DesktopSetupStep(),
        DockerKaliStep(),
        XhostUnitStep(),
        KaliWrapperStep(),
        KaliToolsStep(),
    ]


def build_state(config: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "config": ensure_defaults(config),
        "execution": {
            "current_step": None,
            "completed_steps": [],
            "skipped_steps": [],
            "errors": [],
            "decisions": {},
        },
    }


def run(
    *,
    config_path: Optional[str] = None,
    log_path: str = DEFAULT_LOG_PATH,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    skip: Iterable[str] = (),
    overrides: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> Dict[str, Any]:
    """Provision the machine, section by section. Returns the in-memory run state."""

    actual_log_path = configure_logging(log_path=log_path, verbose=verbose)

    config = load_config(config_path)
    config.update(overrides or {})
    state = build_state(config)
    state["execution"]["log_path"] = actual_log_path

    cfg = state["config"]
    skip_steps = [*cfg.get("skip_steps", []), *skip]
    logger.info(
        "Provisioning home=%s user=%s dry_run=%s strict=%s",
        cfg["home"],
        cfg["user"],
        cfg["dry_run"],
        cfg["strict"],
    )

    try:
        result = run_pipeline(
            state=state,
            steps=build_steps(),
            start_at=start_at,
            stop_after=stop_after,
            skip=skip_steps,
        )
    except Exception as e:
        logger.exception("Provisioning failed")
        state["execution"]["errors"].append(
            {
                "step": state["execution"].get("current_step"),
                "error": str(e),
            }
        )
        raise

    state = result.state
    state["execution"]["summary"] = {
        "ran_steps": result.ran_steps,
        "skipped_steps": result.skipped_steps,
        "failed_steps": result.failed_steps,
        "error_count": len(state["execution"]["errors"]),
    }
    logger.info("Summary: %s", state["execution"]["summary"])
    return state


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="autodeploy", description="Provision an Ubuntu desktop with Fish, Sway and a Kali container.")
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to the provisioning log")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 30_shell_setup)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--skip", action="append", default=[], metavar="STEP", help="Skip step_id (repeatable)")
    p.add_argument("--dry-run", action="store_true", help="Log commands and writes without executing them")
    p.add_argument("--strict", action="store_true", help="Stop at the first failing command")
    p.add_argument("--list-steps", action="store_true", help="Print step ids and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Show DEBUG messages on the console (the log file always has them)")

    args = p.parse_args(argv)

    if args.list_steps:
        for step in build_steps():
            print(f"{step.step_id}\t{step.title}")
        return 0

    try:
        validate_selection(build_steps(), start_at=args.start_at, stop_after=args.stop_after, skip=args.skip)
    except ValueError as e:
        p.error(str(e))

    overrides: Dict[str, Any] = {}
    if args.dry_run:
        overrides["dry_run"] = True
    if args.strict:
        overrides["strict"] = True

    try:
        state = run(
            config_path=args.config,
            log_path=args.log,
            start_at=args.start_at,
            stop_after=args.stop_after,
            skip=args.skip,
            overrides=overrides,
            verbose=args.verbose,
        )
    except Exception:
        return 1

    return 1 if state["execution"]["errors"] else 0
