from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandError(RuntimeError):
    def __init__(self, result: CmdResult):
        self.result = result
        super().__init__(f"Command failed ({result.returncode}): {fmt_argv(result.argv)}\n{result.stderr}")


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    sudo: bool = False,
    check: bool = True,
    capture: bool = False,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - sudo prefixes the argv with ``sudo``.
    - The command shares the terminal (prompts, progress, errors) unless
      capture=True, for callers that consume stdout.
    - check=False logs a failure as a warning and returns the result.
    - dry_run logs but does not execute.
    """

    argv_list = ["sudo", *argv] if sudo else list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            input=input_text,
            text=True,
            stdout=pipe,
            stderr=pipe,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
        result = CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout or "", stderr=p.stderr or "")
    except FileNotFoundError as e:
        # Same code a shell reports for a missing binary.
        result = CmdResult(argv=argv_list, returncode=127, stdout="", stderr=str(e))

    if result.stdout:
        logger.debug("STDOUT %s", result.stdout.strip())

    if result.ok:
        if result.stderr:
            logger.debug("STDERR %s", result.stderr.strip())
        return result

    # Uncaptured stderr is already on the terminal.
    if result.stderr:
        logger.warning("STDERR %s", result.stderr.strip())
    if check:
        raise CommandError(result)
    logger.warning("Command failed (%s), continuing: %s", result.returncode, fmt_argv(argv_list))
    return result
