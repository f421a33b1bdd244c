"""The `kali` wrapper: run commands inside the Kali container from the host.

Dispatch rules:
- no arguments: interactive bash in the container
- first argument -h/--help: print usage, exit 0, no container action
- anything else: forward all arguments verbatim as the command

The working directory inside the container is always /mnt/host + the host cwd,
which is where the host filesystem is mounted.

The installed wrapper is a bash script rendered by render_wrapper_script();
plan_invocation() is the same rule set in Python, used by the
autodeploy-kali console script.
"""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .env import HOST_MOUNT, KALI_CONTAINER

HELP_FLAGS = ("-h", "--help")
DEFAULT_SHELL = "bash"

USAGE = f"""Usage: kali [COMMAND] [ARGS...]

Wrapper for running commands inside the "{KALI_CONTAINER}" Docker container.

Options:
  -h, --help        Show this help message and exit

Behavior:
  If no arguments are provided:
    Launch an interactive Bash shell inside the container.

  If arguments are provided:
    Execute the given command inside the container with the current
    host working directory mounted as {HOST_MOUNT}.

Examples:
  kali                        # Start an interactive shell in the container
  kali ls -la                 # Run 'ls -la' inside the container
  kali python3 script.py      # Run a Python script inside the container
"""

_SCRIPT_TEMPLATE = """#!/bin/bash

show_help() {
    cat <<EOF
%(usage)sEOF
}

if [ $# -gt 0 ]; then
    case "$1" in
        -h|--help)
            show_help
            exit 0
            ;;
        *)
            docker exec -it -w "%(mount)s$(pwd)" %(container)s "$@"
            ;;
    esac
else
    docker exec -it -w "%(mount)s$(pwd)" %(container)s %(shell)s
fi
"""


@dataclass(frozen=True)
class WrapperPlan:
    """What one wrapper invocation does: print output, or run argv."""

    exit_code: int = 0
    output: str = ""
    argv: Optional[List[str]] = None


def container_workdir(cwd: str) -> str:
    return f"{HOST_MOUNT}{cwd}"


def exec_argv(cwd: str, command: Sequence[str]) -> list[str]:
    return ["docker", "exec", "-it", "-w", container_workdir(cwd), KALI_CONTAINER, *command]


def plan_invocation(args: Sequence[str], cwd: str) -> WrapperPlan:
    if not args:
        return WrapperPlan(argv=exec_argv(cwd, [DEFAULT_SHELL]))
    if args[0] in HELP_FLAGS:
        return WrapperPlan(exit_code=0, output=USAGE)
    return WrapperPlan(argv=exec_argv(cwd, args))


def render_wrapper_script() -> str:
    return _SCRIPT_TEMPLATE % {
        "usage": USAGE,
        "mount": HOST_MOUNT,
        "container": KALI_CONTAINER,
        "shell": DEFAULT_SHELL,
    }


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    plan = plan_invocation(args, os.getcwd())
    if plan.output:
        sys.stdout.write(plan.output)
    if plan.argv is None:
        return plan.exit_code
    try:
        return subprocess.call(plan.argv)
    except FileNotFoundError:
        sys.stderr.write(f"kali: {plan.argv[0]}: command not found\n")
        return 127
