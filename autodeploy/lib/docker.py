from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .command import CmdResult, run_cmd
from .env import HOST_MOUNT, KALI_CONTAINER, KALI_IMAGE, X11_SOCKET

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerSpec:
    """A long-running detached container.

    volumes map host path -> container path, in insertion order.
    """

    name: str
    image: str
    command: List[str]
    volumes: Dict[str, str] = field(default_factory=dict)
    env: Dict[str, str] = field(default_factory=dict)
    network: str | None = None
    restart: str | None = None

    def run_argv(self) -> list[str]:
        argv = ["docker", "run", "-d", "--name", self.name]
        for host, target in self.volumes.items():
            argv += ["-v", f"{host}:{target}"]
        if self.network:
            argv += ["--network", self.network]
        for k, v in self.env.items():
            argv += ["-e", f"{k}={v}"]
        if self.restart:
            argv += ["--restart", self.restart]
        return [*argv, self.image, *self.command]


def kali_container_spec(display: str) -> ContainerSpec:
    """Kali toolbox: whole host filesystem under /mnt/host, X11 socket, host networking."""

    return ContainerSpec(
        name=KALI_CONTAINER,
        image=KALI_IMAGE,
        # Keeps the container alive with nothing to do.
        command=["tail", "-f", "/dev/null"],
        volumes={"/": HOST_MOUNT, X11_SOCKET: X11_SOCKET},
        env={"DISPLAY": display},
        network="host",
        restart="unless-stopped",
    )


def docker_pull(image: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["docker", "pull", image], sudo=True, check=check, dry_run=dry_run)


def docker_run(spec: ContainerSpec, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    # A second run with the same name fails: the container already exists.
    return run_cmd(spec.run_argv(), sudo=True, check=check, dry_run=dry_run)


def docker_exec(
    container: str,
    argv: Sequence[str],
    *,
    check: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run argv inside a running container with stdin kept open."""

    return run_cmd(["docker", "exec", "-i", container, *argv], sudo=True, check=check, dry_run=dry_run)
