from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.command import run_cmd
from ..lib.docker import docker_pull, docker_run, kali_container_spec
from ..lib.env import KALI_IMAGE
from ..lib.pkg import apt_install, apt_update
from ..lib.systemd import systemctl

logger = logging.getLogger(__name__)


class DockerKaliStep:
    """Docker engine plus a long-running Kali container.

    The docker group membership only applies to new logins; every docker
    command here goes through sudo so the run does not depend on it.
    """

    step_id = "50_docker_kali"
    title = "Kali Linux Docker integration"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)

        ctx.run(apt_update)
        ctx.run(apt_install, ["docker.io"])

        # The docker.io package usually creates the group already.
        ctx.run(run_cmd, ["groupadd", "docker"], sudo=True, check=False)
        ctx.run(run_cmd, ["usermod", "-aG", "docker", ctx.user], sudo=True)

        ctx.run(systemctl, "enable", "--now", "docker")

        ctx.run(docker_pull, KALI_IMAGE)

        spec = kali_container_spec(ctx.display)
        ctx.run(docker_run, spec)

        ctx.decide("docker_group_user", ctx.user)
        ctx.decide("kali_container", {"name": spec.name, "image": spec.image, "display": ctx.display})
        logger.info("Kali container %s started from %s", spec.name, spec.image)
        return state
