from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.docker import docker_exec
from ..lib.env import KALI_CONTAINER

logger = logging.getLogger(__name__)

KALI_PACKAGES = ["kali-tools-top10", "x11-apps"]


def container_setup_script() -> str:
    return f"apt update && apt upgrade -y && apt install {' '.join(KALI_PACKAGES)} -y"


class KaliToolsStep:
    step_id = "80_kali_tools"
    title = "Setup Kali container environment"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)

        ctx.run(docker_exec, KALI_CONTAINER, ["bash", "-c", container_setup_script()])

        ctx.decide("kali_packages", KALI_PACKAGES)
        logger.info("Kali tools installed in container %s", KALI_CONTAINER)
        return state
