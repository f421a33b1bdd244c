from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.command import run_cmd
from ..lib.env import WRAPPER_PATH
from ..lib.wrapper import render_wrapper_script

logger = logging.getLogger(__name__)


class KaliWrapperStep:
    step_id = "70_kali_wrapper"
    title = "Kali convenience script"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)

        # tee -a: a second run appends a second copy of the script.
        ctx.run(run_cmd, ["tee", "-a", WRAPPER_PATH], sudo=True, input_text=render_wrapper_script())
        ctx.run(run_cmd, ["chmod", "+x", WRAPPER_PATH], sudo=True)

        ctx.decide("wrapper_path", WRAPPER_PATH)
        logger.info("Installed wrapper %s", WRAPPER_PATH)
        return state
