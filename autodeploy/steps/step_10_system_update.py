from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.pkg import apt_autoremove, apt_update, apt_upgrade

logger = logging.getLogger(__name__)


class SystemUpdateStep:
    step_id = "10_system_update"
    title = "System update & cleanup"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)

        ctx.run(apt_update)
        ctx.run(apt_upgrade)
        ctx.run(apt_autoremove)

        logger.info("System packages updated")
        return state
