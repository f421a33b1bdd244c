from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.pkg import apt_autoremove, apt_purge, apt_remove, snap_remove

logger = logging.getLogger(__name__)

REMOVE_PACKAGES = ["ubuntu-report"]
# Popularity contest, crash reporting and error reporting.
PURGE_PACKAGES = ["popularity-contest", "apport", "whoopsie"]


class RemoveTelemetryStep:
    step_id = "20_remove_telemetry"
    title = "Remove telemetry and unwanted packages"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)

        ctx.run(apt_remove, REMOVE_PACKAGES)
        ctx.run(apt_purge, PURGE_PACKAGES)

        # Snap Store first, then the snap daemon itself.
        ctx.run(snap_remove, "snap-store")
        ctx.run(apt_purge, ["snapd"])

        ctx.run(apt_autoremove)

        ctx.decide("removed_packages", [*REMOVE_PACKAGES, *PURGE_PACKAGES, "snap-store", "snapd"])
        logger.info("Telemetry packages removed")
        return state
