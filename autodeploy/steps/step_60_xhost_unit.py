from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.files import ensure_dirs
from ..lib.systemd import XHOST_UNIT, systemctl_user, write_user_unit

logger = logging.getLogger(__name__)


class XhostUnitStep:
    """User unit that lets root (the Kali container) talk to the X server."""

    step_id = "60_xhost_unit"
    title = "Systemd user service for X11 access"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)
        unit_dir = ctx.paths.systemd_user_dir

        ensure_dirs(unit_dir, dry_run=ctx.dry_run)
        unit_path = write_user_unit(unit_dir, XHOST_UNIT, dry_run=ctx.dry_run)

        ctx.run(systemctl_user, "daemon-reload")
        ctx.run(systemctl_user, "enable", XHOST_UNIT.name)
        ctx.run(systemctl_user, "start", XHOST_UNIT.name)

        ctx.decide("xhost_unit", unit_path)
        logger.info("Installed and started %s", unit_path)
        return state
