from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.env import FONT_URL, WALLPAPER_URL
from ..lib.fetch import curl_to_file, wget_into
from ..lib.files import ensure_dirs
from ..lib.gsettings import set_wallpaper
from ..lib.pkg import apt_install, apt_update

logger = logging.getLogger(__name__)

# kitty (terminal), i3status (status bar), rofi (launcher),
# swaylock (screen lock), mako-notifier (notifications)
DESKTOP_PACKAGES = ["sway", "kitty", "i3status", "rofi", "swaylock", "mako-notifier"]


class DesktopSetupStep:
    step_id = "40_desktop_setup"
    title = "Install Sway desktop environment"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)
        paths = ctx.paths

        ctx.run(apt_update)
        ctx.run(apt_install, DESKTOP_PACKAGES)

        ensure_dirs(
            paths.sway_dir,
            paths.i3status_dir,
            paths.kitty_dir,
            paths.fonts_dir,
            paths.wallpaper_dir,
            dry_run=ctx.dry_run,
        )

        for url, dest in paths.dotfiles():
            ctx.run(curl_to_file, url, dest)

        ctx.run(wget_into, FONT_URL, paths.fonts_dir)
        ctx.run(wget_into, WALLPAPER_URL, paths.wallpaper_dir)

        ctx.run(set_wallpaper, paths.wallpaper)

        ctx.decide("wallpaper", paths.wallpaper)
        logger.info("Sway desktop installed with dotfiles")
        return state
