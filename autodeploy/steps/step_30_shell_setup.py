from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import StepContext
from ..lib.command import run_cmd
from ..lib.env import CHAIN_THEME_REPO, FISH_PATH, OMF_INSTALL_URL
from ..lib.fetch import curl_text, git_clone
from ..lib.files import append_file, remove_tree
from ..lib.pkg import apt_install, apt_update

logger = logging.getLogger(__name__)

SHELL_PACKAGES = ["fish", "git", "curl"]


def fish(script: str, **kwargs: Any):
    return run_cmd(["fish", "-c", script], **kwargs)


class ShellSetupStep:
    """Fish as the login shell, Oh My Fish, and the custom chain theme."""

    step_id = "30_shell_setup"
    title = "Install and configure Fish + Oh My Fish"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ctx = StepContext.from_state(state, self.step_id)
        paths = ctx.paths

        ctx.run(apt_update)
        ctx.run(apt_install, SHELL_PACKAGES)

        # The installer script is piped to fish the way `curl ... | fish` does.
        installer = ctx.run(curl_text, OMF_INSTALL_URL)
        if installer.ok:
            ctx.run(fish, "source /dev/stdin --noninteractive", input_text=installer.stdout)

        ctx.run(fish, "omf install chain; exit")

        # Replace the stock chain theme with the custom one.
        remove_tree(paths.omf_chain_theme, dry_run=ctx.dry_run)
        # Fails on a re-run when the stock theme was not reinstalled in between.
        ctx.run(git_clone, CHAIN_THEME_REPO, paths.omf_chain_theme)
        ctx.run(fish, "chain.defaults; exit")

        append_file(paths.fish_config, "set fish_greeting\n", dry_run=ctx.dry_run)

        ctx.run(run_cmd, ["chsh", "-s", FISH_PATH])

        ctx.decide("login_shell", FISH_PATH)
        logger.info("Fish shell configured (theme at %s)", paths.omf_chain_theme)
        return state
