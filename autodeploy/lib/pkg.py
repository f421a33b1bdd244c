from __future__ import annotations

import logging
from typing import Sequence

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


def apt_update(*, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["apt", "update"], sudo=True, check=check, dry_run=dry_run)


def apt_upgrade(*, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["apt", "upgrade", "-y"], sudo=True, check=check, dry_run=dry_run)


def apt_autoremove(*, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["apt", "autoremove", "-y"], sudo=True, check=check, dry_run=dry_run)


def _apt_packages(
    action: str,
    packages: Sequence[str],
    *,
    check: bool,
    dry_run: bool,
) -> CmdResult | None:
    if not packages:
        return None
    return run_cmd(["apt", action, *packages, "-y"], sudo=True, check=check, dry_run=dry_run)


def apt_install(packages: Sequence[str], *, check: bool = True, dry_run: bool = False) -> CmdResult | None:
    return _apt_packages("install", packages, check=check, dry_run=dry_run)


def apt_remove(packages: Sequence[str], *, check: bool = True, dry_run: bool = False) -> CmdResult | None:
    return _apt_packages("remove", packages, check=check, dry_run=dry_run)


def apt_purge(packages: Sequence[str], *, check: bool = True, dry_run: bool = False) -> CmdResult | None:
    """Remove packages together with their configuration files."""
    return _apt_packages("purge", packages, check=check, dry_run=dry_run)


def snap_remove(name: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    # snap has no assume-yes flag; removal never prompts.
    return run_cmd(["snap", "remove", name], sudo=True, check=check, dry_run=dry_run)
