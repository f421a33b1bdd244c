from __future__ import annotations

import logging

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


def curl_text(url: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    """Download url and return it in the result's stdout."""

    return run_cmd(["curl", "-fsSL", url], capture=True, check=check, dry_run=dry_run)


def curl_to_file(url: str, dest: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["curl", "-fsSL", "-o", dest, url], check=check, dry_run=dry_run)


def wget_into(url: str, directory: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    # wget keeps the remote file name; a second download becomes <name>.1
    return run_cmd(["wget", url, "-P", directory], check=check, dry_run=dry_run)


def git_clone(url: str, dest: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["git", "clone", url, dest], check=check, dry_run=dry_run)
