from __future__ import annotations

import logging
from pathlib import Path

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)

BACKGROUND_SCHEMA = "org.gnome.desktop.background"


def gsettings_set(schema: str, key: str, value: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["gsettings", "set", schema, key, value], check=check, dry_run=dry_run)


def set_wallpaper(image_path: str, *, check: bool = True, dry_run: bool = False) -> list[CmdResult]:
    """Point both the light and dark GNOME backgrounds at image_path."""

    uri = Path(image_path).absolute().as_uri()
    return [
        gsettings_set(BACKGROUND_SCHEMA, key, uri, check=check, dry_run=dry_run)
        for key in ("picture-uri", "picture-uri-dark")
    ]
