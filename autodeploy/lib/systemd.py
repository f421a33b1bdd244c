from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .command import CmdResult, run_cmd
from .files import write_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitFile:
    """A systemd unit as ordered sections of ordered key/value pairs."""

    name: str
    sections: List[Tuple[str, Dict[str, str]]]

    def render(self) -> str:
        blocks = []
        for section, entries in self.sections:
            lines = [f"[{section}]"] + [f"{k}={v}" for k, v in entries.items()]
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks) + "\n"


XHOST_UNIT = UnitFile(
    name="xhost.service",
    sections=[
        (
            "Unit",
            {
                "Description": "Autoriser root à accéder au serveur X",
                "After": "graphical-session.target",
                "PartOf": "graphical-session.target",
            },
        ),
        (
            "Service",
            {
                "Type": "oneshot",
                "Environment": "DISPLAY=:0",
                "ExecStart": "/usr/bin/xhost +si:localuser:root",
                "RemainAfterExit": "yes",
            },
        ),
        ("Install", {"WantedBy": "graphical-session.target"}),
    ],
)


def write_user_unit(unit_dir: str, unit: UnitFile, *, dry_run: bool = False) -> str:
    path = str(Path(unit_dir) / unit.name)
    write_file(path, unit.render(), dry_run=dry_run)
    return path


def systemctl_user(*args: str, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["systemctl", "--user", *args], check=check, dry_run=dry_run)


def systemctl(*args: str, check: bool = True, dry_run: bool = False) -> CmdResult:
    return run_cmd(["systemctl", *args], sudo=True, check=check, dry_run=dry_run)
