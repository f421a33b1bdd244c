from __future__ import annotations

import getpass
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load the optional YAML config; no path means an empty config."""

    if not path:
        return {}

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("config must be YAML (.yaml/.yml)")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config must contain a mapping/object, got {type(raw).__name__}")

    skip = raw.get("skip_steps")
    if skip is not None and not isinstance(skip, list):
        raise ValueError("config.skip_steps must be a list of step ids")

    return raw


def ensure_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Fill required keys with defaults from the environment (without overriding user values)."""

    cfg.setdefault("dry_run", False)
    cfg.setdefault("strict", False)
    cfg.setdefault("home", os.environ.get("HOME") or str(Path.home()))
    cfg.setdefault("user", os.environ.get("USER") or getpass.getuser())
    # The xhost unit pins DISPLAY=:0 as well.
    cfg.setdefault("display", os.environ.get("DISPLAY") or ":0")
    cfg.setdefault("skip_steps", [])
    return cfg
