from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_dirs(*paths: str, dry_run: bool = False) -> None:
    for p in paths:
        if dry_run:
            logger.info("Would create directory %s", p)
            continue
        Path(p).mkdir(parents=True, exist_ok=True)


def write_file(path: str, contents: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would write %s", str(p))
        return
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(contents, encoding="utf-8")
    logger.info("Wrote %s", str(p))


def append_file(path: str, contents: str, *, dry_run: bool = False) -> None:
    """Append to path, creating it (and its parents) when missing.

    Appending twice leaves the contents in the file twice.
    """

    p = Path(path)
    if dry_run:
        logger.info("Would append to %s", str(p))
        return
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        f.write(contents)
    logger.info("Appended to %s", str(p))


def remove_tree(path: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would remove %s", str(p))
        return
    if p.is_dir() and not p.is_symlink():
        shutil.rmtree(p)
    elif p.exists() or p.is_symlink():
        p.unlink()
    else:
        return
    logger.info("Removed %s", str(p))
