from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = str(Path("~/.cache/autodeploy/autodeploy.log").expanduser())
FALLBACK_LOG_NAME = "autodeploy.log"

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Tool output shares the terminal with these lines; keep them short.
CONSOLE_FORMAT = "[autodeploy] %(levelname)s %(message)s"

_CONSOLE_ATTR = "_autodeploy_console"
_PATH_ATTR = "_autodeploy_log_path"


def _open_log_file(log_path: str) -> tuple[logging.FileHandler, str]:
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8"), log_path
    except OSError:
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        return logging.FileHandler(fallback, encoding="utf-8"), fallback


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    verbose: bool = False,
    also_console: bool = True,
) -> str:
    """Send logs to a file and, optionally, the console.

    The file always gets DEBUG: every CMD line, captured output, and the
    stderr of failed captured commands. The console gets INFO, or DEBUG
    with verbose. Calling again only adjusts the console level.

    Returns the log file actually in use (./autodeploy.log when log_path
    cannot be opened).
    """

    root = logging.getLogger()
    console_level = logging.DEBUG if verbose else logging.INFO

    if hasattr(root, _PATH_ATTR):
        console: Optional[logging.Handler] = getattr(root, _CONSOLE_ATTR, None)
        if console is not None:
            console.setLevel(console_level)
        return getattr(root, _PATH_ATTR)

    root.setLevel(logging.DEBUG)

    file_handler, chosen_path = _open_log_file(log_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    root.addHandler(file_handler)

    console = None
    if also_console:
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        root.addHandler(console)

    setattr(root, _PATH_ATTR, chosen_path)
    setattr(root, _CONSOLE_ATTR, console)

    if chosen_path != log_path:
        logging.getLogger(__name__).warning("Cannot write %s, logging to %s", log_path, chosen_path)
    logging.getLogger(__name__).debug("Logging initialized (requested=%s, actual=%s)", log_path, chosen_path)
    return chosen_path
