import logging
import subprocess
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pytest

from autodeploy.main import build_state


@dataclass
class FakeSubprocess:
    """Stands in for subprocess.run and records every argv it is given."""

    calls: List[List[str]] = field(default_factory=list)
    inputs: List[Optional[str]] = field(default_factory=list)
    # argv prefix -> (returncode, stdout, stderr)
    responses: Dict[Tuple[str, ...], Tuple[int, str, str]] = field(default_factory=dict)

    def respond(self, prefix: List[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.responses[tuple(prefix)] = (returncode, stdout, stderr)

    def __call__(self, argv, input=None, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        self.inputs.append(input)
        returncode, stdout, stderr = 0, "", ""
        for prefix, response in self.responses.items():
            if tuple(argv[: len(prefix)]) == prefix:
                returncode, stdout, stderr = response
        # Output only comes back when it was piped; otherwise it went to the terminal.
        if kwargs.get("stdout") is not subprocess.PIPE:
            stdout = None
        if kwargs.get("stderr") is not subprocess.PIPE:
            stderr = None
        return subprocess.CompletedProcess(argv, returncode, stdout, stderr)


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeSubprocess()
    monkeypatch.setattr("autodeploy.lib.command.subprocess.run", fake)
    return fake


@pytest.fixture
def state(tmp_path):
    return build_state({"home": str(tmp_path / "home"), "user": "alice", "display": ":1"})


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ("_autodeploy_console", "_autodeploy_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)
