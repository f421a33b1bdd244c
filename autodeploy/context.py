from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .lib.command import CmdResult
from .lib.env import HomePaths


@dataclass
class StepContext:
    """A step's view of the run state.

    run() calls a lib function with the run's dry_run/check options and records
    any failed command under state["execution"]["errors"].
    """

    state: Dict[str, Any]
    step_id: str

    @classmethod
    def from_state(cls, state: Dict[str, Any], step_id: str) -> "StepContext":
        return cls(state=state, step_id=step_id)

    @property
    def cfg(self) -> Dict[str, Any]:
        return self.state.get("config") or {}

    @property
    def dry_run(self) -> bool:
        return bool(self.cfg.get("dry_run", False))

    @property
    def strict(self) -> bool:
        return bool(self.cfg.get("strict", False))

    @property
    def home(self) -> str:
        return str(self.cfg["home"])

    @property
    def user(self) -> str:
        return str(self.cfg["user"])

    @property
    def display(self) -> str:
        return str(self.cfg.get("display") or ":0")

    @property
    def paths(self) -> HomePaths:
        return HomePaths(home=self.home)

    def run(self, fn: Callable[..., Any], *args: Any, check: Optional[bool] = None, **kwargs: Any) -> Any:
        """Call fn(*args, check=..., dry_run=..., **kwargs) and record failures.

        check=None uses the run's strict setting. check=False marks a command
        whose failure is expected (a group that may already exist): it never
        raises and is not recorded.
        """

        if check is False:
            return fn(*args, check=False, dry_run=self.dry_run, **kwargs)

        result = fn(*args, check=self.strict, dry_run=self.dry_run, **kwargs)
        for r in _results(result):
            if not r.ok:
                self.record_failure(r)
        return result

    def record_failure(self, result: CmdResult) -> None:
        errors = self.state.setdefault("execution", {}).setdefault("errors", [])
        errors.append(
            {
                "step": self.step_id,
                "argv": result.argv,
                "returncode": result.returncode,
                "error": result.stderr.strip(),
            }
        )

    def decide(self, key: str, value: Any) -> None:
        self.state.setdefault("execution", {}).setdefault("decisions", {})[key] = value


def _results(result: Any) -> List[CmdResult]:
    if isinstance(result, CmdResult):
        return [result]
    if isinstance(result, list):
        return [r for r in result if isinstance(r, CmdResult)]
    return []
