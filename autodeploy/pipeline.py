from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single provisioning section."""

    step_id: str
    title: str

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]
    skipped_steps: List[str]
    failed_steps: List[str]


def validate_selection(
    steps: Sequence[Step],
    *,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    skip: Iterable[str] = (),
) -> None:
    """Reject unknown step ids and a stop_after that runs before start_at."""

    order = [s.step_id for s in steps]
    unknown = sorted({i for i in [start_at, stop_after, *skip] if i is not None and i not in order})
    if unknown:
        raise ValueError(f"Unknown step id(s): {', '.join(unknown)} (known: {', '.join(order)})")

    if start_at is not None and stop_after is not None and order.index(stop_after) < order.index(start_at):
        raise ValueError(f"stop_after {stop_after} comes before start_at {start_at}")


def run_pipeline(
    *,
    state: Dict[str, Any],
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    skip: Iterable[str] = (),
) -> PipelineResult:
    """Run steps strictly in order.

    A step that raises is logged and recorded, and the next step still runs,
    unless config.strict is set, in which case the exception propagates.
    """

    skip_set = set(skip)
    validate_selection(steps, start_at=start_at, stop_after=stop_after, skip=skip_set)

    strict = bool((state.get("config") or {}).get("strict", False))
    exe = state.setdefault("execution", {})

    ran: List[str] = []
    skipped: List[str] = []
    failed: List[str] = []

    started = start_at is None

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        exe["current_step"] = step.step_id

        if step.step_id in skip_set:
            logger.info("Skipping step %s (requested)", step.step_id)
            skipped.append(step.step_id)
        else:
            logger.info("Running step %s: %s", step.step_id, step.title)
            try:
                state = step.run(state)
            except Exception as e:
                if strict:
                    raise
                logger.exception("Step %s failed, continuing with the next step", step.step_id)
                exe.setdefault("errors", []).append({"step": step.step_id, "error": str(e)})
                failed.append(step.step_id)
            else:
                exe.setdefault("completed_steps", []).append(step.step_id)
                ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    exe["current_step"] = None
    exe["skipped_steps"] = skipped
    return PipelineResult(state=state, ran_steps=ran, skipped_steps=skipped, failed_steps=failed)
