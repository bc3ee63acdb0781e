from __future__ import annotations

# The three chart views. Each builder returns specs in draw order; the
# provisioning series always comes first so task bars paint over it.

from collections import defaultdict
from typing import Callable

from ganttlab.series import (
    Chart,
    SeriesSpec,
    assemble_chart,
    task_series,
    transfer_series,
    vm_provisioning_series,
)
from ganttlab.styles import Color, LineType
from ganttlab.types import Attempt, Outcome, ParsedLog, TaskExecution

WORKFLOW_PALETTE: tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.ORANGE,
    Color.DARK_GREY,
    Color.BROWN,
)

_RESULT_BUCKETS: tuple[tuple[Outcome, Attempt, str, Color, LineType], ...] = (
    (Outcome.SUCCESS, Attempt.DIRECT, "Done", Color.GREEN, LineType.SOLID),
    (Outcome.FAILURE, Attempt.DIRECT, "Failed", Color.RED, LineType.SOLID),
    (Outcome.SUCCESS, Attempt.RETRIED, "Retry", Color.GREEN, LineType.DOTTED),
    (Outcome.FAILURE, Attempt.RETRIED, "Retry failed", Color.RED, LineType.DOTTED),
)


def result_view(log: ParsedLog) -> list[SeriesSpec]:
    specs = [vm_provisioning_series(log)]
    for outcome, attempt, title, color, line_type in _RESULT_BUCKETS:
        bucket = [
            t
            for t in log.tasks
            if t.status.outcome == outcome and t.status.attempt == attempt
        ]
        specs.append(task_series(bucket, title, color, line_type))
    return specs


def workflow_view(log: ParsedLog) -> list[SeriesSpec]:
    by_workflow: dict[str, list[TaskExecution]] = defaultdict(list)
    for t in log.tasks:
        by_workflow[t.workflow_id].append(t)

    specs = [vm_provisioning_series(log)]
    # Most recently declared workflow first.
    for i, wf in enumerate(reversed(list(log.workflows.values()))):
        color = WORKFLOW_PALETTE[i % len(WORKFLOW_PALETTE)]
        specs.append(
            task_series(by_workflow.get(wf.id, ()), f"{wf.id} ({wf.priority})", color)
        )
    return specs


def storage_view(log: ParsedLog) -> list[SeriesSpec]:
    return [
        vm_provisioning_series(log),
        task_series(log.tasks, "Computation", Color.DARK_GREY),
        transfer_series(
            (t for t in log.transfers if t.direction == "UPLOAD"), "Upload", Color.ORANGE
        ),
        transfer_series(
            (t for t in log.transfers if t.direction == "DOWNLOAD"),
            "Download",
            Color.GREEN,
        ),
    ]


MODES: dict[str, Callable[[ParsedLog], list[SeriesSpec]]] = {
    "results": result_view,
    "workflows": workflow_view,
    "storage": storage_view,
}


def build_chart(log: ParsedLog, mode: str) -> Chart:
    try:
        builder = MODES[mode]
    except KeyError:
        raise KeyError(f"Unknown chart mode: {mode!r}") from None
    return assemble_chart(mode, builder(log))
