from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    UNKNOWN = "unknown"


class Attempt(str, Enum):
    DIRECT = "direct"
    RETRIED = "retried"


@dataclass(frozen=True)
class TaskStatus:
    outcome: Outcome
    attempt: Attempt

    @staticmethod
    def from_token(token: str) -> "TaskStatus":
        """Classify a raw result token such as ``OK`` or ``FAILED_RETRY``.

        ``OK`` wins over ``FAILED`` when a token carries both, so every token
        lands in exactly one bucket.
        """

        if "OK" in token:
            outcome = Outcome.SUCCESS
        elif "FAILED" in token:
            outcome = Outcome.FAILURE
        else:
            outcome = Outcome.UNKNOWN
        attempt = Attempt.RETRIED if "RETRY" in token else Attempt.DIRECT
        return TaskStatus(outcome=outcome, attempt=attempt)


@dataclass(frozen=True)
class VMLifetime:
    id: str
    started: float
    finished: float


@dataclass(frozen=True)
class WorkflowMeta:
    id: str
    priority: int


@dataclass(frozen=True)
class TaskExecution:
    workflow_id: str
    task_id: str
    vm_id: str
    started: float
    finished: float
    result: str
    status: TaskStatus


@dataclass(frozen=True)
class TransferExecution:
    id: str
    vm_id: str
    started: float
    finished: float
    direction: str  # "UPLOAD" | "DOWNLOAD"; other tokens are kept but not plotted


@dataclass(frozen=True)
class ParsedLog:
    vms: dict[str, VMLifetime]
    workflows: dict[str, WorkflowMeta]
    # File order matters: it drives draw and legend order.
    tasks: tuple[TaskExecution, ...]
    transfers: tuple[TransferExecution, ...]
