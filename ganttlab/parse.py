from __future__ import annotations

"""Reader for the positional scheduling log.

The log is four counted sections, in this order:

    <N_vm>        then N_vm lines       `vm_id started finished`
    <N_wf>        then N_wf lines       `wf_id priority`
    <N_task>      then N_task lines     `wf_id task_id vm_id started finished result`
    <N_transfer>  then N_transfer lines `transfer_id vm_id started finished direction`

Anything after the last declared transfer is ignored.
"""

import logging
import math
import re
from enum import Enum
from pathlib import Path
from typing import Callable

from ganttlab.types import (
    ParsedLog,
    TaskExecution,
    TaskStatus,
    TransferExecution,
    VMLifetime,
    WorkflowMeta,
)

logger = logging.getLogger(__name__)

_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_COUNT_RE = re.compile(r"\d+")


class MalformedLogError(ValueError):
    def __init__(
        self, message: str, *, line_no: int | None = None, section: str | None = None
    ) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.section = section


class NumericPolicy(str, Enum):
    # Unparseable numbers fall back to their numeric prefix, or 0.
    PERMISSIVE = "permissive"
    STRICT = "strict"


class _LineCursor:
    def __init__(self, text: str) -> None:
        # Only "\n" ends a line; "\r" and other whitespace go with the fields.
        self._lines = text.split("\n")
        while self._lines and not self._lines[-1]:
            self._lines.pop()
        self._pos = 0

    @property
    def line_no(self) -> int:
        """1-based number of the line most recently taken."""

        return self._pos

    def take(self, section: str) -> list[str]:
        if self._pos >= len(self._lines):
            raise MalformedLogError(
                f"line {self._pos + 1}: log ends inside the {section} section",
                line_no=self._pos + 1,
                section=section,
            )
        line = self._lines[self._pos]
        self._pos += 1
        return line.split()


class _NumberReader:
    def __init__(self, policy: NumericPolicy) -> None:
        self._policy = policy

    def _coerce(
        self,
        token: str,
        *,
        kind: str,
        prefix: re.Pattern[str],
        convert: Callable[[str], float],
        line_no: int,
        section: str,
    ) -> float:
        if self._policy == NumericPolicy.STRICT:
            raise MalformedLogError(
                f"line {line_no}: expected {kind} in {section} record, got {token!r}",
                line_no=line_no,
                section=section,
            )
        m = prefix.match(token)
        value = convert(m.group()) if m else 0
        if not math.isfinite(value):
            value = 0
        logger.warning(
            "line %d: coerced non-numeric %s field %r in %s record to %s",
            line_no,
            kind,
            token,
            section,
            value,
        )
        return value

    def real(self, token: str, *, line_no: int, section: str) -> float:
        # Overflowing exponents such as 1e999 match the pattern but are not numbers.
        if _FLOAT_RE.fullmatch(token) and math.isfinite(float(token)):
            return float(token)
        return float(
            self._coerce(
                token,
                kind="a number",
                prefix=_FLOAT_RE,
                convert=float,
                line_no=line_no,
                section=section,
            )
        )

    def integer(self, token: str, *, line_no: int, section: str) -> int:
        if _INT_RE.fullmatch(token):
            return int(token)
        return int(
            self._coerce(
                token,
                kind="an integer",
                prefix=_INT_RE,
                convert=int,
                line_no=line_no,
                section=section,
            )
        )


def _read_count(cursor: _LineCursor, section: str) -> int:
    fields = cursor.take(section)
    if len(fields) != 1 or not _COUNT_RE.fullmatch(fields[0]):
        raise MalformedLogError(
            (
                f"line {cursor.line_no}: expected the {section} count, "
                f"got {' '.join(fields)!r}"
            ),
            line_no=cursor.line_no,
            section=section,
        )
    return int(fields[0])


def _read_record(cursor: _LineCursor, section: str, width: int) -> list[str]:
    fields = cursor.take(section)
    if len(fields) < width:
        raise MalformedLogError(
            (
                f"line {cursor.line_no}: {section} record needs {width} fields, "
                f"got {len(fields)}"
            ),
            line_no=cursor.line_no,
            section=section,
        )
    return fields


def parse_log(
    text: str, *, numeric_policy: NumericPolicy = NumericPolicy.PERMISSIVE
) -> ParsedLog:
    cursor = _LineCursor(text)
    num = _NumberReader(numeric_policy)

    vms: dict[str, VMLifetime] = {}
    for _ in range(_read_count(cursor, "vm")):
        f = _read_record(cursor, "vm", 3)
        n = cursor.line_no
        vms[f[0]] = VMLifetime(
            id=f[0],
            started=num.real(f[1], line_no=n, section="vm"),
            finished=num.real(f[2], line_no=n, section="vm"),
        )

    workflows: dict[str, WorkflowMeta] = {}
    for _ in range(_read_count(cursor, "workflow")):
        f = _read_record(cursor, "workflow", 2)
        workflows[f[0]] = WorkflowMeta(
            id=f[0],
            priority=num.integer(f[1], line_no=cursor.line_no, section="workflow"),
        )

    tasks: list[TaskExecution] = []
    for _ in range(_read_count(cursor, "task")):
        f = _read_record(cursor, "task", 6)
        n = cursor.line_no
        tasks.append(
            TaskExecution(
                workflow_id=f[0],
                task_id=f[1],
                vm_id=f[2],
                started=num.real(f[3], line_no=n, section="task"),
                finished=num.real(f[4], line_no=n, section="task"),
                result=f[5],
                status=TaskStatus.from_token(f[5]),
            )
        )

    transfers: list[TransferExecution] = []
    for _ in range(_read_count(cursor, "transfer")):
        f = _read_record(cursor, "transfer", 5)
        n = cursor.line_no
        transfers.append(
            TransferExecution(
                id=f[0],
                vm_id=f[1],
                started=num.real(f[2], line_no=n, section="transfer"),
                finished=num.real(f[3], line_no=n, section="transfer"),
                direction=f[4],
            )
        )

    logger.debug(
        "parsed log: %d VMs, %d workflows, %d tasks, %d transfers",
        len(vms),
        len(workflows),
        len(tasks),
        len(transfers),
    )
    return ParsedLog(
        vms=vms, workflows=workflows, tasks=tuple(tasks), transfers=tuple(transfers)
    )


def read_log_file(
    path: Path, *, numeric_policy: NumericPolicy = NumericPolicy.PERMISSIVE
) -> ParsedLog:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedLogError(f"log is not valid UTF-8 text: {e}") from e
    return parse_log(text, numeric_policy=numeric_policy)
