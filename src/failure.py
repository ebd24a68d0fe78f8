from __future__ import annotations
import traceback
from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class FailureContext:
    """What the job framework hands over when a job raises."""

    worker: str
    queue: str
    payload: Any
    exception: str
    backtrace: Optional[List[str]] = None

    @classmethod
    def from_exception(cls, worker: str, queue: str, payload: Any, exc: BaseException) -> "FailureContext":
        return cls(
            worker=str(worker),
            queue=str(queue),
            payload=payload,
            exception=str(exc),
            backtrace=format_backtrace(exc),
        )


def format_backtrace(exc: BaseException) -> Optional[List[str]]:
    """One ``file:line:in `func'`` string per frame, outermost first."""
    tb = exc.__traceback__
    if tb is None:
        return None
    return [f"{fs.filename}:{fs.lineno}:in `{fs.name}'" for fs in traceback.extract_tb(tb)]
