"""ActionResult dataclass - Uniform outcome of every action execution."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionStatus(str, Enum):
    """Tri-state outcome of an action."""

    SUCCESS = "success"  # Action ran (or would run) to completion
    ERROR = "error"  # Expected business-logic failure
    FAILURE = "failure"  # Unexpected or simulated failure


@dataclass(frozen=True)
class ActionResult:
    """Immutable result of executing an action.

    A fresh ActionResult is created by every execution and never mutated.

    Attributes:
        status: Outcome of the execution.
        message: Human-readable summary.
        data: Optional payload (the action's return value or the raised error).
    """

    status: ActionStatus
    message: str
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status is ActionStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Serializable view; exceptions in ``data`` are rendered as strings."""
        data = self.data
        if isinstance(data, BaseException):
            data = f"{type(data).__name__}: {data}"
        elif isinstance(data, ActionResult):
            data = data.to_dict()
        return {"status": self.status.value, "message": self.message, "data": data}

    def __str__(self) -> str:
        return f"Result: {self.status.value}, Message: {self.message}"
