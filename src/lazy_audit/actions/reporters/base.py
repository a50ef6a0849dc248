"""Base Reporter Interface."""

from abc import ABC, abstractmethod
from rich.console import Console
from lazy_audit.actions.result import ActionResult


class BaseReporter(ABC):
    """Abstract base class for all result reporters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def report_result(self, result: ActionResult) -> None:
        """Report an action result to the console."""
        pass
