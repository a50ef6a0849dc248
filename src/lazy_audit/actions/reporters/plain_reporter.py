"""Plain Text Reporter Implementation."""

from lazy_audit.actions.reporters.base import BaseReporter
from lazy_audit.actions.result import ActionResult


class PlainReporter(BaseReporter):
    """Generates the one-line ``Result: ..., Message: ...`` output."""

    def report_result(self, result: ActionResult) -> None:
        self.console.print(str(result), markup=False, highlight=False, emoji=False, soft_wrap=True)
