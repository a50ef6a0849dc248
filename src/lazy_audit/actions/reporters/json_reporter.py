"""JSON Reporter Implementation."""

import json

from lazy_audit.actions.reporters.base import BaseReporter
from lazy_audit.actions.result import ActionResult


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def report_result(self, result: ActionResult) -> None:
        self.console.print(
            json.dumps(result.to_dict(), indent=2, default=str),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
