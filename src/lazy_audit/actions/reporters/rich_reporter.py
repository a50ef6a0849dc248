"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.pretty import Pretty

from lazy_audit.actions.reporters.base import BaseReporter
from lazy_audit.actions.result import ActionResult, ActionStatus


class RichReporter(BaseReporter):
    """Generates colored terminal output using Rich."""

    COLORS = {
        ActionStatus.SUCCESS: "green",
        ActionStatus.ERROR: "yellow",
        ActionStatus.FAILURE: "red",
    }

    def report_result(self, result: ActionResult) -> None:
        color = self.COLORS.get(result.status, "white")
        self.console.print(
            f"[bold]Result:[/] [bold {color}]{result.status.value}[/], "
            f"[bold]Message:[/] {escape(result.message)}"
        )
        if result.data is not None:
            self.console.print("   [dim]Data:[/]")
            self.console.print(Pretty(result.to_dict()["data"]))
