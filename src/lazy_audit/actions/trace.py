"""Trace output for action execution.

Each evaluated node prints one line to stdout, indented two spaces per
depth level, before it runs.
"""

from rich.console import Console

from lazy_audit.actions.context import ExecutionContext

SIMULATING = "Simulating action (Dry Run)"
EXECUTING = "Executing action"


class ActionTracer:
    """Prints indented execution trace lines."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, markup=False, emoji=False, soft_wrap=True)

    def start(self, context: ExecutionContext) -> str:
        """Print and return the trace line for a node about to run."""
        message = SIMULATING if context.dry_run else EXECUTING
        line = " " * (context.depth * 2) + message
        self.console.print(line)
        return line


default_tracer = ActionTracer()
