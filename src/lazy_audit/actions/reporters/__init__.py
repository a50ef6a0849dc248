"""Result reporters: plain, rich and json output formats."""

from rich.console import Console

from lazy_audit.actions.reporters.base import BaseReporter
from lazy_audit.actions.reporters.json_reporter import JsonReporter
from lazy_audit.actions.reporters.plain_reporter import PlainReporter
from lazy_audit.actions.reporters.rich_reporter import RichReporter

REPORTERS: dict[str, type[BaseReporter]] = {
    "plain": PlainReporter,
    "rich": RichReporter,
    "json": JsonReporter,
}


def get_reporter(fmt: str, console: Console) -> BaseReporter:
    """Return the reporter for an output format."""
    reporter_cls = REPORTERS.get(fmt)
    if reporter_cls is None:
        raise ValueError(f"Unknown output format: {fmt}")
    return reporter_cls(console)


__all__ = ["BaseReporter", "JsonReporter", "PlainReporter", "RichReporter", "REPORTERS", "get_reporter"]
