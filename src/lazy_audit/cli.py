"""
Click-based CLI for lazy-audit.

This module only ORCHESTRATES:
- Loads settings
- Builds the audit action
- Executes it
- Formats output
"""

import asyncio
import logging
from pathlib import Path

import click
from rich.console import Console

from lazy_audit import __version__
from lazy_audit.actions.audit import audit_action
from lazy_audit.actions.context import ExecutionContext
from lazy_audit.actions.errors import LazyAuditError
from lazy_audit.actions.reporters import get_reporter
from lazy_audit.config import FORMATS, ConfigManager

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="lazy-audit")
@click.option("--config", "-c", type=click.Path(), help="Path to config directory")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """lazy-audit: run and report audit actions."""
    ctx.ensure_object(dict)
    config_dir = Path(config) if config else None
    ctx.obj["config_mgr"] = ConfigManager(config_dir)


@main.command()
@click.option("--since", help="Audit data since a specific date")
@click.option("--dry-run", is_flag=True, help="Simulate the audit without running it")
@click.option("--format", "fmt", type=click.Choice(FORMATS), default=None, help="Output format")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def audit(ctx: click.Context, since: str | None, dry_run: bool, fmt: str | None, verbose: bool) -> None:
    """Audit data."""
    try:
        settings = ctx.obj["config_mgr"].load()
    except LazyAuditError as e:
        console.print(f"[bold red]Error:[/] {e}")
        return

    logging.basicConfig(level=logging.DEBUG if verbose or settings.verbose else logging.WARNING, force=True)

    action = audit_action(since)
    context = ExecutionContext(dry_run=dry_run or settings.dry_run)
    try:
        result = asyncio.run(action.execute(context))
    except LazyAuditError as e:
        console.print(f"[bold red]Error:[/] {e}")
        return

    get_reporter(fmt or settings.format, console).report_result(result)


if __name__ == "__main__":
    main()
