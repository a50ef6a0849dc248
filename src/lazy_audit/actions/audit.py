"""Audit Action - Audit data since a given date.

CONTRACT:
- read_only: True
- dry_run: Supported (reports what would be audited)
- business errors: invalid or future --since date

The audit itself is a placeholder; only the date window is validated.
"""

from datetime import date, datetime, timezone
from typing import Any

from lazy_audit.actions.combinator import LazyAction
from lazy_audit.actions.errors import BusinessLogicError


def parse_since(since: str | None, today: date | None = None) -> date | None:
    """Parse the --since value as an ISO date.

    Raises:
        BusinessLogicError: The value is not an ISO date or lies in the future.
    """
    if since is None:
        return None
    try:
        parsed = date.fromisoformat(since.strip())
    except ValueError:
        raise BusinessLogicError(f"Invalid --since date: {since!r} (expected YYYY-MM-DD)") from None
    today = today or date.today()
    if parsed > today:
        raise BusinessLogicError(f"--since date {parsed.isoformat()} is in the future")
    return parsed


def audit_action(since: str | None = None) -> LazyAction:
    """Build the leaf action behind the ``audit`` command."""

    async def audit(dry_run: bool) -> dict[str, Any]:
        window_start = parse_since(since)
        summary: dict[str, Any] = {
            "since": window_start.isoformat() if window_start else None,
            "dry_run": dry_run,
        }
        if not dry_run:
            summary["audited_at"] = datetime.now(timezone.utc).isoformat()
        return summary

    return LazyAction(audit, name="audit")
