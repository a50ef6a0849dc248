"""Actions package - Composable, dry-run aware actions.

Each action is wrapped in a Combinator that:
- runs it for real or simulates it (dry run)
- reports a uniform ActionResult (success / error / failure)
- composes with others via and (&), or (|) and not (~)
"""

from lazy_audit.actions.audit import audit_action
from lazy_audit.actions.combinator import (
    Action,
    Combinator,
    Fallback,
    LazyAction,
    Negation,
    Sequence,
    evaluate,
    lazy_action,
)
from lazy_audit.actions.context import ExecutionContext
from lazy_audit.actions.errors import (
    BusinessLogicError,
    FailureKind,
    LazyAuditError,
    UnexpectedSuccessError,
    classify_failure,
)
from lazy_audit.actions.result import ActionResult, ActionStatus

__all__ = [
    "Action",
    "ActionResult",
    "ActionStatus",
    "BusinessLogicError",
    "Combinator",
    "ExecutionContext",
    "Fallback",
    "FailureKind",
    "LazyAction",
    "LazyAuditError",
    "Negation",
    "Sequence",
    "UnexpectedSuccessError",
    "audit_action",
    "classify_failure",
    "evaluate",
    "lazy_action",
]
