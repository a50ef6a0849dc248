"""Action Combinator - composable, dry-run aware asynchronous actions.

A combinator tree is built from four node types:

    LazyAction  wraps one Action (leaf)
    Sequence    a & b   runs both, returns b's result
    Fallback    a | b   runs b only if a did not succeed
    Negation    ~a      succeeds only if a did not succeed

Nodes are frozen; evaluate() walks the tree with an explicit
ExecutionContext, so a node can be reused in any number of composites.

Example:
    @lazy_action
    async def fetch(dry_run):
        ...

    result = await (fetch | fallback).execute(ExecutionContext(dry_run=True))
"""

import asyncio
import inspect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Union

from lazy_audit.actions.context import ExecutionContext
from lazy_audit.actions.errors import FailureKind, UnexpectedSuccessError, classify_failure
from lazy_audit.actions.result import ActionResult, ActionStatus
from lazy_audit.actions.trace import ActionTracer, default_tracer

logger = logging.getLogger(__name__)

# An action receives the dry-run flag and returns a value, an awaitable, or raises.
Action = Callable[[bool], Union[Any, Awaitable[Any]]]


class Combinator(ABC):
    """Base class for all combinator nodes.

    Subclasses are frozen dataclasses carrying ``dry_run`` and ``depth``
    defaults, used when execute() is called without a context.
    """

    dry_run: bool
    depth: int

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must be non-negative")

    @property
    def context(self) -> ExecutionContext:
        """Default context built from this node's own settings."""
        return ExecutionContext(dry_run=self.dry_run, depth=self.depth)

    def with_dry_run(self, dry_run: bool) -> "Combinator":
        return replace(self, dry_run=dry_run)

    def with_depth(self, depth: int) -> "Combinator":
        return replace(self, depth=depth)

    def and_(self, other: "Combinator") -> "Sequence":
        """Run self, then other one level deeper; return other's result."""
        return Sequence(self, other, dry_run=self.dry_run, depth=self.depth)

    def or_(self, other: "Combinator") -> "Fallback":
        """Run self; run other one level deeper only if self did not succeed."""
        return Fallback(self, other, dry_run=self.dry_run, depth=self.depth)

    def not_(self) -> "Negation":
        """Succeed only if self does not succeed."""
        return Negation(self, dry_run=self.dry_run, depth=self.depth)

    def __and__(self, other: "Combinator") -> "Sequence":
        return self.and_(other)

    def __or__(self, other: "Combinator") -> "Fallback":
        return self.or_(other)

    def __invert__(self) -> "Negation":
        return self.not_()

    async def execute(
        self,
        context: ExecutionContext | None = None,
        tracer: ActionTracer | None = None,
    ) -> ActionResult:
        """Execute the tree rooted at this node.

        Args:
            context: Dry-run flag and depth to run with. Defaults to this
                node's own settings.
            tracer: Where trace lines go. Defaults to stdout.

        Returns:
            ActionResult of the evaluation.

        Raises:
            UnexpectedSuccessError: A negated action succeeded.
        """
        return await evaluate(self, context or self.context, tracer or default_tracer)

    def run(self, context: ExecutionContext | None = None) -> ActionResult:
        """Synchronous wrapper around execute() for callers without a loop."""
        return asyncio.run(self.execute(context))

    @abstractmethod
    def describe(self) -> str:
        """Render the expression structure, e.g. ``((a & b) | ~c)``."""
        ...

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class LazyAction(Combinator):
    """Leaf node wrapping a single Action."""

    action: Action
    name: str | None = None
    dry_run: bool = False
    depth: int = 0

    @property
    def label(self) -> str:
        return self.name or getattr(self.action, "__name__", "action")

    def describe(self) -> str:
        return self.label


@dataclass(frozen=True)
class Sequence(Combinator):
    """``first & second``: both legs always run; the first result is discarded."""

    first: Combinator
    second: Combinator
    dry_run: bool = False
    depth: int = 0

    def describe(self) -> str:
        return f"({self.first.describe()} & {self.second.describe()})"


@dataclass(frozen=True)
class Fallback(Combinator):
    """``first | second``: second runs only when first is not a success."""

    first: Combinator
    second: Combinator
    dry_run: bool = False
    depth: int = 0

    def describe(self) -> str:
        return f"({self.first.describe()} | {self.second.describe()})"


@dataclass(frozen=True)
class Negation(Combinator):
    """``~inner``: success when inner is not a success."""

    inner: Combinator
    dry_run: bool = False
    depth: int = 0

    def describe(self) -> str:
        return f"~{self.inner.describe()}"


def lazy_action(func: Action | None = None, *, name: str | None = None) -> Any:
    """Decorator turning an action function into a LazyAction.

    Usable bare (``@lazy_action``) or with a name (``@lazy_action(name="x")``).
    """

    def wrap(f: Action) -> LazyAction:
        return LazyAction(f, name=name)

    if func is not None:
        return wrap(func)
    return wrap


async def evaluate(node: Combinator, context: ExecutionContext, tracer: ActionTracer) -> ActionResult:
    """Recursively evaluate a combinator tree under the given context."""
    tracer.start(context)

    if isinstance(node, LazyAction):
        return await _run_leaf(node, context)

    if isinstance(node, Sequence):
        await evaluate(node.first, context, tracer)
        return await evaluate(node.second, context.nested(), tracer)

    if isinstance(node, Fallback):
        first = await evaluate(node.first, context, tracer)
        if first.ok:
            return first
        return await evaluate(node.second, context.nested(), tracer)

    if isinstance(node, Negation):
        inner = await evaluate(node.inner, context, tracer)
        if inner.ok:
            raise UnexpectedSuccessError()
        return ActionResult(ActionStatus.SUCCESS, "Action did not execute as expected")

    raise TypeError(f"Unsupported combinator node: {type(node).__name__}")


async def _invoke(action: Action, dry_run: bool) -> Any:
    value = action(dry_run)
    if inspect.isawaitable(value):
        value = await value
    return value


async def _run_leaf(node: LazyAction, context: ExecutionContext) -> ActionResult:
    if context.dry_run:
        try:
            value = await _invoke(node.action, True)
        except Exception as e:
            logger.debug("Dry run of %s would fail: %s", node.label, e)
            return ActionResult(ActionStatus.FAILURE, "Action would fail", e)
        return ActionResult(ActionStatus.SUCCESS, "Action would succeed", value)

    try:
        value = await _invoke(node.action, False)
    except Exception as e:
        if classify_failure(e) is FailureKind.BUSINESS_LOGIC:
            return ActionResult(ActionStatus.ERROR, str(e))
        logger.debug("Action %s failed with system error", node.label, exc_info=True)
        return ActionResult(ActionStatus.FAILURE, "Action failed due to system error", e)
    return ActionResult(ActionStatus.SUCCESS, "Action executed successfully", value)
