"""
Immutable execution context passed down through a combinator tree.
Sub-actions receive their settings explicitly instead of having them set on shared instances.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ExecutionContext:
    """Settings for one evaluation: dry-run flag and trace indentation depth."""

    dry_run: bool = False
    depth: int = 0

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must be non-negative")

    def nested(self) -> "ExecutionContext":
        """Context for a sub-action one level deeper in the trace."""
        return replace(self, depth=self.depth + 1)

    def with_dry_run(self, dry_run: bool) -> "ExecutionContext":
        return replace(self, dry_run=dry_run)
