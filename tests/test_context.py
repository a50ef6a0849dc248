import pytest

from lazy_audit.actions.context import ExecutionContext


def test_defaults():
    ctx = ExecutionContext()
    assert ctx.dry_run is False
    assert ctx.depth == 0


def test_nested_returns_new_context():
    ctx = ExecutionContext(dry_run=True, depth=1)
    child = ctx.nested()
    assert child == ExecutionContext(dry_run=True, depth=2)
    assert ctx.depth == 1


def test_with_dry_run():
    assert ExecutionContext().with_dry_run(True).dry_run is True


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        ExecutionContext(depth=-1)
