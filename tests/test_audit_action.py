from datetime import date

import pytest

from lazy_audit.actions.audit import audit_action, parse_since
from lazy_audit.actions.context import ExecutionContext
from lazy_audit.actions.errors import BusinessLogicError
from lazy_audit.actions.result import ActionStatus


def test_parse_since_accepts_iso_date():
    assert parse_since("2024-03-01", today=date(2024, 6, 1)) == date(2024, 3, 1)


def test_parse_since_none():
    assert parse_since(None) is None


def test_parse_since_rejects_garbage():
    with pytest.raises(BusinessLogicError, match="Invalid --since date"):
        parse_since("last tuesday")


def test_parse_since_rejects_future():
    with pytest.raises(BusinessLogicError, match="in the future"):
        parse_since("2024-06-02", today=date(2024, 6, 1))


@pytest.mark.asyncio
async def test_audit_real_run(tracer):
    result = await audit_action("2020-01-01").execute(ExecutionContext(), tracer)
    assert result.status is ActionStatus.SUCCESS
    assert result.message == "Action executed successfully"
    assert result.data["since"] == "2020-01-01"
    assert result.data["dry_run"] is False
    assert "audited_at" in result.data


@pytest.mark.asyncio
async def test_audit_dry_run(tracer):
    result = await audit_action().execute(ExecutionContext(dry_run=True), tracer)
    assert result.message == "Action would succeed"
    assert result.data == {"since": None, "dry_run": True}


@pytest.mark.asyncio
async def test_audit_invalid_date_is_business_error(tracer):
    result = await audit_action("yesterday").execute(ExecutionContext(), tracer)
    assert result.status is ActionStatus.ERROR
    assert "Invalid --since date" in result.message


@pytest.mark.asyncio
async def test_audit_invalid_date_dry_run_is_failure(tracer):
    result = await audit_action("yesterday").execute(ExecutionContext(dry_run=True), tracer)
    assert result.status is ActionStatus.FAILURE
    assert result.message == "Action would fail"


def test_audit_action_name():
    assert audit_action().describe() == "audit"
