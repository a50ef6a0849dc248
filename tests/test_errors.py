from lazy_audit.actions.errors import (
    BusinessLogicError,
    FailureKind,
    LazyAuditError,
    UnexpectedSuccessError,
    classify_failure,
)


def test_business_logic_error_is_classified():
    assert classify_failure(BusinessLogicError("not found")) is FailureKind.BUSINESS_LOGIC


def test_other_errors_are_system_failures():
    assert classify_failure(RuntimeError("boom")) is FailureKind.SYSTEM
    assert classify_failure(KeyError("x")) is FailureKind.SYSTEM


def test_business_subclass_keeps_kind():
    class NotFound(BusinessLogicError):
        pass

    assert classify_failure(NotFound("gone")) is FailureKind.BUSINESS_LOGIC


def test_unexpected_success_message():
    err = UnexpectedSuccessError()
    assert isinstance(err, LazyAuditError)
    assert str(err) == "Action succeeded, but 'not' was expected."
