"""Failure taxonomy for actions.

An action signals an expected, recoverable condition by raising
BusinessLogicError. Anything else it raises is a system failure.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class LazyAuditError(Exception):
    """Base class for all lazy-audit errors."""


class BusinessLogicError(LazyAuditError):
    """Expected failure raised by an action (e.g. 'not found')."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnexpectedSuccessError(LazyAuditError):
    """Raised when a negated action succeeds."""

    def __init__(self, message: str = "Action succeeded, but 'not' was expected.") -> None:
        super().__init__(message)
        self.message = message


class ConfigError(LazyAuditError):
    """Raised when the settings file cannot be used."""


class FailureKind(str, Enum):
    """How a failure raised during real execution is reported."""

    BUSINESS_LOGIC = "business_logic"
    SYSTEM = "system"


def classify_failure(error: BaseException) -> FailureKind:
    """Classify an exception raised by an action."""
    kind = FailureKind.BUSINESS_LOGIC if isinstance(error, BusinessLogicError) else FailureKind.SYSTEM
    logger.debug("Classified %s as %s failure", type(error).__name__, kind.value)
    return kind
