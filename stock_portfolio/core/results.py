"""
Operation results for portfolio actions that can fail for business reasons.

Precondition violations (negative prices or quantities) raise
InvalidArgumentError instead.
"""

from dataclasses import dataclass
from enum import Enum


class OperationStatus(Enum):
    """Outcome of a portfolio operation."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INSUFFICIENT_SHARES = "insufficient_shares"
    INVALID_ORDER = "invalid_order"
    DUPLICATE_TICKER = "duplicate_ticker"


@dataclass(frozen=True)
class OperationResult:
    """Status plus a human-readable message."""
    status: OperationStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "") -> 'OperationResult':
        return cls(OperationStatus.SUCCESS, message)

    @classmethod
    def failure(cls, status: OperationStatus, message: str) -> 'OperationResult':
        return cls(status, message)
