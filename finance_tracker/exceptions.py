"""Exception classes for the finance tracker."""


class FinanceTrackerError(Exception):
    """Base exception for the finance tracker."""
    pass


class ValidationError(FinanceTrackerError):
    """Invalid transaction data or import rows."""
    pass


class TransactionNotFoundError(FinanceTrackerError, KeyError):
    """No transaction with the requested id."""

    def __init__(self, transaction_id: str):
        super().__init__(transaction_id)
        self.transaction_id = transaction_id

    def __str__(self) -> str:
        return f"Transaction not found: {self.transaction_id}"


class UnknownFilterError(FinanceTrackerError):
    """A time filter has no axis definition."""
    pass
