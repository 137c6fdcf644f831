"""Custom exception hierarchy for lease-billing."""

from decimal import Decimal


class LeaseBillingError(Exception):
    """Base exception for all lease-billing errors."""


class InvalidArgumentError(LeaseBillingError, ValueError):
    """Raised when a calculation receives an out-of-range argument."""


class InvalidInstallmentStateError(LeaseBillingError):
    """Raised when an installment is in an invalid state for the operation."""


class PaymentExceedsDebtError(LeaseBillingError):
    """Raised when a payment is larger than the total currently owed."""

    def __init__(self, amount_paid: Decimal, total_owed: Decimal) -> None:
        super().__init__(f"Payment of {amount_paid} exceeds the total owed of {total_owed}")
        self.amount_paid = amount_paid
        self.total_owed = total_owed


class ConfigurationError(LeaseBillingError):
    """Raised when configuration is invalid or missing."""
