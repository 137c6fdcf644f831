"""Synthetic data generators."""

from lease_billing.generators.installment import InstallmentGenerator

__all__ = ["InstallmentGenerator"]
