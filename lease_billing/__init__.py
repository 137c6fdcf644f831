"""Lease billing rules: penalty, late interest, partial payments and rent adjustment."""

__version__ = "0.1.0"
