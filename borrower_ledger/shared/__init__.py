"""Shared foundation layer for the borrower ledger.

This package provides the data models and repository layer following the
Repository pattern with a flat structure and utility functions.
"""

from borrower_ledger.shared import models, repositories

__all__ = ["models", "repositories"]
