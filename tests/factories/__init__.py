"""
Test data factories for the budget tracker.

Provides factory classes for generating test data.
"""
from .row_factory import NamedRowFactory, rows_with_increasing_created_at
from .entity_factory import ExpensePropsFactory, InvoicePropsFactory, make_roles

__all__ = [
    "NamedRowFactory",
    "rows_with_increasing_created_at",
    "ExpensePropsFactory",
    "InvoicePropsFactory",
    "make_roles",
]
