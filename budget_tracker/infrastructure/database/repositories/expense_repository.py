"""
SQLAlchemy implementation of ExpenseRepository.
"""
from typing import Any, Dict, List

from .base_repository import SQLAlchemyAggregateRepository
from ....application.interfaces.repositories import ExpenseRepository
from ....domain.entities.expense import Expense
from ..models.expense_model import ExpenseModel, InvoiceModel


class SQLAlchemyExpenseRepository(SQLAlchemyAggregateRepository[Expense, ExpenseModel], ExpenseRepository):
    """SQLAlchemy implementation of expense repository. Invoices live in invoices."""

    model_class = ExpenseModel
    child_model_class = InvoiceModel
    child_foreign_key = 'expense_id'

    def _child_rows(self, entity: Expense) -> List[Dict[str, Any]]:
        return [
            InvoiceModel.row_from_domain(invoice, entity.id, position)
            for position, invoice in enumerate(entity.invoices)
        ]
