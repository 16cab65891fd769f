"""
SQLAlchemy models for Expense aggregate.
"""
from typing import Any, Dict

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import AuditColumnsMixin, Base, UTCDateTime, UUIDMixin, enum_or_raw, id_or_none
from ....domain.entities.expense import Expense, ExpenseType
from ....domain.entities.invoice import Invoice, InvoiceStatus
from ....domain.exceptions import EntityValidationError, LoadEntityError
from ....domain.value_objects import BudgetId, SupplierId, TeamId


class InvoiceModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for invoices table."""

    __tablename__ = 'invoices'

    expense_id = Column(
        String(36),
        ForeignKey('expenses.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    date = Column(UTCDateTime(), nullable=False)
    document = Column(String(10), nullable=True)
    status = Column(String(10), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    expense = relationship('ExpenseModel', back_populates='invoices')

    def to_domain(self) -> Invoice:
        """Convert to domain entity."""
        try:
            return Invoice(
                props={
                    'amount': self.amount,
                    'date': self.date,
                    'document': self.document,
                    'status': enum_or_raw(InvoiceStatus, self.status),
                },
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @staticmethod
    def row_from_domain(invoice: Invoice, expense_id: str, position: int) -> Dict[str, Any]:
        """Build a plain row for bulk inserts."""
        data = invoice.to_dict()
        return {
            'id': data['id'],
            'expense_id': expense_id,
            'amount': data['amount'],
            'date': data['date'],
            'document': data['document'],
            'status': data['status'],
            'position': position,
            'created_by': data['created_by'],
            'created_at': data['created_at'],
            'updated_by': data['updated_by'],
            'updated_at': data['updated_at'],
        }

    @classmethod
    def from_domain(cls, invoice: Invoice, expense_id: str, position: int = 0) -> 'InvoiceModel':
        """Create from domain entity."""
        return cls(**cls.row_from_domain(invoice, expense_id, position))


class ExpenseModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for expenses table."""

    __tablename__ = 'expenses'

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    expense_type = Column(String(10), nullable=False)
    supplier_id = Column(
        String(36),
        ForeignKey('suppliers.id', ondelete='SET NULL'),
        nullable=True,
        index=True
    )
    purchase_request = Column(String(10), nullable=True)
    purchase_order = Column(String(10), nullable=True)
    team_id = Column(String(36), ForeignKey('teams.id'), nullable=False, index=True)
    budget_id = Column(String(36), ForeignKey('budgets.id'), nullable=False, index=True)

    invoices = relationship(
        'InvoiceModel',
        back_populates='expense',
        cascade='all, delete-orphan',
        lazy='selectin',
        order_by='InvoiceModel.position'
    )

    def to_domain(self) -> Expense:
        """Convert to domain entity."""
        invoices = [invoice.to_domain() for invoice in self.invoices]
        try:
            return Expense(
                props={
                    'name': self.name,
                    'description': self.description,
                    'year': self.year,
                    'amount': self.amount,
                    'expense_type': enum_or_raw(ExpenseType, self.expense_type),
                    'supplier_id': id_or_none(SupplierId, self.supplier_id),
                    'purchase_request': self.purchase_request,
                    'purchase_order': self.purchase_order,
                    'team_id': id_or_none(TeamId, self.team_id),
                    'budget_id': id_or_none(BudgetId, self.budget_id),
                    'invoices': invoices,
                },
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @classmethod
    def from_domain(cls, expense: Expense) -> 'ExpenseModel':
        """Create from domain entity, invoices included."""
        data = expense.to_dict()
        model = cls(
            id=data['id'],
            created_by=data['created_by'],
            created_at=data['created_at'],
            **cls.values_from_domain(expense)
        )
        model.invoices = [
            InvoiceModel.from_domain(invoice, expense.id, position)
            for position, invoice in enumerate(expense.invoices)
        ]
        return model

    @staticmethod
    def values_from_domain(expense: Expense) -> Dict[str, Any]:
        """Column values for the expense row, audit update included."""
        data = expense.to_dict()
        return {
            'name': data['name'],
            'description': data['description'],
            'year': data['year'],
            'amount': data['amount'],
            'expense_type': data['expense_type'],
            'supplier_id': data['supplier_id'],
            'purchase_request': data['purchase_request'],
            'purchase_order': data['purchase_order'],
            'team_id': data['team_id'],
            'budget_id': data['budget_id'],
            'updated_by': data['updated_by'],
            'updated_at': data['updated_at'],
        }
