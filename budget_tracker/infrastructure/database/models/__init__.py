"""
SQLAlchemy ORM models.
"""
from .base import AuditColumnsMixin, Base, UTCDateTime, UUIDMixin
from .budget_model import BudgetModel
from .supplier_model import SupplierModel
from .team_member_model import TeamMemberModel
from .team_model import TeamModel, TeamRoleModel
from .expense_model import ExpenseModel, InvoiceModel

__all__ = [
    'Base',
    'AuditColumnsMixin',
    'UTCDateTime',
    'UUIDMixin',
    'BudgetModel',
    'SupplierModel',
    'TeamMemberModel',
    'TeamModel',
    'TeamRoleModel',
    'ExpenseModel',
    'InvoiceModel',
]
