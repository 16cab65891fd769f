# Domain Entities - Core business objects with identity

from .base import Entity
from .budget import Budget, BudgetValidator
from .supplier import Supplier, SupplierValidator
from .team_member import TeamMember, TeamMemberValidator
from .team import (
    RoleName,
    Team,
    TeamRole,
    TeamRoleValidator,
    TeamValidator,
)
from .invoice import Invoice, InvoiceStatus, InvoiceValidator
from .expense import Expense, ExpenseType, ExpenseValidator

__all__ = [
    # Base
    'Entity',
    # Budget
    'Budget',
    'BudgetValidator',
    # Supplier
    'Supplier',
    'SupplierValidator',
    # Team member
    'TeamMember',
    'TeamMemberValidator',
    # Team
    'RoleName',
    'Team',
    'TeamRole',
    'TeamRoleValidator',
    'TeamValidator',
    # Invoice
    'Invoice',
    'InvoiceStatus',
    'InvoiceValidator',
    # Expense
    'Expense',
    'ExpenseType',
    'ExpenseValidator',
]
