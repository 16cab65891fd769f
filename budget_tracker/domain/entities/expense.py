"""
Expense domain entity.
"""
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from .base import Entity
from .invoice import Invoice
from ..exceptions import InvalidExpenseError
from ..value_objects import AuditFields, BudgetId, SupplierId, TeamId, UniqueEntityId
from ..validators import (
    FieldsValidator,
    each_instance,
    is_enum,
    is_instance,
    is_int,
    is_not_empty_object,
    is_number,
    is_number_string,
    is_string,
    length,
    max_length,
    max_value,
    min_value,
    not_empty,
    optional,
)


class ExpenseType(str, Enum):
    """Capital or operational expenditure."""
    CAPEX = "capex"
    OPEX = "opex"


class ExpenseValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_string(), max_length(255)],
        'description': [not_empty(), is_string()],
        'year': [not_empty(), max_value(3000), min_value(2020), is_int()],
        'amount': [
            not_empty(),
            is_number(max_decimal_places=2, message='amount must have max two decimal places'),
            min_value(0.01),
        ],
        'expense_type': [not_empty(), is_enum(ExpenseType)],
        'supplier_id': [optional(), is_instance(SupplierId), is_not_empty_object()],
        'purchase_request': [
            optional(),
            is_number_string(),
            length(10, 10, message='purchase_request must be 10 characters'),
        ],
        'purchase_order': [
            optional(),
            is_number_string(),
            length(10, 10, message='purchase_order must be 10 characters'),
        ],
        'team_id': [is_instance(TeamId), not_empty(), is_not_empty_object()],
        'budget_id': [is_instance(BudgetId), not_empty(), is_not_empty_object()],
        'invoices': [optional(), each_instance(Invoice)],
    }


class Expense(Entity):
    """
    Expense aggregate root.

    References its team, budget and supplier by id and owns its invoices.
    Purchase request and purchase order numbers can be added once and
    replaced afterwards only through the update methods.
    """

    validator_class = ExpenseValidator

    def __init__(
        self,
        props: Mapping[str, Any],
        audit_fields: Union[AuditFields, Mapping[str, Any]],
        entity_id: Optional[Union[UniqueEntityId, str]] = None
    ):
        defaults = {
            'supplier_id': None,
            'purchase_request': None,
            'purchase_order': None,
        }
        props = {**defaults, **props}
        if props.get('invoices') is None:
            props['invoices'] = []
        super().__init__(props, audit_fields, entity_id)

    @property
    def name(self) -> str:
        return self._props['name']

    @property
    def description(self) -> str:
        return self._props['description']

    @property
    def year(self) -> int:
        return self._props['year']

    @property
    def amount(self) -> float:
        return self._props['amount']

    @property
    def expense_type(self) -> ExpenseType:
        return self._props['expense_type']

    @property
    def supplier_id(self) -> Optional[SupplierId]:
        return self._props['supplier_id']

    @property
    def purchase_request(self) -> Optional[str]:
        return self._props['purchase_request']

    @property
    def purchase_order(self) -> Optional[str]:
        return self._props['purchase_order']

    @property
    def team_id(self) -> TeamId:
        return self._props['team_id']

    @property
    def budget_id(self) -> BudgetId:
        return self._props['budget_id']

    @property
    def invoices(self) -> List[Invoice]:
        return list(self._props['invoices'])

    def change(
        self,
        updated_by: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        year: Optional[int] = None,
        amount: Optional[float] = None,
        expense_type: Optional[ExpenseType] = None,
        team_id: Optional[TeamId] = None,
        budget_id: Optional[BudgetId] = None
    ) -> None:
        """
        Change the descriptive fields of the expense.

        Every argument left as None keeps its current value.

        Raises:
            EntityValidationError: If the merged expense is invalid
        """
        candidates = {
            'name': name,
            'description': description,
            'year': year,
            'amount': amount,
            'expense_type': expense_type,
            'team_id': team_id,
            'budget_id': budget_id,
        }
        changes = {key: value for key, value in candidates.items() if value is not None}
        self._apply(changes, updated_by)

    def add_supplier(self, supplier_id: SupplierId, updated_by: str) -> None:
        if not supplier_id:
            raise InvalidExpenseError("SupplierId must be provided")
        self._apply({'supplier_id': supplier_id}, updated_by)

    def update_supplier(self, supplier_id: Optional[SupplierId], updated_by: str) -> None:
        """Replace the supplier. None removes it."""
        self._apply({'supplier_id': supplier_id}, updated_by)

    def add_purchase_request(self, purchase_request: str, updated_by: str) -> None:
        if not purchase_request:
            raise InvalidExpenseError("Purchase Request must be provided")
        if self.purchase_request:
            raise InvalidExpenseError("Expense has Purchase Request already")
        self._apply({'purchase_request': purchase_request}, updated_by)

    def update_purchase_request(self, purchase_request: Optional[str], updated_by: str) -> None:
        self._apply({'purchase_request': purchase_request or None}, updated_by)

    def add_purchase_order(self, purchase_order: str, updated_by: str) -> None:
        if not purchase_order:
            raise InvalidExpenseError("Purchase Order must be provided")
        if self.purchase_order:
            raise InvalidExpenseError("Expense has Purchase Order already")
        self._apply({'purchase_order': purchase_order}, updated_by)

    def update_purchase_order(self, purchase_order: Optional[str], updated_by: str) -> None:
        self._apply({'purchase_order': purchase_order or None}, updated_by)

    def add_purchase_docs(self, purchase_request: str, purchase_order: str, updated_by: str) -> None:
        """
        Add purchase request and purchase order together.

        Raises:
            InvalidExpenseError: If either value is missing or already set
        """
        if not purchase_request or not purchase_order:
            raise InvalidExpenseError("Purchase Request and Purchase Order must be provided")
        if self.purchase_request:
            raise InvalidExpenseError("Expense has Purchase Request already")
        if self.purchase_order:
            raise InvalidExpenseError("Expense has Purchase Order already")
        self._apply(
            {'purchase_request': purchase_request, 'purchase_order': purchase_order},
            updated_by
        )

    def update_invoices(self, invoices: Sequence[Invoice], updated_by: str) -> None:
        """Replace the whole invoice list."""
        self._apply({'invoices': list(invoices)}, updated_by)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        year: int,
        amount: float,
        expense_type: ExpenseType,
        team_id: TeamId,
        budget_id: BudgetId,
        created_by: str,
        supplier_id: Optional[SupplierId] = None,
        purchase_request: Optional[str] = None,
        purchase_order: Optional[str] = None,
        invoices: Optional[Sequence[Invoice]] = None,
        expense_id: Optional[str] = None
    ) -> 'Expense':
        """Factory method to create a new expense."""
        return cls(
            props={
                'name': name,
                'description': description,
                'year': year,
                'amount': amount,
                'expense_type': expense_type,
                'supplier_id': supplier_id,
                'purchase_request': purchase_request,
                'purchase_order': purchase_order,
                'team_id': team_id,
                'budget_id': budget_id,
                'invoices': list(invoices or []),
            },
            audit_fields={'created_by': created_by},
            entity_id=expense_id
        )
