"""
Invoice domain entity.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .base import Entity
from ..value_objects import AuditFields, UniqueEntityId
from ..validators import (
    FieldsValidator,
    is_datetime,
    is_in,
    is_number,
    is_string,
    max_length,
    min_value,
    not_empty,
    optional,
)


class InvoiceStatus(str, Enum):
    """Whether an invoice is planned or already issued."""
    PLAN = "plan"
    ACTUAL = "actual"


class InvoiceValidator(FieldsValidator):
    rules = {
        'amount': [
            not_empty(),
            is_number(max_decimal_places=2, message='amount must have max two decimal places'),
            min_value(0.01),
        ],
        'date': [not_empty(), is_datetime()],
        'document': [optional(), is_string(), max_length(10)],
        'status': [not_empty(), is_in(InvoiceStatus)],
    }


class Invoice(Entity):
    """A planned or actual invoice booked against an expense."""

    validator_class = InvoiceValidator

    def __init__(
        self,
        props: Mapping[str, Any],
        audit_fields: Union[AuditFields, Mapping[str, Any]],
        entity_id: Optional[Union[UniqueEntityId, str]] = None
    ):
        super().__init__({'document': None, **props}, audit_fields, entity_id)

    @property
    def amount(self) -> float:
        return self._props['amount']

    @property
    def date(self) -> datetime:
        return self._props['date']

    @property
    def document(self) -> Optional[str]:
        return self._props['document']

    @property
    def status(self) -> InvoiceStatus:
        return self._props['status']

    @classmethod
    def create(
        cls,
        amount: float,
        date: datetime,
        status: InvoiceStatus,
        created_by: str,
        document: Optional[str] = None,
        invoice_id: Optional[str] = None
    ) -> 'Invoice':
        """Factory method to create a new invoice."""
        return cls(
            props={'amount': amount, 'date': date, 'document': document, 'status': status},
            audit_fields={'created_by': created_by},
            entity_id=invoice_id
        )
