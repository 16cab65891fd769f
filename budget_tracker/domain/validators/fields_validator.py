"""
Generic validation runner over declarative field rules.
"""
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from ..exceptions import FieldsError
from .rules import FieldRule


class FieldsValidator:
    """
    Runs a rule set against a plain mapping.

    Subclasses declare ``rules`` as field name to an ordered list of
    FieldRule. Every rule of every field runs, so the resulting error map
    lists all violations per field in declaration order.

    Usage:
        validator = BudgetValidator()
        if not validator.validate({'name': ''}):
            raise EntityValidationError(validator.errors)
    """

    rules: ClassVar[Dict[str, List[FieldRule]]] = {}

    def __init__(self) -> None:
        self.errors: Optional[FieldsError] = None
        self.validated_data: Optional[Dict[str, Any]] = None

    def validate(self, data: Mapping[str, Any]) -> bool:
        """
        Validate data against the declared rules.

        Args:
            data: Field values keyed by field name

        Returns:
            True when every rule passes, False otherwise
        """
        errors: FieldsError = {}

        for field_name, field_rules in self.rules.items():
            value = data.get(field_name)
            if value is None and any(rule.is_optional for rule in field_rules):
                continue

            messages = [
                rule.message_for(field_name)
                for rule in field_rules
                if not rule.is_optional and not rule.check(value, data)
            ]
            if messages:
                errors[field_name] = messages

        if errors:
            self.errors = errors
            self.validated_data = None
            return False

        self.errors = None
        self.validated_data = dict(data)
        return True
