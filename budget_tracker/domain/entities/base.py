"""
Base class for domain entities following Domain-Driven Design principles.
These are pure Python classes with no external dependencies.
"""
from abc import ABC
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, Union

from ..exceptions import EntityValidationError
from ..validators import FieldsValidator
from ..value_objects import AuditFields, UniqueEntityId


def _to_plain(value: Any) -> Any:
    """Flatten value objects, enums and nested entities for persistence."""
    if isinstance(value, Entity):
        return value.to_dict()
    if isinstance(value, UniqueEntityId):
        return value.value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


class Entity(ABC):
    """
    Base class for all entities.

    An entity is composed of an identity, its audit fields and a props
    mapping of domain data. Props are validated before any state is set,
    so an invalid entity never exists. Entities are identified by their
    ID, not by their attributes.

    Subclasses set ``validator_class`` and expose their props through
    read-only properties. State changes go through ``_apply``.
    """

    validator_class: ClassVar[Type[FieldsValidator]] = FieldsValidator

    def __init__(
        self,
        props: Mapping[str, Any],
        audit_fields: Union[AuditFields, Mapping[str, Any]],
        entity_id: Optional[Union[UniqueEntityId, str]] = None
    ):
        self.validate(props)

        if not isinstance(entity_id, UniqueEntityId):
            entity_id = UniqueEntityId(entity_id)
        self._id = entity_id

        if not isinstance(audit_fields, AuditFields):
            audit_fields = AuditFields.from_dict(audit_fields)
        self._audit_fields = audit_fields

        self._props: Dict[str, Any] = dict(props)

    @classmethod
    def validate(cls, props: Mapping[str, Any]) -> None:
        """
        Validate props against the entity's rules.

        Raises:
            EntityValidationError: With every violated rule per field
        """
        validator = cls.validator_class()
        if not validator.validate(props):
            raise EntityValidationError(validator.errors)

    @property
    def id(self) -> str:
        return self._id.value

    @property
    def unique_entity_id(self) -> UniqueEntityId:
        return self._id

    @property
    def audit_fields(self) -> AuditFields:
        return self._audit_fields

    @property
    def created_by(self) -> str:
        return self._audit_fields.created_by

    @property
    def created_at(self) -> datetime:
        return self._audit_fields.created_at

    @property
    def updated_by(self) -> str:
        return self._audit_fields.updated_by

    @property
    def updated_at(self) -> datetime:
        return self._audit_fields.updated_at

    @property
    def props(self) -> Mapping[str, Any]:
        """Read-only view of the current props."""
        return MappingProxyType(self._props)

    def update_audit_fields(self, updated_by: str) -> None:
        """Replace the audit fields with a copy stamped by ``updated_by``."""
        self._audit_fields = self._audit_fields.stamp(updated_by)

    def _apply(self, changes: Mapping[str, Any], updated_by: str) -> None:
        """
        Validate and commit a partial update.

        The merged props and the new audit fields are both built before
        anything is assigned, so a failure leaves the entity unchanged.
        """
        candidate = {**self._props, **changes}
        self.validate(candidate)
        audit_fields = self._audit_fields.stamp(updated_by)

        self._props = candidate
        self._audit_fields = audit_fields

    def to_dict(self) -> Dict[str, Any]:
        """Flatten identity, audit fields and props into a plain dict."""
        data: Dict[str, Any] = {'id': self.id}
        data.update(self._audit_fields.value)
        for key, value in self._props.items():
            data[key] = _to_plain(value)
        return data

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id='{self.id}')"
