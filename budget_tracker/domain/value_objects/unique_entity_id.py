"""
Entity identifier value objects.
"""
import re
from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from ..exceptions import InvalidIdError


@dataclass(frozen=True)
class UniqueEntityId:
    """
    UUID identifier of an entity.

    An empty value generates a new random UUID. A non-empty value must be
    a hyphenated UUID string and is kept as given.
    """
    value: Optional[str] = None

    UUID_REGEX = re.compile(
        r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$',
        re.IGNORECASE
    )

    # References to other entities must name an existing id
    generates_value = True

    def __post_init__(self) -> None:
        """Generate or validate the identifier."""
        if isinstance(self.value, UUID):
            object.__setattr__(self, 'value', str(self.value))

        if not self.value:
            if not self.generates_value:
                raise InvalidIdError(self.value, f"{type(self).__name__} must be provided")
            object.__setattr__(self, 'value', str(uuid4()))
            return

        if not isinstance(self.value, str) or not self.UUID_REGEX.match(self.value):
            raise InvalidIdError(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.value}')"


@dataclass(frozen=True, repr=False)
class TeamId(UniqueEntityId):
    """Reference to a Team."""
    generates_value = False


@dataclass(frozen=True, repr=False)
class BudgetId(UniqueEntityId):
    """Reference to a Budget."""
    generates_value = False


@dataclass(frozen=True, repr=False)
class SupplierId(UniqueEntityId):
    """Reference to a Supplier."""
    generates_value = False


@dataclass(frozen=True, repr=False)
class TeamMemberId(UniqueEntityId):
    """Reference to a TeamMember."""
    generates_value = False
