"""
Unit tests for the Entity base class.
"""
from datetime import datetime, timezone

import pytest

from budget_tracker.domain.entities import Budget
from budget_tracker.domain.exceptions import (
    AuditFieldsValidationError,
    EntityValidationError,
    InvalidIdError,
)
from budget_tracker.domain.value_objects import AuditFields, UniqueEntityId


VALID_ID = "5490020a-e866-4229-9adc-aa44b83234c4"


class TestEntityConstruction:
    """Test identity and audit field handling."""

    def test_generates_id_and_audit_fields(self, created_by):
        """Test defaults for a brand new entity."""
        budget = Budget({'name': 'Marketing'}, {'created_by': created_by})

        assert isinstance(budget.unique_entity_id, UniqueEntityId)
        assert budget.id == budget.unique_entity_id.value
        assert budget.created_by == created_by
        assert budget.updated_by == created_by
        assert budget.updated_at == budget.created_at

    def test_accepts_string_or_id_object(self, created_by):
        """Test both id forms are accepted."""
        from_string = Budget({'name': 'a'}, {'created_by': created_by}, VALID_ID)
        from_object = Budget({'name': 'a'}, {'created_by': created_by}, UniqueEntityId(VALID_ID))
        assert from_string.id == VALID_ID
        assert from_object.unique_entity_id == UniqueEntityId(VALID_ID)

    def test_accepts_audit_fields_object(self, created_by, created_at):
        """Test a ready-made AuditFields is used as is."""
        audit = AuditFields(created_by=created_by, created_at=created_at)
        budget = Budget({'name': 'a'}, audit)
        assert budget.audit_fields is audit
        assert budget.created_at == created_at

    def test_rejects_invalid_id(self, created_by):
        """Test a malformed id raises InvalidIdError."""
        with pytest.raises(InvalidIdError):
            Budget({'name': 'a'}, {'created_by': created_by}, 'fake id')

    def test_rejects_invalid_audit_fields(self):
        """Test a missing creator raises AuditFieldsValidationError."""
        with pytest.raises(AuditFieldsValidationError):
            Budget({'name': 'a'}, {})

    def test_props_validated_before_anything_else(self):
        """Test invalid props win over invalid id and audit fields."""
        with pytest.raises(EntityValidationError) as exc_info:
            Budget({'name': ''}, {}, 'fake id')
        assert exc_info.value.error == {'name': ['name should not be empty']}

    def test_props_are_copied_and_read_only(self, created_by):
        """Test callers cannot mutate entity state through props."""
        props = {'name': 'a'}
        budget = Budget(props, {'created_by': created_by})
        props['name'] = 'b'

        assert budget.name == 'a'
        with pytest.raises(TypeError):
            budget.props['name'] = 'c'


class TestEntityBehaviour:
    """Test updates, equality and serialization."""

    def test_update_audit_fields(self, created_by, created_at):
        """Test stamping keeps the creation values."""
        budget = Budget({'name': 'a'}, {'created_by': created_by, 'created_at': created_at})
        budget.update_audit_fields('editor')

        assert budget.created_by == created_by
        assert budget.created_at == created_at
        assert budget.updated_by == 'editor'
        assert budget.updated_at > created_at

    def test_failed_change_leaves_entity_unchanged(self, created_by, created_at):
        """Test a rejected change does not touch props or audit fields."""
        budget = Budget({'name': 'a'}, {'created_by': created_by, 'created_at': created_at})
        audit = budget.audit_fields

        with pytest.raises(EntityValidationError):
            budget.change('editor', name='x' * 256)

        assert budget.name == 'a'
        assert budget.audit_fields is audit

    def test_failed_audit_stamp_leaves_entity_unchanged(self, created_by):
        """Test a bad actor does not apply the prop change."""
        budget = Budget({'name': 'a'}, {'created_by': created_by})

        with pytest.raises(AuditFieldsValidationError):
            budget.change('', name='b')

        assert budget.name == 'a'
        assert budget.updated_by == created_by

    def test_equality_by_id(self, created_by):
        """Test entities compare by id only."""
        first = Budget({'name': 'a'}, {'created_by': created_by}, VALID_ID)
        second = Budget({'name': 'b'}, {'created_by': 'other'}, VALID_ID)
        third = Budget({'name': 'a'}, {'created_by': created_by})

        assert first == second
        assert hash(first) == hash(second)
        assert first != third
        assert first != VALID_ID

    def test_to_dict(self, created_by, created_at):
        """Test identity, audit fields and props are flattened together."""
        budget = Budget(
            {'name': 'a'},
            {'created_by': created_by, 'created_at': created_at},
            VALID_ID,
        )
        assert budget.to_dict() == {
            'id': VALID_ID,
            'name': 'a',
            'created_by': created_by,
            'created_at': created_at,
            'updated_by': created_by,
            'updated_at': created_at,
        }

    def test_repr(self, created_by):
        """Test repr names the type and id."""
        budget = Budget({'name': 'a'}, {'created_by': created_by}, VALID_ID)
        assert repr(budget) == f"Budget(id='{VALID_ID}')"

    def test_naive_audit_dates_become_utc(self, created_by):
        """Test naive datetimes in the audit mapping are taken as UTC."""
        budget = Budget({'name': 'a'}, {'created_by': created_by, 'created_at': datetime(2023, 1, 1)})
        assert budget.created_at == datetime(2023, 1, 1, tzinfo=timezone.utc)
