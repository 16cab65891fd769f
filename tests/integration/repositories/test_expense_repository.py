"""
Integration tests for the expense aggregate repository.
"""
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from budget_tracker.domain.entities import Budget, Expense, ExpenseType, Invoice, InvoiceStatus
from budget_tracker.domain.exceptions import LoadEntityError, NotFoundError
from budget_tracker.domain.value_objects import SupplierId
from budget_tracker.infrastructure.database.models import ExpenseModel, InvoiceModel
from budget_tracker.infrastructure.database.repositories import SQLAlchemyBudgetRepository, SQLAlchemyExpenseRepository

from tests.factories import ExpensePropsFactory, InvoicePropsFactory


pytestmark = pytest.mark.integration


async def count_invoices(session):
    return (await session.execute(select(func.count()).select_from(InvoiceModel))).scalar_one()


def make_invoice(created_by, **overrides):
    return Invoice(InvoicePropsFactory(**overrides), {'created_by': created_by})


@pytest.fixture
def expense(created_by):
    invoices = [
        make_invoice(created_by, amount=100.5, status=InvoiceStatus.PLAN),
        make_invoice(created_by, amount=200.25, status=InvoiceStatus.ACTUAL, document=None),
    ]
    return Expense(ExpensePropsFactory(invoices=invoices), {'created_by': created_by})


class TestExpenseRepository:
    """Test expenses are stored together with their invoices."""

    @pytest.mark.asyncio
    async def test_insert_and_find_by_id(self, db_session, expense):
        """Test every field and invoice loads back."""
        repo = SQLAlchemyExpenseRepository(db_session)
        await repo.insert(expense)

        found = await repo.find_by_id(expense.id)

        assert found == expense
        assert found.name == expense.name
        assert found.description == expense.description
        assert found.year == 2023
        assert found.amount == 1500.25
        assert found.expense_type == ExpenseType.CAPEX
        assert found.team_id == expense.team_id
        assert found.budget_id == expense.budget_id
        assert found.supplier_id is None
        assert found.purchase_request is None
        assert [invoice.id for invoice in found.invoices] == [invoice.id for invoice in expense.invoices]
        assert [invoice.amount for invoice in found.invoices] == [100.5, 200.25]
        assert [invoice.status for invoice in found.invoices] == [InvoiceStatus.PLAN, InvoiceStatus.ACTUAL]
        assert found.invoices[0].date == datetime(2023, 3, 1, tzinfo=timezone.utc)
        assert found.invoices[1].document is None

    @pytest.mark.asyncio
    async def test_optional_fields_round_trip(self, db_session, created_by):
        """Test supplier and purchase documents are stored."""
        supplier_id = SupplierId(str(uuid4()))
        expense = Expense(
            ExpensePropsFactory(
                supplier_id=supplier_id,
                purchase_request='1234567890',
                purchase_order='0987654321',
                expense_type=ExpenseType.OPEX,
            ),
            {'created_by': created_by},
        )
        repo = SQLAlchemyExpenseRepository(db_session)
        await repo.insert(expense)

        found = await repo.find_by_id(expense.id)

        assert found.supplier_id == supplier_id
        assert found.purchase_request == '1234567890'
        assert found.purchase_order == '0987654321'
        assert found.expense_type == ExpenseType.OPEX
        assert found.invoices == []

    @pytest.mark.asyncio
    async def test_update_replaces_invoices(self, db_session, expense, created_by):
        """Test an update rewrites fields and the invoice list."""
        repo = SQLAlchemyExpenseRepository(db_session)
        await repo.insert(expense)

        replacement = make_invoice(created_by, amount=10)
        expense.change("editor", name="Renamed", amount=99.99)
        expense.add_purchase_docs('1234567890', '0987654321', "editor")
        expense.update_invoices([replacement], "editor")
        await repo.update(expense)

        found = await repo.find_by_id(expense.id)

        assert found.name == "Renamed"
        assert found.amount == 99.99
        assert found.purchase_request == '1234567890'
        assert found.purchase_order == '0987654321'
        assert found.updated_by == "editor"
        assert [invoice.id for invoice in found.invoices] == [replacement.id]
        assert await count_invoices(db_session) == 1

    @pytest.mark.asyncio
    async def test_update_clears_invoices(self, db_session, expense):
        """Test an empty invoice list removes every invoice row."""
        repo = SQLAlchemyExpenseRepository(db_session)
        await repo.insert(expense)

        expense.update_invoices([], "editor")
        await repo.update(expense)

        assert (await repo.find_by_id(expense.id)).invoices == []
        assert await count_invoices(db_session) == 0

    @pytest.mark.asyncio
    async def test_failed_update_keeps_invoices_and_earlier_writes(self, db_session, session_factory, expense, created_by):
        """Test a failing invoice insert leaves the expense and the rest of the session untouched."""
        budget = Budget.create(name="Marketing", created_by=created_by)
        other = Expense(ExpensePropsFactory(invoices=[make_invoice(created_by)]), {'created_by': created_by})
        await SQLAlchemyBudgetRepository(db_session).insert(budget)
        repo = SQLAlchemyExpenseRepository(db_session)
        await repo.insert(other)
        await repo.insert(expense)
        invoice_ids = [invoice.id for invoice in expense.invoices]
        name = expense.name

        # Reusing the other expense's invoice id violates the primary key
        expense.change("editor", name="Renamed")
        expense.update_invoices([make_invoice(created_by), other.invoices[0]], "editor")
        with pytest.raises(SQLAlchemyError):
            await repo.update(expense)

        found = await repo.find_by_id(expense.id)
        assert found.name == name
        assert [invoice.id for invoice in found.invoices] == invoice_ids
        assert await count_invoices(db_session) == 3
        assert (await SQLAlchemyBudgetRepository(db_session).find_by_id(budget.id)).name == "Marketing"

        await db_session.commit()
        async with session_factory() as session:
            assert (await SQLAlchemyBudgetRepository(session).find_by_id(budget.id)).name == "Marketing"
            assert len(await SQLAlchemyExpenseRepository(session).find_all()) == 2
            assert await count_invoices(session) == 3

    @pytest.mark.asyncio
    async def test_update_not_found(self, db_session, expense):
        """Test updating an unknown expense raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await SQLAlchemyExpenseRepository(db_session).update(expense)

    @pytest.mark.asyncio
    async def test_delete_removes_invoices(self, db_session, expense):
        """Test deleting an expense deletes its invoices."""
        repo = SQLAlchemyExpenseRepository(db_session)
        await repo.insert(expense)

        await repo.delete(expense.id)

        with pytest.raises(NotFoundError):
            await repo.find_by_id(expense.id)
        assert await count_invoices(db_session) == 0

    @pytest.mark.asyncio
    async def test_invalid_stored_expense(self, db_session, expense):
        """Test an out of range year at rest raises LoadEntityError."""
        model = ExpenseModel.from_domain(expense)
        model.year = 1999
        db_session.add(model)
        await db_session.flush()

        with pytest.raises(LoadEntityError) as exc_info:
            await SQLAlchemyExpenseRepository(db_session).find_by_id(expense.id)

        assert exc_info.value.error == {'year': ['year must not be less than 2020']}

    @pytest.mark.asyncio
    async def test_invalid_stored_invoice(self, db_session, expense):
        """Test a bad invoice status at rest raises LoadEntityError."""
        model = ExpenseModel.from_domain(expense)
        model.invoices[0].status = 'paid'
        db_session.add(model)
        await db_session.flush()

        with pytest.raises(LoadEntityError) as exc_info:
            await SQLAlchemyExpenseRepository(db_session).find_by_id(expense.id)

        assert exc_info.value.error == {
            'status': ['status must be one of the following values: plan, actual'],
        }
