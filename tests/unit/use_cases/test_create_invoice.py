"""Unit tests for CreateInvoice use case

Tests cover:
- Amount derivation on create
- Default tax rate and due date
- Job existence check
- Rollback on repository failure
- Retry on invoice number collision
"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.repositories.invoice_repository import InvoiceNumberTaken
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO
from src.domain.invoice import InvoiceStatus
from src.domain.job import Job


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    repo = MagicMock()
    repo.generate_invoice_number = AsyncMock(return_value="INV-2024-000001")

    async def echo(invoice):
        return invoice

    repo.create = AsyncMock(side_effect=echo)
    return repo


@pytest.fixture
def mock_job_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(
        return_value=Job(id="job-1", account_id="acct-1", customer_id="cust-1", title="Fix sink")
    )
    return repo


@pytest.fixture
def create_invoice_use_case(mock_uow, mock_invoice_repo, mock_job_repo):
    """CreateInvoice use case instance with mocked dependencies"""
    return CreateInvoice(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        job_repo=mock_job_repo,
    )


@pytest.fixture
def sample_command():
    return CreateInvoiceCommandDTO(
        account_id="acct-1",
        job_id="job-1",
        customer_id="cust-1",
        labor_hours=Decimal("2"),
        hourly_rate=Decimal("50"),
        material_cost=Decimal("30"),
        tax_rate=Decimal("0.08"),
    )


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:
    """Test successful invoice creation"""

    async def test_create_invoice_derives_amounts(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        """
        Given: 2 labor hours at 50, 30 in materials and 8% tax
        When: execute is called
        Then: Draft invoice with labor 100, subtotal 130, tax 10.4, total 140.4
        """
        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_number == "INV-2024-000001"
        assert invoice.status == InvoiceStatus.DRAFT
        assert invoice.labor_amount == Decimal("100")
        assert invoice.subtotal == Decimal("130")
        assert invoice.tax_amount == Decimal("10.4")
        assert invoice.total_amount == Decimal("140.4")
        assert invoice.paid_amount == Decimal("0")

        mock_invoice_repo.generate_invoice_number.assert_called_once()
        mock_invoice_repo.create.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_missing_tax_rate_uses_configured_default(
        self, mock_uow, mock_invoice_repo, mock_job_repo
    ):
        # Arrange
        use_case = CreateInvoice(
            uow=mock_uow,
            invoice_repo=mock_invoice_repo,
            job_repo=mock_job_repo,
            default_tax_rate=Decimal("0.10"),
        )
        command = CreateInvoiceCommandDTO(
            account_id="acct-1",
            job_id="job-1",
            customer_id="cust-1",
            labor_hours=Decimal("1"),
            hourly_rate=Decimal("100"),
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.tax_rate == Decimal("0.10")
        assert result.value.tax_amount == Decimal("10")
        assert result.value.material_cost == Decimal("0")

    async def test_due_date_defaults_to_due_days_after_invoice_date(
        self, mock_uow, mock_invoice_repo, mock_job_repo, sample_command
    ):
        use_case = CreateInvoice(
            uow=mock_uow,
            invoice_repo=mock_invoice_repo,
            job_repo=mock_job_repo,
            due_days=14,
        )

        result = await use_case.execute(sample_command)

        invoice = result.value
        assert invoice.due_date - invoice.invoice_date == timedelta(days=14)

    async def test_explicit_due_date_is_kept(
        self, create_invoice_use_case, sample_command
    ):
        due = datetime(2030, 6, 1)
        command = sample_command.model_copy(update={"due_date": due})

        result = await create_invoice_use_case.execute(command)

        assert result.value.due_date == due


@pytest.mark.asyncio
class TestCreateInvoiceErrors:
    async def test_unknown_job_returns_not_found(
        self, create_invoice_use_case, mock_job_repo, mock_invoice_repo, mock_uow, sample_command
    ):
        # Arrange
        mock_job_repo.get_by_id = AsyncMock(return_value=None)

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "JOB_NOT_FOUND"
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_repository_failure_rolls_back(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        # Arrange
        mock_invoice_repo.create = AsyncMock(side_effect=Exception("Database connection failed"))

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_err()
        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert "Database connection failed" in result.error.reason
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestCreateInvoiceNumberCollision:
    """Test invoice number collisions with concurrent creates"""

    async def test_collision_is_retried_with_fresh_number(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        """
        Given: The first generated number is taken by a concurrent create
        When: Creating an invoice
        Then: The transaction is rolled back and the invoice is saved under the next number
        """
        # Arrange
        mock_invoice_repo.generate_invoice_number = AsyncMock(
            side_effect=["INV-2024-000001", "INV-2024-000002"]
        )

        async def create(invoice):
            if invoice.invoice_number == "INV-2024-000001":
                raise InvoiceNumberTaken(invoice.invoice_number)
            return invoice

        mock_invoice_repo.create = AsyncMock(side_effect=create)

        # Act
        result = await create_invoice_use_case.execute(sample_command)

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "INV-2024-000002"
        assert result.value.total_amount == Decimal("140.4")
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_repeated_collision_gives_up(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow, sample_command
    ):
        mock_invoice_repo.create = AsyncMock(side_effect=InvoiceNumberTaken("INV-2024-000001"))

        result = await create_invoice_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "INVOICE_NUMBER_CONFLICT"
        assert mock_invoice_repo.create.call_count == 2
        mock_uow.commit.assert_not_called()
