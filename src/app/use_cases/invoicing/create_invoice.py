"""CreateInvoice Use Case

Creates a draft invoice for a job and derives its amounts.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository, InvoiceNumberTaken
from src.app.repositories.job_repository import JobRepository
from src.domain.billing import DEFAULT_TAX_RATE, to_decimal
from src.domain.invoice import Invoice, InvoiceStatus
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create draft invoice for a job

    Business Rules:
    1. The job must exist
    2. Invoice number is auto-generated (INV-YYYY-NNNNNN)
    3. labor_amount = labor_hours * hourly_rate (missing values count as 0)
    4. subtotal = labor_amount + material_cost
    5. tax_amount = subtotal * tax_rate (tax_rate defaults to the configured rate)
    6. total_amount = subtotal + tax_amount, paid_amount = 0, status = draft
    7. due_date defaults to invoice_date + due_days
    8. A number collision with a concurrent create is retried with a fresh number

    Flow:
    1. Check the job exists
    2. Generate unique invoice number
    3. Build invoice and recalculate amounts
    4. Persist (regenerating the number on collision)
    5. Commit and return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        job_repo: JobRepository,
        default_tax_rate: Decimal = DEFAULT_TAX_RATE,
        due_days: int = 30,
        max_attempts: int = 2,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.job_repo = job_repo
        self.default_tax_rate = to_decimal(default_tax_rate)
        self.due_days = due_days
        self.max_attempts = max_attempts

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with references and billable inputs

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: The job must exist
            job = await self.job_repo.get_by_id(command.job_id)
            if not job:
                return Return.err(
                    Error(
                        code="JOB_NOT_FOUND",
                        message=f"Job with ID {command.job_id} not found",
                        reason="Invoices can only be created for existing jobs",
                    )
                )

            # Step 2-4: Number, build and persist; a number taken by a concurrent
            # create is regenerated once
            for attempt in range(1, self.max_attempts + 1):
                invoice_number = await self.invoice_repo.generate_invoice_number()
                invoice = self._build_invoice(command, invoice_number)
                try:
                    created_invoice = await self.invoice_repo.create(invoice)
                    break
                except InvoiceNumberTaken as e:
                    await self.uow.rollback()
                    if attempt == self.max_attempts:
                        logger.error(
                            f"Giving up on invoice for job {command.job_id} after "
                            f"{attempt} number collisions"
                        )
                        return Return.err(
                            Error(
                                code="INVOICE_NUMBER_CONFLICT",
                                message="Failed to allocate an invoice number",
                                reason=str(e),
                            )
                        )
                    logger.warning(f"{e}; retrying invoice creation for job {command.job_id}")

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {created_invoice.invoice_number} for job {command.job_id} "
                f"(total {created_invoice.total_amount})"
            )

            return Return.ok(InvoiceResponseDTO.from_entity(created_invoice))

        except Exception as e:
            logger.exception(f"Failed to create invoice for job {command.job_id}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

    def _build_invoice(self, command: CreateInvoiceCommandDTO, invoice_number: str) -> Invoice:
        now = datetime.utcnow()
        invoice = Invoice(
            account_id=command.account_id,
            job_id=command.job_id,
            customer_id=command.customer_id,
            invoice_number=invoice_number,
            labor_hours=command.labor_hours,
            hourly_rate=command.hourly_rate,
            material_cost=to_decimal(command.material_cost),
            tax_rate=(
                self.default_tax_rate if command.tax_rate is None else command.tax_rate
            ),
            paid_amount=Decimal("0"),
            status=InvoiceStatus.DRAFT,
            invoice_date=now,
            due_date=command.due_date or now + timedelta(days=self.due_days),
            notes=command.notes,
            created_at=now,
            updated_at=now,
        )
        invoice.recalculate()
        return invoice
