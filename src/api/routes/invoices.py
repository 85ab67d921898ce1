"""Invoice API Routes

CRUD, sending, payments, PDF rendering and email delivery for invoices.
"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import (
    CreateInvoiceRequestSchema,
    UpdateInvoiceRequestSchema,
    RecordPaymentRequestSchema,
    EmailInvoiceRequestSchema,
)
from src.app.use_cases.dto_base import MessageResponseDTO
from src.app.use_cases.invoicing import (
    CreateInvoice,
    UpdateInvoice,
    GetInvoice,
    ListInvoices,
    DeleteInvoice,
    SendInvoice,
    RecordPayment,
    RenderInvoicePdf,
    EmailInvoice,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    RecordPaymentCommandDTO,
    EmailInvoiceCommandDTO,
    InvoiceResponseDTO,
    PaymentResponseDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.job_repository import SqlAlchemyJobRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import InvoiceNotifier
from src.app.services.pdf_service import PdfService
from src.domain.invoice import InvoiceStatus
from src.depends import (
    get_session,
    get_config,
    get_principal,
    get_pdf_service,
    get_invoice_notifier,
    resolve_account_id,
    Principal,
)
from src.api.error import ClientError, validate_id

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "message": "Invoice with ID 6f1c2a9e-4b1d-4f7e-9a53-1c2b3d4e5f60 not found",
                    "code": "INVOICE_NOT_FOUND"
                }
            }
        }
    }
}


@router.get("", response_model=List[InvoiceResponseDTO])
async def list_invoices(
    account_id: Optional[str] = Query(default=None, alias="accountId"),
    invoice_status: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    List invoices, newest first.

    **Query parameters:**
    - `accountId` (optional): defaults to the caller's account
    - `status` (optional): draft, sent, paid or overdue
    - `limit` / `offset` (optional): pagination
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        account_id=account_id or principal.account_id,
        status=invoice_status,
        limit=limit,
        offset=offset,
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def get_invoice(
    invoice_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetInvoice(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(validate_id(invoice_id, "invoice id"))
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {
            "description": "Job not found",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Job with ID 9e8d7c6b-5a49-4837-a625-14f3e2d1c0b9 not found",
                        "code": "JOB_NOT_FOUND"
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    http_request: Request,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice for a job.

    Amounts are derived, never taken from the request:
    - labor = laborHours * hourlyRate
    - subtotal = labor + materialCost
    - tax = subtotal * taxRate (configured default when omitted)
    - total = subtotal + tax

    **Example request:**
    ```json
    {
      "jobId": "9e8d7c6b-5a49-4837-a625-14f3e2d1c0b9",
      "customerId": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d",
      "laborHours": 2,
      "hourlyRate": 50,
      "materialCost": 30
    }
    ```

    **Returns:**
    - 201: Invoice created (status draft)
    - 400: Validation error
    - 404: Job not found
    """
    config = get_config(http_request)
    command = CreateInvoiceCommandDTO(
        account_id=resolve_account_id(request.account_id, principal),
        job_id=validate_id(request.job_id, "job id"),
        customer_id=request.customer_id,
        labor_hours=request.labor_hours,
        hourly_rate=request.hourly_rate,
        material_cost=request.material_cost,
        tax_rate=request.tax_rate,
        due_date=request.due_date,
        notes=request.notes,
    )
    use_case = CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyJobRepository(session),
        default_tax_rate=Decimal(config.DEFAULT_TAX_RATE),
        due_days=config.INVOICE_DUE_DAYS,
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("/{invoice_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Partially update an invoice.

    Only `status`, `laborHours` and `materialCost` can change. Amounts are
    recalculated with the stored hourly and tax rates.
    """
    command = UpdateInvoiceCommandDTO(
        invoice_id=validate_id(invoice_id, "invoice id"),
        status=request.status,
        labor_hours=request.labor_hours,
        material_cost=request.material_cost,
    )
    use_case = UpdateInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_invoice(
    invoice_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(validate_id(invoice_id, "invoice id"))
    if result.is_err():
        raise ClientError(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{invoice_id}/send", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def send_invoice(
    invoice_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """Mark an invoice as sent and stamp its sent date."""
    use_case = SendInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(validate_id(invoice_id, "invoice id"))
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/{invoice_id}/payment", response_model=PaymentResponseDTO, responses=NOT_FOUND_RESPONSE)
async def record_payment(
    invoice_id: str,
    request: RecordPaymentRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Record a payment against an invoice.

    The amount is added to `paidAmount`; the invoice becomes `paid` once the
    paid amount reaches the total. Overpayment is accepted.

    **Example request:**
    ```json
    {"amount": 60, "paymentMethod": "check"}
    ```
    """
    command = RecordPaymentCommandDTO(
        invoice_id=validate_id(invoice_id, "invoice id"),
        amount=request.amount,
        payment_method=request.payment_method,
        reference_number=request.reference_number,
        notes=request.notes,
    )
    use_case = RecordPayment(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        **NOT_FOUND_RESPONSE,
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    """Download the invoice as a PDF file."""
    use_case = RenderInvoicePdf(SqlAlchemyInvoiceRepository(session), pdf_service)
    result = await use_case.execute(validate_id(invoice_id, "invoice id"))
    if result.is_err():
        raise ClientError(result.error)

    document = result.value
    return Response(
        content=document.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="invoice-{document.invoice_number}.pdf"'
        },
    )


@router.post("/{invoice_id}/email", response_model=MessageResponseDTO, responses=NOT_FOUND_RESPONSE)
async def email_invoice(
    invoice_id: str,
    request: EmailInvoiceRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
    notifier: InvoiceNotifier = Depends(get_invoice_notifier),
):
    """Deliver the invoice to the customer and mark it sent."""
    command = EmailInvoiceCommandDTO(
        invoice_id=validate_id(invoice_id, "invoice id"),
        recipient_email=request.recipient_email,
        recipient_name=request.recipient_name,
    )
    use_case = EmailInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session), notifier)
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value
