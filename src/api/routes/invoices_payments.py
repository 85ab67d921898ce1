"""Invoices & Payments API Routes

Account-scoped views over invoices and payments, plus the collections summary.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error
from src.api.schemas.invoice_request import CreatePaymentRequestSchema
from src.app.use_cases.invoicing import (
    GetInvoice,
    ListInvoices,
    GetPayment,
    ListPayments,
    RecordPayment,
    GetBillingSummary,
    RecordPaymentCommandDTO,
    InvoiceResponseDTO,
    PaymentResponseDTO,
    BillingSummaryDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_principal, Principal
from src.api.error import ClientError, validate_id

router = APIRouter(prefix="/invoices-payments", tags=["Invoices & Payments"])

DEFAULT_PAYMENT_METHOD = "card"


@router.get(
    "/invoices",
    response_model=List[InvoiceResponseDTO],
    responses={
        400: {
            "description": "accountId missing",
            "content": {
                "application/json": {
                    "example": {"message": "accountId is required", "code": "ACCOUNT_ID_REQUIRED"}
                }
            }
        }
    }
)
async def list_account_invoices(
    account_id: Optional[str] = Query(default=None, alias="accountId"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """List one account's invoices. `accountId` is required."""
    if not account_id:
        raise ClientError(
            Error(
                code="ACCOUNT_ID_REQUIRED",
                message="accountId is required",
                reason="Invoice listing must be scoped to an account",
            )
        )

    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(account_id=account_id, limit=limit, offset=offset)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/invoices/{invoice_id}", response_model=InvoiceResponseDTO)
async def get_account_invoice(
    invoice_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    result = await GetInvoice(SqlAlchemyInvoiceRepository(session)).execute(
        validate_id(invoice_id, "invoice id")
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/payments", response_model=List[PaymentResponseDTO])
async def list_payments(
    account_id: Optional[str] = Query(default=None, alias="accountId"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListPayments(SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(
        account_id=account_id or principal.account_id, limit=limit, offset=offset
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/payments/{payment_id}", response_model=PaymentResponseDTO)
async def get_payment(
    payment_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    result = await GetPayment(SqlAlchemyPaymentRepository(session)).execute(
        validate_id(payment_id, "payment id")
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("/payments", response_model=PaymentResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_payment(
    request: CreatePaymentRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Record a payment (payment method defaults to card).

    Same balance rules as `POST /invoices/{id}/payment`: the amount is added
    to the invoice's paid amount and the invoice is marked paid only once
    the total is covered.
    """
    command = RecordPaymentCommandDTO(
        invoice_id=validate_id(request.invoice_id, "invoice id"),
        amount=request.amount,
        payment_method=request.payment_method,
        reference_number=request.reference_number,
        notes=request.notes,
    )
    use_case = RecordPayment(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyPaymentRepository(session),
        default_method=DEFAULT_PAYMENT_METHOD,
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/summary", response_model=BillingSummaryDTO)
async def get_billing_summary(
    account_id: Optional[str] = Query(default=None, alias="accountId"),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """Invoiced, collected and outstanding totals with the collection rate."""
    use_case = GetBillingSummary(
        SqlAlchemyInvoiceRepository(session), SqlAlchemyPaymentRepository(session)
    )
    result = await use_case.execute(account_id=account_id or principal.account_id)
    if result.is_err():
        raise ClientError(result.error)
    return result.value
