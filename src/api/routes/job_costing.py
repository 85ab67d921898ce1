"""Job Costing API Routes

Cost entries per job, per-job profitability and the global cost overview.
"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.job_cost_request import CreateJobCostRequestSchema, UpdateJobCostRequestSchema
from src.app.use_cases.dto_base import MessageResponseDTO
from src.app.use_cases.job_costing import (
    CreateJobCost,
    GetJobCost,
    ListJobCosts,
    UpdateJobCost,
    DeleteJobCost,
    AnalyzeJobCosts,
    SummarizeJobCosts,
    CreateJobCostCommandDTO,
    UpdateJobCostCommandDTO,
    JobCostResponseDTO,
    JobCostAnalysisDTO,
    JobCostSummaryDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.job_cost_repository import SqlAlchemyJobCostRepository
from src.adapter.repositories.job_repository import SqlAlchemyJobRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_config, get_principal, Principal
from src.api.error import ClientError, validate_id

router = APIRouter(prefix="/job-costing", tags=["Job Costing"])


@router.get("", response_model=List[JobCostResponseDTO])
async def list_job_costs(
    job_id: Optional[str] = Query(default=None, alias="jobId"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListJobCosts(SqlAlchemyJobCostRepository(session))
    result = await use_case.execute(
        job_id=validate_id(job_id, "job id") if job_id else None,
        limit=limit,
        offset=offset,
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


# Declared before /{job_cost_id} so "summary" is not taken for an id
@router.get("/summary/overview", response_model=JobCostSummaryDTO)
async def get_cost_overview(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """Totals across every job that has at least one cost entry."""
    result = await SummarizeJobCosts(SqlAlchemyJobCostRepository(session)).execute()
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{job_id}/analysis", response_model=JobCostAnalysisDTO)
async def get_job_cost_analysis(
    job_id: str,
    http_request: Request,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    """
    Profitability of one job.

    Revenue is the total of the job's invoice when one exists, otherwise
    the total cost marked up by the configured fallback markup (1.35).

    **Example response:**
    ```json
    {
      "jobId": "9e8d7c6b-5a49-4837-a625-14f3e2d1c0b9",
      "totalCost": "150",
      "costItems": 2,
      "estimatedRevenue": "202.50",
      "estimatedProfit": "52.50",
      "profitMargin": "25.93",
      "invoiceId": null,
      "costBreakdown": [...]
    }
    ```
    """
    config = get_config(http_request)
    use_case = AnalyzeJobCosts(
        SqlAlchemyJobCostRepository(session),
        SqlAlchemyJobRepository(session),
        SqlAlchemyInvoiceRepository(session),
        markup=Decimal(config.FALLBACK_MARKUP),
    )
    result = await use_case.execute(validate_id(job_id, "job id"))
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{job_cost_id}", response_model=JobCostResponseDTO)
async def get_job_cost(
    job_cost_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    result = await GetJobCost(SqlAlchemyJobCostRepository(session)).execute(
        validate_id(job_cost_id, "job cost id")
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("", response_model=JobCostResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_job_cost(
    request: CreateJobCostRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    command = CreateJobCostCommandDTO(
        job_id=validate_id(request.job_id, "job id"),
        amount=request.amount,
        cost_type=request.cost_type,
        description=request.description,
    )
    use_case = CreateJobCost(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyJobCostRepository(session),
        SqlAlchemyJobRepository(session),
    )
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.put("/{job_cost_id}", response_model=JobCostResponseDTO)
async def update_job_cost(
    job_cost_id: str,
    request: UpdateJobCostRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    command = UpdateJobCostCommandDTO(
        job_cost_id=validate_id(job_cost_id, "job cost id"),
        amount=request.amount,
        cost_type=request.cost_type,
        description=request.description,
    )
    use_case = UpdateJobCost(SqlAlchemyUnitOfWork(session), SqlAlchemyJobCostRepository(session))
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.delete("/{job_cost_id}", response_model=MessageResponseDTO)
async def delete_job_cost(
    job_cost_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteJobCost(SqlAlchemyUnitOfWork(session), SqlAlchemyJobCostRepository(session))
    result = await use_case.execute(validate_id(job_cost_id, "job cost id"))
    if result.is_err():
        raise ClientError(result.error)
    return result.value
