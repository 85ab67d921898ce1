"""Job API Routes"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.job_request import CreateJobRequestSchema
from src.app.use_cases.jobs import (
    CreateJob,
    GetJob,
    ListJobs,
    CreateJobCommandDTO,
    JobResponseDTO,
)
from src.adapter.repositories.job_repository import SqlAlchemyJobRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_principal, resolve_account_id, Principal
from src.api.error import ClientError, validate_id

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=List[JobResponseDTO])
async def list_jobs(
    account_id: Optional[str] = Query(default=None, alias="accountId"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListJobs(SqlAlchemyJobRepository(session))
    result = await use_case.execute(
        account_id=account_id or principal.account_id, limit=limit, offset=offset
    )
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.post("", response_model=JobResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: CreateJobRequestSchema,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    command = CreateJobCommandDTO(
        account_id=resolve_account_id(request.account_id, principal),
        customer_id=request.customer_id,
        title=request.title,
        description=request.description,
        job_type=request.job_type,
        status=request.status,
        estimated_labor_hours=request.estimated_labor_hours,
    )
    use_case = CreateJob(SqlAlchemyUnitOfWork(session), SqlAlchemyJobRepository(session))
    result = await use_case.execute(command)
    if result.is_err():
        raise ClientError(result.error)
    return result.value


@router.get("/{job_id}", response_model=JobResponseDTO)
async def get_job(
    job_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_session),
):
    result = await GetJob(SqlAlchemyJobRepository(session)).execute(validate_id(job_id, "job id"))
    if result.is_err():
        raise ClientError(result.error)
    return result.value
