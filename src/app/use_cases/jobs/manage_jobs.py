"""Job use cases

Minimal job bookkeeping so invoices and costs have something to attach to.
"""

import logging
from datetime import datetime
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.job_repository import JobRepository
from src.domain.job import Job
from .dtos import CreateJobCommandDTO, JobResponseDTO

logger = logging.getLogger(__name__)


class CreateJob:
    def __init__(self, uow: UnitOfWork, job_repo: JobRepository):
        self.uow = uow
        self.job_repo = job_repo

    async def execute(self, command: CreateJobCommandDTO) -> Result[JobResponseDTO]:
        try:
            now = datetime.utcnow()
            job = Job(
                account_id=command.account_id,
                customer_id=command.customer_id,
                title=command.title,
                description=command.description,
                job_type=command.job_type,
                status=command.status or "lead",
                estimated_labor_hours=command.estimated_labor_hours,
                created_at=now,
                updated_at=now,
            )
            created = await self.job_repo.create(job)
            await self.uow.commit()

            logger.info(f"Created job {created.id} for account {created.account_id}")
            return Return.ok(JobResponseDTO.from_entity(created))

        except Exception as e:
            logger.exception("Failed to create job")
            await self.uow.rollback()
            return Return.err(
                Error(code="CREATE_JOB_FAILED", message="Error creating job", reason=str(e))
            )


class GetJob:
    def __init__(self, job_repo: JobRepository):
        self.job_repo = job_repo

    async def execute(self, job_id: str) -> Result[JobResponseDTO]:
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            return Return.err(
                Error(
                    code="JOB_NOT_FOUND",
                    message=f"Job with ID {job_id} not found",
                    reason="Job does not exist",
                )
            )
        return Return.ok(JobResponseDTO.from_entity(job))


class ListJobs:
    def __init__(self, job_repo: JobRepository):
        self.job_repo = job_repo

    async def execute(
        self, account_id: Optional[str] = None, limit: int = 50, offset: int = 0
    ) -> Result[List[JobResponseDTO]]:
        jobs = await self.job_repo.list(account_id=account_id, limit=limit, offset=offset)
        return Return.ok([JobResponseDTO.from_entity(j) for j in jobs])
