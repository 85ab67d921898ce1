"""Job cost entry use cases

CreateJobCost, GetJobCost, ListJobCosts, UpdateJobCost and DeleteJobCost
are plain mutations/reads of cost entries.
"""

import logging
from datetime import datetime
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.job_cost_repository import JobCostRepository
from src.app.repositories.job_repository import JobRepository
from src.domain.job_cost import JobCost, CostType
from src.app.use_cases.dto_base import MessageResponseDTO
from .dtos import CreateJobCostCommandDTO, UpdateJobCostCommandDTO, JobCostResponseDTO

logger = logging.getLogger(__name__)


def _not_found(job_cost_id: str) -> Error:
    return Error(
        code="JOB_COST_NOT_FOUND",
        message=f"Job cost with ID {job_cost_id} not found",
        reason="Job cost does not exist",
    )


class CreateJobCost:
    """
    Use Case: Add a cost entry to a job

    Business Rules:
    1. The job must exist
    2. cost_type defaults to "other", description to ""
    """

    def __init__(self, uow: UnitOfWork, job_cost_repo: JobCostRepository, job_repo: JobRepository):
        self.uow = uow
        self.job_cost_repo = job_cost_repo
        self.job_repo = job_repo

    async def execute(self, command: CreateJobCostCommandDTO) -> Result[JobCostResponseDTO]:
        try:
            job = await self.job_repo.get_by_id(command.job_id)
            if not job:
                return Return.err(
                    Error(
                        code="JOB_NOT_FOUND",
                        message=f"Job with ID {command.job_id} not found",
                        reason="Costs can only be recorded against existing jobs",
                    )
                )

            job_cost = JobCost(
                job_id=command.job_id,
                amount=command.amount,
                cost_type=command.cost_type or CostType.OTHER.value,
                description=command.description or "",
                created_at=datetime.utcnow(),
            )
            created = await self.job_cost_repo.create(job_cost)
            await self.uow.commit()

            return Return.ok(JobCostResponseDTO.from_entity(created))

        except Exception as e:
            logger.exception(f"Failed to create job cost for job {command.job_id}")
            await self.uow.rollback()
            return Return.err(
                Error(code="CREATE_JOB_COST_FAILED", message="Error creating job cost", reason=str(e))
            )


class GetJobCost:
    """Use Case: Retrieve a single cost entry"""

    def __init__(self, job_cost_repo: JobCostRepository):
        self.job_cost_repo = job_cost_repo

    async def execute(self, job_cost_id: str) -> Result[JobCostResponseDTO]:
        try:
            job_cost = await self.job_cost_repo.get_by_id(job_cost_id)
        except Exception as e:
            logger.exception(f"Failed to fetch job cost {job_cost_id}")
            return Return.err(
                Error(code="GET_JOB_COST_FAILED", message="Error fetching job cost", reason=str(e))
            )

        if not job_cost:
            return Return.err(_not_found(job_cost_id))

        return Return.ok(JobCostResponseDTO.from_entity(job_cost))


class ListJobCosts:
    """Use Case: List cost entries, newest first, optionally for one job"""

    def __init__(self, job_cost_repo: JobCostRepository):
        self.job_cost_repo = job_cost_repo

    async def execute(
        self, job_id: Optional[str] = None, limit: int = 50, offset: int = 0
    ) -> Result[List[JobCostResponseDTO]]:
        try:
            costs = await self.job_cost_repo.list(job_id=job_id, limit=limit, offset=offset)
        except Exception as e:
            logger.exception("Failed to list job costs")
            return Return.err(
                Error(code="LIST_JOB_COSTS_FAILED", message="Error fetching job costs", reason=str(e))
            )

        return Return.ok([JobCostResponseDTO.from_entity(c) for c in costs])


class UpdateJobCost:
    """
    Use Case: Partially update a cost entry

    Only non-null amount and non-empty cost_type/description are applied.
    """

    def __init__(self, uow: UnitOfWork, job_cost_repo: JobCostRepository):
        self.uow = uow
        self.job_cost_repo = job_cost_repo

    async def execute(self, command: UpdateJobCostCommandDTO) -> Result[JobCostResponseDTO]:
        try:
            job_cost = await self.job_cost_repo.get_by_id(command.job_cost_id)
            if not job_cost:
                return Return.err(_not_found(command.job_cost_id))

            if command.amount is not None:
                job_cost.amount = command.amount
            if command.cost_type:
                job_cost.cost_type = command.cost_type
            if command.description:
                job_cost.description = command.description

            updated = await self.job_cost_repo.update(job_cost)
            await self.uow.commit()

            return Return.ok(JobCostResponseDTO.from_entity(updated))

        except Exception as e:
            logger.exception(f"Failed to update job cost {command.job_cost_id}")
            await self.uow.rollback()
            return Return.err(
                Error(code="UPDATE_JOB_COST_FAILED", message="Error updating job cost", reason=str(e))
            )


class DeleteJobCost:
    """Use Case: Remove a cost entry"""

    def __init__(self, uow: UnitOfWork, job_cost_repo: JobCostRepository):
        self.uow = uow
        self.job_cost_repo = job_cost_repo

    async def execute(self, job_cost_id: str) -> Result[MessageResponseDTO]:
        try:
            job_cost = await self.job_cost_repo.get_by_id(job_cost_id)
            if not job_cost:
                return Return.err(_not_found(job_cost_id))

            await self.job_cost_repo.delete(job_cost)
            await self.uow.commit()

            return Return.ok(MessageResponseDTO(message="Job cost deleted successfully"))

        except Exception as e:
            logger.exception(f"Failed to delete job cost {job_cost_id}")
            await self.uow.rollback()
            return Return.err(
                Error(code="DELETE_JOB_COST_FAILED", message="Error deleting job cost", reason=str(e))
            )
