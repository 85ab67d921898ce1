"""SQLAlchemy Job Cost Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.job_cost_repository import JobCostRepository
from src.domain.job_cost import JobCost


class SqlAlchemyJobCostRepository(JobCostRepository):
    """SQLAlchemy implementation of JobCostRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, job_cost: JobCost) -> JobCost:
        self.session.add(job_cost)
        await self.session.flush()
        await self.session.refresh(job_cost)
        return job_cost

    async def get_by_id(self, job_cost_id: str) -> Optional[JobCost]:
        statement = select(JobCost).where(JobCost.id == job_cost_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        job_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[JobCost]:
        statement = select(JobCost)

        if job_id:
            statement = statement.where(JobCost.job_id == job_id)

        statement = statement.order_by(JobCost.created_at.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_job(self, job_id: str) -> List[JobCost]:
        statement = (
            select(JobCost)
            .where(JobCost.job_id == job_id)
            .order_by(JobCost.created_at.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self) -> List[JobCost]:
        statement = select(JobCost).order_by(JobCost.created_at.asc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, job_cost: JobCost) -> JobCost:
        self.session.add(job_cost)
        await self.session.flush()
        await self.session.refresh(job_cost)
        return job_cost

    async def delete(self, job_cost: JobCost) -> None:
        await self.session.delete(job_cost)
        await self.session.flush()
