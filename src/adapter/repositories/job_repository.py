"""SQLAlchemy Job Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.job_repository import JobRepository
from src.domain.job import Job


class SqlAlchemyJobRepository(JobRepository):
    """SQLAlchemy implementation of JobRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, job: Job) -> Job:
        self.session.add(job)
        await self.session.flush()
        await self.session.refresh(job)
        return job

    async def get_by_id(self, job_id: str) -> Optional[Job]:
        statement = select(Job).where(Job.id == job_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        account_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Job]:
        statement = select(Job)

        if account_id:
            statement = statement.where(Job.account_id == account_id)

        statement = statement.order_by(Job.created_at.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())
