"""Job Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.job import Job


class JobRepository(ABC):
    """Repository interface for Job persistence"""

    @abstractmethod
    async def create(self, job: Job) -> Job:
        pass

    @abstractmethod
    async def get_by_id(self, job_id: str) -> Optional[Job]:
        pass

    @abstractmethod
    async def list(
        self,
        account_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Job]:
        pass
