"""Job Cost Repository Interface

Defines the contract for job cost persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.job_cost import JobCost


class JobCostRepository(ABC):
    """Repository interface for JobCost persistence"""

    @abstractmethod
    async def create(self, job_cost: JobCost) -> JobCost:
        pass

    @abstractmethod
    async def get_by_id(self, job_cost_id: str) -> Optional[JobCost]:
        pass

    @abstractmethod
    async def list(
        self,
        job_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[JobCost]:
        """
        Retrieve cost entries, newest first

        Args:
            job_id: Optional filter by job
            limit: Maximum number of entries to return
            offset: Offset for pagination
        """
        pass

    @abstractmethod
    async def list_by_job(self, job_id: str) -> List[JobCost]:
        """Retrieve every cost entry of a job"""
        pass

    @abstractmethod
    async def list_all(self) -> List[JobCost]:
        """Retrieve every cost entry across all jobs"""
        pass

    @abstractmethod
    async def update(self, job_cost: JobCost) -> JobCost:
        pass

    @abstractmethod
    async def delete(self, job_cost: JobCost) -> None:
        pass
