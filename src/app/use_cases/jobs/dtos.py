"""Data Transfer Objects for Job Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import Field
from src.app.use_cases.dto_base import CamelModel
from src.domain.job import Job


class CreateJobCommandDTO(CamelModel):
    account_id: str
    customer_id: str
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    job_type: Optional[str] = Field(default=None, description="new_work, repair, maintenance, emergency")
    status: Optional[str] = Field(default=None, description="Defaults to lead")
    estimated_labor_hours: Optional[Decimal] = None


class JobResponseDTO(CamelModel):
    id: str
    account_id: str
    customer_id: str
    title: str
    description: Optional[str] = None
    job_type: Optional[str] = None
    status: str
    estimated_labor_hours: Optional[Decimal] = None
    actual_labor_hours: Optional[Decimal] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponseDTO":
        return cls(
            id=job.id,
            account_id=job.account_id,
            customer_id=job.customer_id,
            title=job.title,
            description=job.description,
            job_type=job.job_type,
            status=job.status,
            estimated_labor_hours=job.estimated_labor_hours,
            actual_labor_hours=job.actual_labor_hours,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )
