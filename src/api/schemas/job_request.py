"""Request schemas for Jobs API"""

from decimal import Decimal
from typing import Optional
from pydantic import Field

from src.app.use_cases.dto_base import CamelModel


class CreateJobRequestSchema(CamelModel):
    account_id: Optional[str] = Field(default=None, description="Defaults to the X-Account-Id header")
    customer_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    job_type: Optional[str] = None
    status: Optional[str] = None
    estimated_labor_hours: Optional[Decimal] = None
