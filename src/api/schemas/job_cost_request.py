"""Request schemas for Job Costing API"""

from decimal import Decimal
from typing import Optional
from pydantic import Field

from src.app.use_cases.dto_base import CamelModel


class CreateJobCostRequestSchema(CamelModel):
    job_id: str = Field(..., min_length=1)
    amount: Decimal
    cost_type: Optional[str] = Field(default=None, description="labor, material, equipment, other")
    description: Optional[str] = Field(default=None)


class UpdateJobCostRequestSchema(CamelModel):
    amount: Optional[Decimal] = Field(default=None)
    cost_type: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
