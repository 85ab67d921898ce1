"""Data Transfer Objects for Job Costing Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import Field
from src.app.use_cases.dto_base import CamelModel
from src.domain.job_cost import JobCost
from src.domain.job_costing import CostBucket


class CreateJobCostCommandDTO(CamelModel):
    """Command DTO for adding a cost entry to a job"""

    job_id: str
    amount: Decimal
    cost_type: Optional[str] = Field(default=None, description="labor, material, equipment, other")
    description: Optional[str] = Field(default=None)


class UpdateJobCostCommandDTO(CamelModel):
    """
    Command DTO for a partial cost entry update

    None and empty strings leave the stored value unchanged.
    """

    job_cost_id: str
    amount: Optional[Decimal] = Field(default=None)
    cost_type: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)


class JobCostResponseDTO(CamelModel):
    id: str
    job_id: str
    amount: Decimal
    cost_type: str
    description: str
    created_at: datetime

    @classmethod
    def from_entity(cls, job_cost: JobCost) -> "JobCostResponseDTO":
        return cls(
            id=job_cost.id,
            job_id=job_cost.job_id,
            amount=job_cost.amount,
            cost_type=job_cost.cost_type,
            description=job_cost.description,
            created_at=job_cost.created_at,
        )


class CostBreakdownDTO(CamelModel):
    type: str
    count: int
    total: Decimal

    @classmethod
    def from_bucket(cls, bucket: CostBucket) -> "CostBreakdownDTO":
        return cls(type=bucket.type, count=bucket.count, total=bucket.total)


class JobCostAnalysisDTO(CamelModel):
    """
    Per-job profitability

    estimated_revenue is the invoice total when invoice_id is set,
    otherwise total_cost marked up by the fallback markup.
    """

    job_id: str
    total_cost: Decimal
    cost_items: int
    estimated_revenue: Decimal
    estimated_profit: Decimal
    profit_margin: Decimal = Field(..., description="Profit as a percentage of revenue")
    invoice_id: Optional[str] = None
    cost_breakdown: List[CostBreakdownDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "jobId": "9e8d7c6b-5a49-4837-a625-14f3e2d1c0b9",
                "totalCost": "150.000000",
                "costItems": 2,
                "estimatedRevenue": "202.5000000",
                "estimatedProfit": "52.5000000",
                "profitMargin": "25.92592592592592592592592593",
                "invoiceId": None,
                "costBreakdown": [
                    {"type": "labor", "count": 1, "total": "100.000000"},
                    {"type": "material", "count": 1, "total": "50.000000"}
                ]
            }
        }


class JobCostSummaryDTO(CamelModel):
    total_jobs_with_costs: int
    total_cost_items: int
    total_cost: Decimal
    average_job_cost: Decimal
    cost_breakdown: List[CostBreakdownDTO] = Field(default_factory=list)
