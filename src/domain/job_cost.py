"""Job Cost Domain Entity

Expense line item attributed to a job, independent of invoicing.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class CostType(str, Enum):
    """Well-known cost types (cost_type itself is free-form)"""
    LABOR = "labor"
    MATERIAL = "material"
    EQUIPMENT = "equipment"
    OTHER = "other"


class JobCost(BaseModel, table=True):
    """
    Job Cost - Ad-hoc expense entry for a job

    Domain Rules:
    - Many entries per job, no upper bound
    - cost_type defaults to "other"
    """

    __tablename__ = "job_costs"
    __table_args__ = (
        Index('ix_job_costs_job_id', 'job_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique job cost identifier (UUID)"
    )

    job_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Job the expense is attributed to"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
    )

    cost_type: str = Field(
        default=CostType.OTHER.value,
        sa_column=Column(String(50), nullable=False),
        description="labor, material, equipment, other (free-form)"
    )

    description: str = Field(
        default="",
        sa_column=Column(Text, nullable=False),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
