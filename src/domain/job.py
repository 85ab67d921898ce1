"""Job Domain Entity

A unit of field work performed for a customer. Invoices and job costs
reference jobs; this service keeps only the fields billing needs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class Job(BaseModel, table=True):
    """
    Job - Work order for a customer

    Domain Rules:
    - Belongs to exactly one account and one customer
    - status is free-form (lead, quoted, accepted, in_progress, completed, invoiced, paid)
    """

    __tablename__ = "jobs"
    __table_args__ = (
        Index('ix_jobs_account_id', 'account_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique job identifier (UUID)"
    )

    account_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Owning account ID"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Customer the work is performed for"
    )

    title: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Short job title"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    job_type: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="new_work, repair, maintenance, emergency"
    )

    status: str = Field(
        default="lead",
        sa_column=Column(String(30), nullable=False),
    )

    estimated_labor_hours: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
    )

    actual_labor_hours: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)

    updated_at: datetime = Field(default_factory=datetime.utcnow)
