"""AnalyzeJobCosts and SummarizeJobCosts Use Cases

Profitability of one job, and cost totals across all jobs.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.job_cost_repository import JobCostRepository
from src.app.repositories.job_repository import JobRepository
from src.domain.job_costing import analyze_job_costs, summarize_job_costs, DEFAULT_MARKUP
from src.domain.billing import to_decimal
from .dtos import JobCostAnalysisDTO, JobCostSummaryDTO, CostBreakdownDTO

logger = logging.getLogger(__name__)


class AnalyzeJobCosts:
    """
    Use Case: Per-job cost analysis

    Business Rules:
    1. The job must exist
    2. Revenue is the total of the job's earliest invoice, if any;
       otherwise total_cost * markup
    3. profit_margin = profit / revenue * 100, or 0 when revenue is 0
    """

    def __init__(
        self,
        job_cost_repo: JobCostRepository,
        job_repo: JobRepository,
        invoice_repo: InvoiceRepository,
        markup: Decimal = DEFAULT_MARKUP,
    ):
        self.job_cost_repo = job_cost_repo
        self.job_repo = job_repo
        self.invoice_repo = invoice_repo
        self.markup = to_decimal(markup)

    async def execute(self, job_id: str) -> Result[JobCostAnalysisDTO]:
        try:
            job = await self.job_repo.get_by_id(job_id)
            if not job:
                return Return.err(
                    Error(
                        code="JOB_NOT_FOUND",
                        message=f"Job with ID {job_id} not found",
                        reason="Job does not exist",
                    )
                )

            costs = await self.job_cost_repo.list_by_job(job_id)
            invoice = await self.invoice_repo.get_first_for_job(job_id)

            analysis = analyze_job_costs(
                costs,
                invoice_total=invoice.total_amount if invoice else None,
                markup=self.markup,
            )

            return Return.ok(
                JobCostAnalysisDTO(
                    job_id=job_id,
                    total_cost=analysis.total_cost,
                    cost_items=analysis.cost_items,
                    estimated_revenue=analysis.estimated_revenue,
                    estimated_profit=analysis.estimated_profit,
                    profit_margin=analysis.profit_margin,
                    invoice_id=invoice.id if invoice else None,
                    cost_breakdown=[
                        CostBreakdownDTO.from_bucket(b) for b in analysis.cost_breakdown
                    ],
                )
            )

        except Exception as e:
            logger.exception(f"Failed to analyze costs for job {job_id}")
            return Return.err(
                Error(
                    code="JOB_COST_ANALYSIS_FAILED",
                    message="Error fetching job cost analysis",
                    reason=str(e),
                )
            )


class SummarizeJobCosts:
    """Use Case: Cost overview across all jobs"""

    def __init__(self, job_cost_repo: JobCostRepository):
        self.job_cost_repo = job_cost_repo

    async def execute(self) -> Result[JobCostSummaryDTO]:
        try:
            costs = await self.job_cost_repo.list_all()
            summary = summarize_job_costs(costs)

            return Return.ok(
                JobCostSummaryDTO(
                    total_jobs_with_costs=summary.total_jobs_with_costs,
                    total_cost_items=summary.total_cost_items,
                    total_cost=summary.total_cost,
                    average_job_cost=summary.average_job_cost,
                    cost_breakdown=[
                        CostBreakdownDTO.from_bucket(b) for b in summary.cost_breakdown
                    ],
                )
            )

        except Exception as e:
            logger.exception("Failed to summarize job costs")
            return Return.err(
                Error(
                    code="JOB_COST_SUMMARY_FAILED",
                    message="Error fetching cost summary",
                    reason=str(e),
                )
            )
