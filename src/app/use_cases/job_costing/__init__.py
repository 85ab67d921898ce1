"""Job costing use cases"""
from .manage_job_costs import (
    CreateJobCost,
    GetJobCost,
    ListJobCosts,
    UpdateJobCost,
    DeleteJobCost,
)
from .analyze_job_costs import AnalyzeJobCosts, SummarizeJobCosts
from .dtos import (
    CreateJobCostCommandDTO,
    UpdateJobCostCommandDTO,
    JobCostResponseDTO,
    CostBreakdownDTO,
    JobCostAnalysisDTO,
    JobCostSummaryDTO,
)

__all__ = [
    "CreateJobCost",
    "GetJobCost",
    "ListJobCosts",
    "UpdateJobCost",
    "DeleteJobCost",
    "AnalyzeJobCosts",
    "SummarizeJobCosts",
    "CreateJobCostCommandDTO",
    "UpdateJobCostCommandDTO",
    "JobCostResponseDTO",
    "CostBreakdownDTO",
    "JobCostAnalysisDTO",
    "JobCostSummaryDTO",
]
