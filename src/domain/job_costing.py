"""Job Cost Aggregator

Pure functions summing job cost entries, bucketing them by cost type and
estimating profitability against invoiced revenue.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from src.domain.billing import ZERO, to_decimal, Number

DEFAULT_MARKUP = Decimal("1.35")


@dataclass(frozen=True)
class CostBucket:
    type: str
    count: int
    total: Decimal


@dataclass(frozen=True)
class JobCostAnalysis:
    total_cost: Decimal
    cost_items: int
    estimated_revenue: Decimal
    estimated_profit: Decimal
    profit_margin: Decimal
    has_invoice: bool
    cost_breakdown: List[CostBucket] = field(default_factory=list)


@dataclass(frozen=True)
class JobCostSummary:
    total_jobs_with_costs: int
    total_cost_items: int
    total_cost: Decimal
    average_job_cost: Decimal
    cost_breakdown: List[CostBucket] = field(default_factory=list)


def group_by_cost_type(costs: Iterable) -> List[CostBucket]:
    """Count and subtotal per cost type, in order of first appearance"""
    counts: Dict[str, int] = {}
    totals: Dict[str, Decimal] = {}
    for cost in costs:
        counts[cost.cost_type] = counts.get(cost.cost_type, 0) + 1
        totals[cost.cost_type] = totals.get(cost.cost_type, ZERO) + to_decimal(cost.amount)
    return [CostBucket(type=t, count=counts[t], total=totals[t]) for t in counts]


def analyze_job_costs(
    costs: Iterable,
    invoice_total: Optional[Number] = None,
    markup: Number = DEFAULT_MARKUP,
) -> JobCostAnalysis:
    """
    Estimate profitability of a single job

    Revenue is the invoice total when the job has been invoiced, otherwise
    total_cost * markup. The margin is 0 whenever revenue is 0, including an
    invoice whose total is 0.
    """
    costs = list(costs)
    total_cost = sum((to_decimal(c.amount) for c in costs), ZERO)

    if invoice_total is not None:
        estimated_revenue = to_decimal(invoice_total)
    else:
        estimated_revenue = total_cost * to_decimal(markup)

    estimated_profit = estimated_revenue - total_cost
    if estimated_revenue != 0:
        profit_margin = estimated_profit / estimated_revenue * 100
    else:
        profit_margin = ZERO

    return JobCostAnalysis(
        total_cost=total_cost,
        cost_items=len(costs),
        estimated_revenue=estimated_revenue,
        estimated_profit=estimated_profit,
        profit_margin=profit_margin,
        has_invoice=invoice_total is not None,
        cost_breakdown=group_by_cost_type(costs),
    )


def summarize_job_costs(costs: Iterable) -> JobCostSummary:
    """Totals across all jobs, with the average cost per distinct job"""
    costs = list(costs)
    total_cost = sum((to_decimal(c.amount) for c in costs), ZERO)
    total_jobs = len({c.job_id for c in costs})

    return JobCostSummary(
        total_jobs_with_costs=total_jobs,
        total_cost_items=len(costs),
        total_cost=total_cost,
        average_job_cost=total_cost / total_jobs if total_jobs > 0 else ZERO,
        cost_breakdown=group_by_cost_type(costs),
    )
