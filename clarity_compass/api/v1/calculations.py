"""POST /v1/calculations/* - deterministic financing, consortium and weighted-score calculators"""

import math
from typing import Optional
from fastapi import APIRouter

from clarity_compass.api.v1.schemas import (
    ComparisonRequest,
    ConsortiumRequest,
    FinancialTotalsResponse,
    FinancingRequest,
    PaymentResponse,
    RankedResultSchema,
    WeightedScoresRequest,
    WeightedScoresResponse,
)
from clarity_compass.domain.financing import (
    calculate_consortium_monthly_payment,
    calculate_consortium_total,
    calculate_financing_monthly_payment,
    calculate_financing_total,
    compare_financial_totals,
)
from clarity_compass.domain.scoring import calculate_weighted_scores
from clarity_compass.infrastructure.observability.metrics import record_calculation

router = APIRouter()


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no infinity; a non-finite figure goes out as null"""
    return value if math.isfinite(value) else None


@router.post("/calculations/financing", response_model=PaymentResponse)
def calculate_financing(request_body: FinancingRequest):
    """Monthly installment and total cost of a financing plan"""
    financing = request_body.to_domain()
    record_calculation("financing")

    return PaymentResponse(
        monthly_payment=finite_or_none(calculate_financing_monthly_payment(financing)),
        total_cost=finite_or_none(calculate_financing_total(financing)),
    )


@router.post("/calculations/consortium", response_model=PaymentResponse)
def calculate_consortium(request_body: ConsortiumRequest):
    """Monthly installment and total cost of a consortium"""
    consortium = request_body.to_domain()
    record_calculation("consortium")

    return PaymentResponse(
        monthly_payment=finite_or_none(calculate_consortium_monthly_payment(consortium)),
        total_cost=finite_or_none(calculate_consortium_total(consortium)),
    )


@router.post("/calculations/comparison", response_model=FinancialTotalsResponse)
def compare_totals(request_body: ComparisonRequest):
    totals = compare_financial_totals(request_body.financing.to_domain(), request_body.consortium.to_domain())
    record_calculation("comparison")

    return FinancialTotalsResponse(
        financing_total=finite_or_none(totals.financing_total),
        consortium_total=finite_or_none(totals.consortium_total),
    )


@router.post("/calculations/weighted-scores", response_model=WeightedScoresResponse)
def rank_options(request_body: WeightedScoresRequest):
    """
    Rank options by weighted score, best first.

    Returns:
        Empty list when criteria are missing/empty or options are missing
    """
    criteria = [c.to_domain() for c in request_body.criteria] if request_body.criteria is not None else None
    options = [o.to_domain() for o in request_body.options] if request_body.options is not None else None
    record_calculation("weighted_scores")

    ranking = calculate_weighted_scores(criteria, options)

    return WeightedScoresResponse(
        results=[RankedResultSchema(name=r.name, score=finite_or_none(r.score)) for r in ranking],
    )
