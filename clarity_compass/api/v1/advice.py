"""POST /v1/advice/* - AI advice and suggestion endpoints"""

import logging
import time
from typing import Awaitable, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request

from clarity_compass.api.dependencies import get_advice_client, get_request_id
from clarity_compass.api.v1.calculations import finite_or_none
from clarity_compass.api.v1.schemas import (
    AdviceResponse,
    ConsortiumSummarySchema,
    CostWeightSuggestionSchema,
    CriterionSuggestionSchema,
    FinancialSpendingAdviceRequest,
    FinancialSpendingAdviceResponse,
    FinancialWeightsRequest,
    FinancialWeightsResponse,
    FinancingSummarySchema,
    MultipleChoiceAdviceRequest,
    WeightedCriteriaRequest,
    WeightedCriteriaResponse,
    YesNoAdviceRequest,
)
from clarity_compass.domain.exceptions import AdviceProviderError, InvalidAdviceResponseError
from clarity_compass.domain.financing import summarize_consortium, summarize_financing
from clarity_compass.infrastructure.clients.advisor import AdviceClient
from clarity_compass.infrastructure.observability.logging import log_advice
from clarity_compass.infrastructure.observability.metrics import record_advice

router = APIRouter()

ResultT = TypeVar("ResultT")


async def ask_provider(decision_type: str, request_id: str, call: Awaitable[ResultT]) -> ResultT:
    """
    Await one provider call, recording latency and outcome.

    Error mapping:
    - AdviceProviderError -> 503 (provider down, timed out or not configured)
    - InvalidAdviceResponseError -> 502 (provider answered garbage)
    - anything else -> 500
    """
    start_time = time.perf_counter()
    outcome = "success"
    try:
        return await call

    except AdviceProviderError as e:
        outcome = "provider_error"
        logging.error(f"Advice provider error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Advice service unavailable")

    except InvalidAdviceResponseError as e:
        outcome = "invalid_response"
        logging.error(f"Invalid advice response: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail="Advice service returned an invalid answer")

    except Exception as e:
        outcome = "error"
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    finally:
        duration = time.perf_counter() - start_time
        record_advice(decision_type, outcome, duration)
        log_advice(request_id, decision_type, outcome, duration * 1000)


@router.post("/advice/yes-no", response_model=AdviceResponse)
async def yes_no_advice(
    request_body: YesNoAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Advice on whether to answer Yes or No"""
    advice = await ask_provider(
        "Yes/No",
        get_request_id(request),
        advice_client.get_yes_no_advice(request_body.context),
    )
    return AdviceResponse(advice=advice)


@router.post("/advice/multiple-choice", response_model=AdviceResponse)
async def multiple_choice_advice(
    request_body: MultipleChoiceAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Advice on which of two or more options to pick"""
    options = [opt.model_dump() for opt in request_body.options]
    advice = await ask_provider(
        "Multiple Choice",
        get_request_id(request),
        advice_client.get_multiple_choice_advice(request_body.context, options),
    )
    return AdviceResponse(advice=advice)


@router.post("/advice/financial-weights", response_model=FinancialWeightsResponse)
async def financial_weights(
    request_body: FinancialWeightsRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Several fixed/variable cost weightings, each with a rationale"""
    suggestions = await ask_provider(
        "Financial Analysis",
        get_request_id(request),
        advice_client.suggest_financial_weights(
            request_body.context,
            fixed_cost=request_body.fixed_cost,
            variable_cost=request_body.variable_cost,
        ),
    )
    return FinancialWeightsResponse(
        suggestions=[
            CostWeightSuggestionSchema(
                fixed_cost_weight=s.fixed_cost_weight,
                variable_cost_weight=s.variable_cost_weight,
                rationale=s.rationale,
            )
            for s in suggestions
        ]
    )


@router.post("/advice/financial-spending", response_model=FinancialSpendingAdviceResponse)
async def financial_spending_advice(
    request_body: FinancialSpendingAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """
    Compare financing against consortium.

    Flow:
    1. Compute monthly payment and total cost of both options
    2. Send context plus both summaries to the advice provider
    3. Return the advice together with the computed summaries
    """
    financing = summarize_financing(request_body.financing.to_domain())
    consortium = summarize_consortium(request_body.consortium.to_domain())

    advice = await ask_provider(
        "Financial Spending",
        get_request_id(request),
        advice_client.get_financial_spending_advice(request_body.context, financing, consortium),
    )

    return FinancialSpendingAdviceResponse(
        advice=advice,
        financing=FinancingSummarySchema(
            total_value=financing.total_value,
            down_payment=financing.down_payment,
            interest_rate=financing.interest_rate,
            installments=financing.installments,
            monthly_payment=finite_or_none(financing.monthly_payment),
            total_cost=finite_or_none(financing.total_cost),
        ),
        consortium=ConsortiumSummarySchema(
            total_value=consortium.total_value,
            admin_fee=consortium.admin_fee,
            installments=consortium.installments,
            monthly_payment=finite_or_none(consortium.monthly_payment),
            total_cost=finite_or_none(consortium.total_cost),
        ),
    )


@router.post("/advice/weighted-criteria", response_model=WeightedCriteriaResponse)
async def weighted_criteria(
    request_body: WeightedCriteriaRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Criteria (name, weight, rationale) to add to a weighted analysis"""
    suggestions = await ask_provider(
        "Weighted Analysis",
        get_request_id(request),
        advice_client.suggest_weighted_criteria(
            request_body.context,
            criteria=[c.to_domain() for c in request_body.existing_criteria],
            options=[o.to_domain() for o in request_body.existing_options],
        ),
    )
    return WeightedCriteriaResponse(
        suggestions=[CriterionSuggestionSchema(name=s.name, weight=s.weight, rationale=s.rationale) for s in suggestions]
    )
