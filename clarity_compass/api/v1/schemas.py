"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from clarity_compass.domain.models import (
    ConsortiumInput,
    Criterion,
    FinancingInput,
    Option,
)


# --- Calculations ---


class FinancingRequest(BaseModel):
    """Installment loan parameters"""

    total_value: float = Field(..., ge=0, description="Value of the asset")
    down_payment: float = Field(0, ge=0, description="Amount paid up front")
    interest_rate: float = Field(..., ge=0, description="Interest rate per month, in percent")
    installments: int = Field(..., ge=0, description="Number of monthly installments")

    def to_domain(self) -> FinancingInput:
        return FinancingInput(
            total_value=self.total_value,
            down_payment=self.down_payment,
            interest_rate=self.interest_rate,
            installments=self.installments,
        )


class ConsortiumRequest(BaseModel):
    """Pooled-purchase plan parameters"""

    total_value: float = Field(..., ge=0, description="Credit value of the consortium")
    admin_fee: float = Field(..., ge=0, description="Administrative fee, in percent")
    installments: int = Field(..., ge=0, description="Number of monthly installments")

    def to_domain(self) -> ConsortiumInput:
        return ConsortiumInput(
            total_value=self.total_value,
            admin_fee=self.admin_fee,
            installments=self.installments,
        )


class PaymentResponse(BaseModel):
    """Periodic payment and total cost. null stands for a non-finite payment"""

    monthly_payment: Optional[float]
    total_cost: Optional[float]


class ComparisonRequest(BaseModel):
    financing: FinancingRequest
    consortium: ConsortiumRequest


class FinancialTotalsResponse(BaseModel):
    financing_total: Optional[float]
    consortium_total: Optional[float]


class CriterionSchema(BaseModel):
    name: str
    weight: float

    def to_domain(self) -> Criterion:
        return Criterion(name=self.name, weight=self.weight)


class OptionSchema(BaseModel):
    name: str
    scores: Dict[str, float] = Field(default_factory=dict)

    def to_domain(self) -> Option:
        return Option(name=self.name, scores=dict(self.scores))


class WeightedScoresRequest(BaseModel):
    """Criteria and options may be null; the ranking is then empty"""

    criteria: Optional[List[CriterionSchema]] = None
    options: Optional[List[OptionSchema]] = None


class RankedResultSchema(BaseModel):
    name: str
    score: Optional[float]  # null when the weighted sum overflows


class WeightedScoresResponse(BaseModel):
    results: List[RankedResultSchema]


# --- Advice ---


class YesNoAdviceRequest(BaseModel):
    context: str = Field(..., min_length=10, description="Please provide more context for the decision.")


class MultipleChoiceOptionSchema(BaseModel):
    value: str = Field(..., min_length=1)
    description: Optional[str] = None


class MultipleChoiceAdviceRequest(BaseModel):
    context: str = Field(..., min_length=10, description="Please provide more context for the decision.")
    options: List[MultipleChoiceOptionSchema] = Field(..., min_length=2, description="At least two options")

    @field_validator("options", mode="before")
    @classmethod
    def drop_blank_options(cls, value: Any) -> Any:
        """Accept plain strings and discard blank entries before counting options"""
        if not isinstance(value, list):
            return value
        cleaned = []
        for opt in value:
            if isinstance(opt, str):
                opt = {"value": opt}
            if isinstance(opt, dict) and isinstance(opt.get("value"), str) and not opt["value"].strip():
                continue
            cleaned.append(opt)
        return cleaned


class FinancialWeightsRequest(BaseModel):
    context: str = Field(..., min_length=10, description="Please provide more context for the financial decision.")
    fixed_cost: Optional[float] = Field(None, ge=0)
    variable_cost: Optional[float] = Field(None, ge=0)


class FinancialSpendingAdviceRequest(BaseModel):
    context: str = Field(..., min_length=1, description="What is being bought, e.g. a car")
    financing: FinancingRequest
    consortium: ConsortiumRequest


class WeightedCriteriaRequest(BaseModel):
    context: Optional[str] = None
    existing_criteria: List[CriterionSchema] = Field(default_factory=list)
    existing_options: List[OptionSchema] = Field(default_factory=list)


class AdviceResponse(BaseModel):
    advice: str


class CostWeightSuggestionSchema(BaseModel):
    fixed_cost_weight: float
    variable_cost_weight: float
    rationale: str


class FinancialWeightsResponse(BaseModel):
    suggestions: List[CostWeightSuggestionSchema]


class FinancingSummarySchema(BaseModel):
    total_value: float
    down_payment: float
    interest_rate: float
    installments: int
    monthly_payment: Optional[float]
    total_cost: Optional[float]


class ConsortiumSummarySchema(BaseModel):
    total_value: float
    admin_fee: float
    installments: int
    monthly_payment: Optional[float]
    total_cost: Optional[float]


class FinancialSpendingAdviceResponse(BaseModel):
    advice: str
    financing: FinancingSummarySchema
    consortium: ConsortiumSummarySchema


class CriterionSuggestionSchema(BaseModel):
    name: str
    weight: float
    rationale: str


class WeightedCriteriaResponse(BaseModel):
    suggestions: List[CriterionSuggestionSchema]


# --- History ---


class YesNoDecisionCreate(BaseModel):
    type: Literal["Yes/No"]
    context: str = Field(..., min_length=1)
    decision: Literal["Yes", "No"]

    def history_fields(self) -> tuple[str, Optional[str], Dict[str, Any]]:
        return self.context, self.decision, {}


class MultipleChoiceDecisionCreate(BaseModel):
    type: Literal["Multiple Choice"]
    context: str = Field(..., min_length=1)
    options: List[str] = Field(default_factory=list)
    decision: str = Field(..., min_length=1)

    def history_fields(self) -> tuple[str, Optional[str], Dict[str, Any]]:
        return self.context, self.decision, {"options": self.options}


class FinancialSpendingDecisionCreate(MultipleChoiceDecisionCreate):
    type: Literal["Financial Spending"]


class WeightedAnalysisDecisionCreate(BaseModel):
    type: Literal["Weighted Analysis"]
    context: Optional[str] = None
    criteria: List[CriterionSchema]
    options: List[OptionSchema]
    decision: str = Field(..., min_length=1)

    def history_fields(self) -> tuple[str, Optional[str], Dict[str, Any]]:
        details = {
            "criteria": [c.model_dump() for c in self.criteria],
            "options": [o.model_dump() for o in self.options],
        }
        return self.context or "Weighted Analysis", self.decision, details


class FinancialAnalysisDecisionCreate(BaseModel):
    type: Literal["Financial Analysis"]
    context: str = Field(..., min_length=10)
    fixed_cost: float = Field(..., ge=0)
    variable_cost: float = Field(..., ge=0)

    def history_fields(self) -> tuple[str, Optional[str], Dict[str, Any]]:
        return self.context, None, {"fixed_cost": self.fixed_cost, "variable_cost": self.variable_cost}


DecisionCreate = Annotated[
    Union[
        YesNoDecisionCreate,
        MultipleChoiceDecisionCreate,
        FinancialSpendingDecisionCreate,
        WeightedAnalysisDecisionCreate,
        FinancialAnalysisDecisionCreate,
    ],
    Field(discriminator="type"),
]


class HistoryItem(BaseModel):
    """Single decision in history"""

    id: UUID
    type: str
    context: str
    date: datetime
    decision: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class HistoryResponse(BaseModel):
    decisions: List[HistoryItem]


class ClearHistoryResponse(BaseModel):
    deleted: int
