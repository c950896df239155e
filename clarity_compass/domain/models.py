"""Domain models - pure Python dataclasses representing decision-support entities"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping
from uuid import UUID


@dataclass(frozen=True)
class FinancingInput:
    """Installment loan parameters"""

    total_value: float
    down_payment: float
    interest_rate: float  # percent per period
    installments: int


@dataclass(frozen=True)
class ConsortiumInput:
    """Pooled-purchase plan parameters"""

    total_value: float
    admin_fee: float  # percent over total_value
    installments: int


@dataclass(frozen=True)
class FinancialTotals:
    """Total cost of each financial option, side by side"""

    financing_total: float
    consortium_total: float


@dataclass(frozen=True)
class FinancingSummary:
    """Financing inputs plus the derived payment figures"""

    total_value: float
    down_payment: float
    interest_rate: float
    installments: int
    monthly_payment: float
    total_cost: float


@dataclass(frozen=True)
class ConsortiumSummary:
    """Consortium inputs plus the derived payment figures"""

    total_value: float
    admin_fee: float
    installments: int
    monthly_payment: float
    total_cost: float


@dataclass(frozen=True)
class Criterion:
    """Named dimension of comparison weighted in percent (0-100)"""

    name: str
    weight: float


@dataclass(frozen=True)
class Option:
    """Named alternative with a score (0-10) per criterion name"""

    name: str
    scores: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RankedResult:
    """Weighted score of one option; list position is the rank"""

    name: str
    score: float


@dataclass(frozen=True)
class CriterionSuggestion:
    """Criterion proposed by the advice provider for a weighted analysis"""

    name: str
    weight: float
    rationale: str


@dataclass(frozen=True)
class CostWeightSuggestion:
    """Fixed/variable cost weighting proposed by the advice provider"""

    fixed_cost_weight: float
    variable_cost_weight: float
    rationale: str


@dataclass
class DecisionRecord:
    """Final decision kept in the local history"""

    id: UUID
    type: str  # Yes/No, Multiple Choice, Weighted Analysis, Financial Analysis, Financial Spending
    context: str
    date: datetime
    decision: str | None = None
    details: Dict[str, Any] = field(default_factory=dict)

