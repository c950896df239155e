"""Amortization calculator for financing (installment loan) and consortium (pooled purchase)"""

from clarity_compass.domain.models import (
    ConsortiumInput,
    ConsortiumSummary,
    FinancialTotals,
    FinancingInput,
    FinancingSummary,
)
from clarity_compass.utils.math_utils import compound_growth, ieee_divide, nan_to_zero


def calculate_financing_monthly_payment(financing: FinancingInput) -> float:
    """
    Fixed installment of a financing plan (Price table / annuity schedule).

    Formula:
        M = P * [r(1+r)^n] / [(1+r)^n - 1]
        P = total_value - down_payment, r = interest_rate / 100, n = installments

    Degenerate inputs resolve to a number, never an exception:
    - interest_rate == 0: straight division P / n. With n == 0 the result is
      non-finite (inf, or nan when P == 0) and is returned as-is
    - P <= 0: 0 (down payment covers the purchase)
    - n == 0: P (single immediate payment)
    - NaN from the formula: 0

    Example:
        50000 total, 10000 down, 1.5% per month, 48 installments -> 1175.00
    """
    principal = financing.total_value - financing.down_payment

    if financing.interest_rate == 0:
        return ieee_divide(principal, financing.installments)

    rate = financing.interest_rate / 100
    if principal <= 0:
        return 0.0
    if financing.installments == 0:
        return principal

    growth = compound_growth(rate, financing.installments)
    monthly_payment = principal * ieee_divide(rate * growth, growth - 1)

    return nan_to_zero(monthly_payment)


def calculate_financing_total(financing: FinancingInput) -> float:
    """
    Total paid over the life of a financing plan: down payment + all installments.

    A down payment at or above the total value means the purchase is already
    covered, so no interest accrues and the total is the purchase value.
    """
    if financing.down_payment >= financing.total_value:
        return financing.total_value

    monthly_payment = calculate_financing_monthly_payment(financing)
    total_paid = financing.down_payment + monthly_payment * financing.installments

    return nan_to_zero(total_paid)


def calculate_consortium_total(consortium: ConsortiumInput) -> float:
    """
    Total paid in a consortium: value plus flat administrative fee (no interest).

    total_value * (1 + admin_fee / 100), expanded so whole-number inputs stay
    exact (50000 at 15% is 57500, not 57499.99999999999).
    """
    total = consortium.total_value + consortium.total_value * consortium.admin_fee / 100
    return nan_to_zero(total)


def calculate_consortium_monthly_payment(consortium: ConsortiumInput) -> float:
    """Equal split of the consortium total; 0 when there are no installments"""
    if consortium.installments == 0:
        return 0.0

    total_cost = calculate_consortium_total(consortium)
    return nan_to_zero(total_cost / consortium.installments)


def summarize_financing(financing: FinancingInput) -> FinancingSummary:
    return FinancingSummary(
        total_value=financing.total_value,
        down_payment=financing.down_payment,
        interest_rate=financing.interest_rate,
        installments=financing.installments,
        monthly_payment=calculate_financing_monthly_payment(financing),
        total_cost=calculate_financing_total(financing),
    )


def summarize_consortium(consortium: ConsortiumInput) -> ConsortiumSummary:
    return ConsortiumSummary(
        total_value=consortium.total_value,
        admin_fee=consortium.admin_fee,
        installments=consortium.installments,
        monthly_payment=calculate_consortium_monthly_payment(consortium),
        total_cost=calculate_consortium_total(consortium),
    )


def compare_financial_totals(financing: FinancingInput, consortium: ConsortiumInput) -> FinancialTotals:
    """Total cost of both options for a side-by-side comparison"""
    return FinancialTotals(
        financing_total=calculate_financing_total(financing),
        consortium_total=calculate_consortium_total(consortium),
    )
