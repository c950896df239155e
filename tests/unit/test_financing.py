"""Unit tests for financing and consortium calculations"""

import math
import pytest
from dataclasses import replace
from clarity_compass.domain.models import ConsortiumInput, FinancingInput
from clarity_compass.domain.financing import (
    calculate_consortium_monthly_payment,
    calculate_consortium_total,
    calculate_financing_monthly_payment,
    calculate_financing_total,
    compare_financial_totals,
    summarize_consortium,
    summarize_financing,
)


def test_financing_monthly_payment(car_financing: FinancingInput):
    """Test Price table installment: 40000 * 0.015 * 1.015^48 / (1.015^48 - 1)"""
    assert calculate_financing_monthly_payment(car_financing) == pytest.approx(1175.00, abs=0.01)


def test_financing_total(car_financing: FinancingInput):
    """Test total = down payment + 48 installments"""
    # 10000 + 1175.00 * 48 = 66400.0
    assert calculate_financing_total(car_financing) == pytest.approx(66400.00, abs=0.01)


def test_financing_zero_interest(car_financing: FinancingInput):
    """Test zero interest splits the principal evenly"""
    financing = replace(car_financing, interest_rate=0)

    assert calculate_financing_monthly_payment(financing) == pytest.approx((50000 - 10000) / 48)
    assert calculate_financing_total(financing) == pytest.approx(50000)


def test_financing_zero_installments(car_financing: FinancingInput):
    """Test zero installments: single payment of the principal, total is the down payment"""
    financing = replace(car_financing, installments=0)

    assert calculate_financing_monthly_payment(financing) == 40000
    assert calculate_financing_total(financing) == 10000


def test_financing_zero_interest_zero_installments_is_non_finite(car_financing: FinancingInput):
    """Test the division by zero surfaces as infinity instead of raising"""
    financing = replace(car_financing, interest_rate=0, installments=0)

    assert calculate_financing_monthly_payment(financing) == math.inf
    # down payment + inf * 0 is NaN, which resolves to 0
    assert calculate_financing_total(financing) == 0


def test_financing_down_payment_covers_value():
    """Test full payoff: no installment, total is the asset value"""
    financing = FinancingInput(total_value=30000, down_payment=35000, interest_rate=2, installments=24)

    assert calculate_financing_monthly_payment(financing) == 0
    assert calculate_financing_total(financing) == 30000


def test_financing_down_payment_equal_to_value():
    financing = FinancingInput(total_value=30000, down_payment=30000, interest_rate=0, installments=12)

    assert calculate_financing_total(financing) == 30000


def test_financing_huge_horizon_does_not_overflow():
    """Test a compound factor beyond float range resolves to 0 instead of raising"""
    financing = FinancingInput(total_value=1000, down_payment=0, interest_rate=100, installments=5000)

    assert calculate_financing_monthly_payment(financing) == 0
    assert calculate_financing_total(financing) == 0


def test_financing_nan_input_resolves_to_zero():
    financing = FinancingInput(total_value=math.nan, down_payment=0, interest_rate=1, installments=12)

    assert calculate_financing_monthly_payment(financing) == 0
    assert calculate_financing_total(financing) == 0


def test_consortium_total(car_consortium: ConsortiumInput):
    """Test flat admin fee: 50000 * 1.15"""
    assert calculate_consortium_total(car_consortium) == 57500


def test_consortium_monthly_payment(car_consortium: ConsortiumInput):
    """Test equal split: 57500 / 60"""
    assert calculate_consortium_monthly_payment(car_consortium) == pytest.approx(958.33, abs=0.01)


def test_consortium_zero_installments(car_consortium: ConsortiumInput):
    """Test zero installments guard against division by zero"""
    consortium = replace(car_consortium, installments=0)

    assert calculate_consortium_monthly_payment(consortium) == 0
    assert calculate_consortium_total(consortium) == 57500


def test_consortium_nan_input_resolves_to_zero():
    consortium = ConsortiumInput(total_value=50000, admin_fee=math.nan, installments=10)

    assert calculate_consortium_total(consortium) == 0
    assert calculate_consortium_monthly_payment(consortium) == 0


def test_summaries_carry_derived_figures(car_financing: FinancingInput, car_consortium: ConsortiumInput):
    financing = summarize_financing(car_financing)
    consortium = summarize_consortium(car_consortium)

    assert financing.installments == 48
    assert financing.monthly_payment == pytest.approx(1175.00, abs=0.01)
    assert financing.total_cost == pytest.approx(66400.00, abs=0.01)
    assert consortium.admin_fee == 15
    assert consortium.total_cost == 57500


def test_compare_financial_totals(car_financing: FinancingInput, car_consortium: ConsortiumInput):
    totals = compare_financial_totals(car_financing, car_consortium)

    assert totals.financing_total == pytest.approx(66400.00, abs=0.01)
    assert totals.consortium_total == 57500


def test_calculations_are_idempotent(car_financing: FinancingInput, car_consortium: ConsortiumInput):
    assert calculate_financing_total(car_financing) == calculate_financing_total(car_financing)
    assert calculate_consortium_monthly_payment(car_consortium) == calculate_consortium_monthly_payment(car_consortium)
