import pytest

from finance.taxes import (
    after_tax_monthly_return,
    monthly_cost_from_annual_percent,
    mortgage_interest_tax_benefit,
    percent_of,
    selling_costs,
)


def test_percent_of():
    assert percent_of(400000, 20) == pytest.approx(80000)
    assert percent_of(400000, 0) == 0


def test_monthly_cost_from_annual_percent():
    # 1% of 400k per year
    assert monthly_cost_from_annual_percent(400000, 1.0) == pytest.approx(400000 / 100 / 12)


def test_after_tax_monthly_return_haircuts_growth():
    assert after_tax_monthly_return(12.0, 0.0) == pytest.approx(0.01)
    assert after_tax_monthly_return(12.0, 25.0) == pytest.approx(0.0075)


def test_after_tax_monthly_return_negative_market():
    assert after_tax_monthly_return(-12.0, 50.0) == pytest.approx(-0.005)


def test_mortgage_interest_tax_benefit():
    assert mortgage_interest_tax_benefit(100000, 30) == pytest.approx(30000)
    assert mortgage_interest_tax_benefit(100000, 0) == 0


def test_selling_costs():
    assert selling_costs(500000, 3.5) == pytest.approx(17500)
