"""Tests for the amortization helpers."""

import pytest

from finance.mortgage import (
    amortization_schedule,
    monthly_payment,
    remaining_balance,
    total_interest,
)


class TestMonthlyPayment:
    def test_matches_amortization_formula(self):
        r = 3.5 / 100 / 12
        pow_ = (1 + r) ** 300
        expected = 320000 * (r * pow_) / (pow_ - 1)
        assert monthly_payment(320000, 3.5, 25) == expected

    def test_known_value(self):
        # 320k at 3.5% over 25 years is roughly 1,602/month
        assert monthly_payment(320000, 3.5, 25) == pytest.approx(1602.0, abs=1.0)

    def test_zero_rate_is_linear(self):
        assert monthly_payment(360000, 0.0, 30) == 360000 / 360

    def test_higher_rate_means_higher_payment(self):
        assert monthly_payment(300000, 6.0, 25) > monthly_payment(300000, 3.0, 25)

    def test_shorter_term_means_higher_payment(self):
        assert monthly_payment(300000, 4.0, 15) > monthly_payment(300000, 4.0, 30)


class TestRemainingBalance:
    def test_nothing_paid_is_full_principal(self):
        pmt = monthly_payment(320000, 3.5, 25)
        assert remaining_balance(320000, pmt, 3.5, 0) == 320000

    def test_non_increasing_and_reaches_zero(self):
        pmt = monthly_payment(320000, 3.5, 25)
        balances = [max(0.0, remaining_balance(320000, pmt, 3.5, m)) for m in range(301)]
        for earlier, later in zip(balances, balances[1:]):
            assert later <= earlier
        assert balances[-1] == pytest.approx(0.0, abs=1e-4)

    def test_zero_rate_decreases_linearly(self):
        pmt = monthly_payment(120000, 0.0, 10)
        for m in (0, 1, 60, 119):
            assert remaining_balance(120000, pmt, 0.0, m) == pytest.approx(120000 - 1000 * m)
        assert remaining_balance(120000, pmt, 0.0, 120) == 0.0

    def test_zero_rate_never_negative(self):
        pmt = monthly_payment(120000, 0.0, 10)
        assert remaining_balance(120000, pmt, 0.0, 200) == 0.0

    def test_agrees_with_monthly_schedule(self):
        pmt = monthly_payment(250000, 4.2, 20)
        rows = amortization_schedule(250000, pmt, 4.2, 120)
        assert rows[-1].balance == pytest.approx(remaining_balance(250000, pmt, 4.2, 120), rel=1e-9)


class TestAmortizationSchedule:
    def test_row_count_and_months(self):
        pmt = monthly_payment(100000, 5.0, 10)
        rows = amortization_schedule(100000, pmt, 5.0, 24)
        assert len(rows) == 24
        assert [r.month for r in rows] == list(range(1, 25))

    def test_interest_plus_principal_is_payment(self):
        pmt = monthly_payment(100000, 5.0, 10)
        for row in amortization_schedule(100000, pmt, 5.0, 120):
            assert row.interest + row.principal == pytest.approx(pmt)

    def test_first_month_interest(self):
        pmt = monthly_payment(100000, 6.0, 10)
        first = amortization_schedule(100000, pmt, 6.0, 1)[0]
        assert first.interest == pytest.approx(500.0)

    def test_full_term_interest_is_total_paid_minus_principal(self):
        pmt = monthly_payment(200000, 4.0, 30)
        rows = amortization_schedule(200000, pmt, 4.0, 360)
        assert total_interest(rows) == pytest.approx(pmt * 360 - 200000, rel=1e-9)

    def test_zero_months(self):
        assert amortization_schedule(100000, 1000.0, 5.0, 0) == []
        assert total_interest([]) == 0.0

    def test_zero_rate_has_no_interest(self):
        pmt = monthly_payment(60000, 0.0, 5)
        assert total_interest(amortization_schedule(60000, pmt, 0.0, 60)) == 0.0
