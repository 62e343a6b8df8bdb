from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class AmortizationRow:
    month: int
    interest: float
    principal: float
    balance: float


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def monthly_payment(principal: float, annual_rate_percent: float, years: int) -> float:
    """Fixed payment that amortizes `principal` to zero over `years`.

    Rates are percentages (3.5 means 3.5%). A zero rate is repaid linearly.
    """
    r = _monthly_rate(annual_rate_percent)
    n = years * 12
    if r == 0:
        return principal / n
    pow_ = (1 + r) ** n
    return principal * (r * pow_) / (pow_ - 1)


def remaining_balance(
    principal: float, payment: float, annual_rate_percent: float, months_paid: int
) -> float:
    """Outstanding balance after `months_paid` payments, from the closed form.

    The caller caps `months_paid` at the loan term and clamps the result,
    which can land slightly below zero once the loan has matured.
    """
    r = _monthly_rate(annual_rate_percent)
    if r == 0:
        return max(0.0, principal - payment * months_paid)
    pow_m = (1 + r) ** months_paid
    return principal * pow_m - payment * (pow_m - 1) / r


def amortization_schedule(
    principal: float, payment: float, annual_rate_percent: float, months: int
) -> List[AmortizationRow]:
    """Month-by-month interest/principal split for the first `months` payments."""
    r = _monthly_rate(annual_rate_percent)
    bal = principal
    rows = []
    for m in range(1, months + 1):
        interest = bal * r
        principal_part = payment - interest
        bal -= principal_part
        rows.append(AmortizationRow(m, interest, principal_part, bal))
    return rows


def total_interest(rows: List[AmortizationRow]) -> float:
    total = 0.0
    for row in rows:
        total += row.interest
    return total
