# Import required modules
import math
from dataclasses import dataclass, field
from typing import List, Optional

from models import BuyVsRentInput, BuyVsRentResult, YearlyData
from finance.taxes import monthly_cost_from_annual_percent
from formatting import format_currency, format_percentage


@dataclass(frozen=True)
class ComparisonRow:
    year: int
    home_value: float
    mortgage_balance: float
    home_equity: float
    portfolio_value: float
    better_by: float
    winner: str  # 'Buying' or 'Renting'


@dataclass(frozen=True)
class AmortizationYear:
    year: int
    principal_paid: float
    interest_paid: float
    mortgage_payment: float
    remaining_balance: float


@dataclass(frozen=True)
class TaxAnalysis:
    down_payment: float
    closing_costs: float
    total_property_tax: float
    average_property_tax: float
    closing_cost_recovery_year: Optional[int]
    investment_contributions: float
    final_portfolio: float
    investment_gains: float


@dataclass(frozen=True)
class DetailedReport:
    comparison_rows: List[ComparisonRow]
    amortization_rows: List[AmortizationYear]
    total_interest: float
    average_annual_interest: float
    interest_share_of_loan: float  # fraction of the mortgage principal
    tax: TaxAnalysis
    insights: List[str] = field(default_factory=list)


def sample_years(duration_years: int, start: int = 0) -> List[int]:
    """Every ceil(duration/10)-th year from `start`, always ending on the final year."""
    if duration_years < start:
        return []
    step = max(1, math.ceil(duration_years / 10))
    years = list(range(start, duration_years + 1, step))
    if years[-1] != duration_years:
        years.append(duration_years)
    return years


def _comparison_row(y: YearlyData) -> ComparisonRow:
    # Equity before selling costs, so every row is on the same footing
    equity = y.home_value - y.mortgage_balance
    gap = equity - y.renting_net_worth
    return ComparisonRow(
        year=y.year,
        home_value=y.home_value,
        mortgage_balance=y.mortgage_balance,
        home_equity=equity,
        portfolio_value=y.renting_net_worth,
        better_by=abs(gap),
        winner="Buying" if gap > 0 else "Renting",
    )


def _amortization_year(y: YearlyData) -> AmortizationYear:
    return AmortizationYear(
        year=y.year,
        principal_paid=y.principal_paid,
        interest_paid=y.interest_paid,
        mortgage_payment=y.principal_paid + y.interest_paid,
        remaining_balance=y.mortgage_balance,
    )


def _closing_cost_recovery_year(inputs: BuyVsRentInput, result: BuyVsRentResult) -> Optional[int]:
    """First year in which appreciation alone covers the closing costs."""
    for y in result.yearly_data[1:]:
        if y.home_value - inputs.home_price >= inputs.closing_costs:
            return y.year
    return None


def build_tax_analysis(inputs: BuyVsRentInput, result: BuyVsRentResult) -> TaxAnalysis:
    years = max(0, inputs.duration_years)
    # Same fixed-base policy as the engine
    property_tax_yearly = (
        monthly_cost_from_annual_percent(inputs.home_price, inputs.property_tax_annual_percent) * 12
    )
    total_property_tax = property_tax_yearly * years

    contributions = result.initial_cash_out
    for y in result.yearly_data[1:]:
        contributions += y.monthly_delta * 12
    final_portfolio = result.final_year.investment_portfolio

    return TaxAnalysis(
        down_payment=inputs.down_payment,
        closing_costs=inputs.closing_costs,
        total_property_tax=total_property_tax,
        average_property_tax=total_property_tax / years if years else 0.0,
        closing_cost_recovery_year=_closing_cost_recovery_year(inputs, result),
        investment_contributions=contributions,
        final_portfolio=final_portfolio,
        investment_gains=final_portfolio - contributions,
    )


def build_insights(
    inputs: BuyVsRentInput, result: BuyVsRentResult, tax: TaxAnalysis, currency: str = "EUR"
) -> List[str]:
    insights = []
    years = inputs.duration_years
    if result.mortgage_principal > 0:
        insights.append(
            f"You'll pay {format_currency(result.total_interest_paid, currency)} in interest over "
            f"{years} years - that's "
            f"{format_percentage(result.total_interest_paid / result.mortgage_principal)} "
            "of your loan amount"
        )
    if tax.closing_cost_recovery_year is not None:
        insights.append(
            f"Closing costs ({format_currency(tax.closing_costs, currency)}) are recovered in "
            f"{tax.closing_cost_recovery_year} years through home appreciation"
        )
    insights.append(
        f"By renting, you could accumulate {format_currency(tax.investment_gains, currency)} "
        "in investment gains"
    )
    if result.break_even_year is not None:
        insights.append(f"Buying overtakes renting in year {result.break_even_year}")
    else:
        insights.append(f"Buying never overtakes renting within {years} years")
    if result.mortgage_interest_tax_benefit > 0:
        insights.append(
            "Mortgage interest deduction adds "
            f"{format_currency(result.mortgage_interest_tax_benefit, currency)} to the buying path"
        )
    return insights


def build_report(
    inputs: BuyVsRentInput, result: BuyVsRentResult, currency: str = "EUR"
) -> DetailedReport:
    """Detailed report assembled from the engine's fields only.

    Interest and tax figures are never re-derived here; they come from the
    result so every consumer shows the same numbers.
    """
    by_year = {y.year: y for y in result.yearly_data}
    duration = result.final_year.year

    comparison = [_comparison_row(by_year[yr]) for yr in sample_years(duration)]
    amortization = [_amortization_year(by_year[yr]) for yr in sample_years(duration, start=1)]

    tax = build_tax_analysis(inputs, result)
    total_interest = result.total_interest_paid
    return DetailedReport(
        comparison_rows=comparison,
        amortization_rows=amortization,
        total_interest=total_interest,
        average_annual_interest=total_interest / duration if duration > 0 else 0.0,
        interest_share_of_loan=(
            total_interest / result.mortgage_principal if result.mortgage_principal else 0.0
        ),
        tax=tax,
        insights=build_insights(inputs, result, tax, currency),
    )
