import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

from finance.taxes import percent_of


@dataclass(frozen=True)
class BuyVsRentInput:
    # Property
    home_price: float
    duration_years: int  # 1..50
    home_appreciation_annual: float  # percentage, may be negative
    # Mortgage
    down_payment_percent: float
    mortgage_rate_percent: float
    mortgage_period_years: int
    # Buying costs
    closing_costs_percent: float
    renovation_cost: float
    hoa_monthly_fee: float
    maintenance_annual_percent: float
    property_tax_annual_percent: float
    selling_costs_percent: float
    mortgage_interest_deduction_percent: float
    # Renting
    monthly_rent: float
    rent_growth_annual_percent: float
    # Investment
    investment_return_annual: float
    investment_tax_rate_percent: float

    @property
    def down_payment(self) -> float:
        return percent_of(self.home_price, self.down_payment_percent)

    @property
    def closing_costs(self) -> float:
        return percent_of(self.home_price, self.closing_costs_percent)

    @property
    def initial_cash_out(self) -> float:
        """Cash the buyer spends up front; the renter invests the same amount."""
        return self.down_payment + self.closing_costs + self.renovation_cost

    @property
    def mortgage_principal(self) -> float:
        return self.home_price - self.down_payment

    def replace(self, **changes: Any) -> "BuyVsRentInput":
        return BuyVsRentInput(**{**asdict(self), **changes})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BuyVsRentInput":
        return cls(**dict(data))


@dataclass(frozen=True)
class YearlyData:
    year: int  # 0 = purchase date, n = end of year n
    # Buying path
    home_value: float
    mortgage_balance: float
    buying_net_worth: float  # equity; selling costs deducted in the final year only
    buyer_cumulative_expenses: float
    buyer_monthly_expense: float
    # Renting path
    rent_cumulative_expenses: float
    renter_monthly_rent: float
    investment_portfolio: float
    renting_net_worth: float
    # Monthly surplus the renter invests (never negative)
    monthly_delta: float
    # Mortgage split for this year, from the monthly schedule
    interest_paid: float = 0.0
    principal_paid: float = 0.0


@dataclass(frozen=True)
class BuyVsRentResult:
    yearly_data: Tuple[YearlyData, ...]
    break_even_year: Optional[int]
    buying_wins: bool
    final_buying_net_worth: float
    final_renting_net_worth: float
    difference: float  # positive favours buying
    total_buying_costs: float
    total_renting_costs: float
    mortgage_principal: float = 0.0
    monthly_mortgage_payment: float = 0.0
    initial_cash_out: float = 0.0
    total_interest_paid: float = 0.0
    mortgage_interest_tax_benefit: float = 0.0

    @property
    def final_year(self) -> YearlyData:
        return self.yearly_data[-1]

    @property
    def winner(self) -> str:
        return "buying" if self.buying_wins else "renting"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["yearly_data"] = [asdict(y) for y in self.yearly_data]
        return data


def input_field_names() -> List[str]:
    return [f.name for f in fields(BuyVsRentInput)]


def validate_inputs(inputs: BuyVsRentInput) -> List[str]:
    """Human-readable problems with an input set.

    The engine never calls this; it is for the presentation layer, which
    decides what to show. An empty list means the inputs are in range.
    """
    problems = []
    if inputs.home_price <= 0:
        problems.append("Home price must be greater than zero.")
    if not 1 <= inputs.duration_years <= 50:
        problems.append("Analysis duration must be between 1 and 50 years.")
    if inputs.mortgage_period_years < 1:
        problems.append("Mortgage period must be at least 1 year.")
    if not 0 <= inputs.down_payment_percent <= 100:
        problems.append("Down payment must be between 0% and 100% of the price.")
    for f in fields(BuyVsRentInput):
        value = getattr(inputs, f.name)
        if not math.isfinite(value):
            problems.append(f"{f.name} must be a finite number.")
    return problems
