# Import required modules
from models import BuyVsRentInput, BuyVsRentResult, YearlyData
from finance.mortgage import (
    amortization_schedule,
    monthly_payment,
    remaining_balance,
    total_interest,
)
from finance.taxes import (
    after_tax_monthly_return,
    monthly_cost_from_annual_percent,
    mortgage_interest_tax_benefit,
    selling_costs,
)


def compute(inputs: BuyVsRentInput) -> BuyVsRentResult:
    """Year-by-year projection of buying with a mortgage vs renting and investing.

    BUYER: pays down payment + closing costs + renovation up front, then a fixed
    monthly housing cost (mortgage + maintenance + property tax + HOA). Net worth
    is home value minus outstanding mortgage, less selling costs in the final year.

    RENTER: invests the buyer's initial cash out, then each month invests any
    surplus of the buyer's monthly cost over rent. The portfolio compounds monthly
    at the after-tax return. Net worth is the portfolio value.

    Pure: no validation, no I/O, identical output for identical input.
    """
    yearly = []
    break_even_year = None

    # Setup
    initial_cash_out = inputs.initial_cash_out
    principal = inputs.mortgage_principal
    A = monthly_payment(principal, inputs.mortgage_rate_percent, inputs.mortgage_period_years)

    # Fixed-base recurring costs: computed off the purchase price, held constant
    maintenance_monthly = monthly_cost_from_annual_percent(
        inputs.home_price, inputs.maintenance_annual_percent
    )
    property_tax_monthly = monthly_cost_from_annual_percent(
        inputs.home_price, inputs.property_tax_annual_percent
    )
    growth_m = after_tax_monthly_return(
        inputs.investment_return_annual, inputs.investment_tax_rate_percent
    )

    # Exact monthly walk over the months that fall inside the horizon
    term_months = inputs.mortgage_period_years * 12
    paid_months = max(0, min(inputs.duration_years * 12, term_months))
    schedule = amortization_schedule(principal, A, inputs.mortgage_rate_percent, paid_months)

    brokerage = initial_cash_out
    buyer_outflow = initial_cash_out
    renter_outflow = 0.0

    for year in range(inputs.duration_years + 1):
        # Re-derived from the purchase price each year, not compounded in place
        home_value = inputs.home_price * ((1 + inputs.home_appreciation_annual / 100) ** year)

        months_paid = min(year * 12, term_months)
        balance = max(
            0.0, remaining_balance(principal, A, inputs.mortgage_rate_percent, months_paid)
        )

        rent_m = inputs.monthly_rent * ((1 + inputs.rent_growth_annual_percent / 100) ** year)

        # Interest deduction is NOT netted here; it is a lump sum at the end
        buyer_monthly = A + maintenance_monthly + property_tax_monthly + inputs.hoa_monthly_fee

        # Only a non-negative surplus is invested (no borrowing modelled)
        delta_m = max(0.0, buyer_monthly - rent_m)

        interest_y = 0.0
        principal_y = 0.0
        if year > 0:
            renter_outflow += rent_m * 12
            for _ in range(12):
                brokerage *= 1 + growth_m
                brokerage += delta_m
            buyer_outflow += buyer_monthly * 12

            for row in schedule[(year - 1) * 12 : year * 12]:
                interest_y += row.interest
                principal_y += row.principal

        if year == inputs.duration_years:
            buy_nw = home_value - balance - selling_costs(home_value, inputs.selling_costs_percent)
        else:
            buy_nw = home_value - balance
        rent_nw = brokerage

        # First crossing only
        if break_even_year is None and year > 0 and buy_nw > rent_nw:
            break_even_year = year

        yearly.append(
            YearlyData(
                year=year,
                home_value=home_value,
                mortgage_balance=balance,
                buying_net_worth=buy_nw,
                buyer_cumulative_expenses=buyer_outflow,
                buyer_monthly_expense=buyer_monthly,
                rent_cumulative_expenses=renter_outflow,
                renter_monthly_rent=rent_m,
                investment_portfolio=brokerage,
                renting_net_worth=rent_nw,
                monthly_delta=delta_m,
                interest_paid=interest_y,
                principal_paid=principal_y,
            )
        )

    final = yearly[-1]
    interest_paid = total_interest(schedule)
    tax_benefit = mortgage_interest_tax_benefit(
        interest_paid, inputs.mortgage_interest_deduction_percent
    )
    final_buying = final.buying_net_worth + tax_benefit
    final_renting = final.renting_net_worth

    return BuyVsRentResult(
        yearly_data=tuple(yearly),
        break_even_year=break_even_year,
        buying_wins=final_buying > final_renting,
        final_buying_net_worth=final_buying,
        final_renting_net_worth=final_renting,
        difference=final_buying - final_renting,
        total_buying_costs=final.buyer_cumulative_expenses,
        total_renting_costs=final.rent_cumulative_expenses,
        mortgage_principal=principal,
        monthly_mortgage_payment=A,
        initial_cash_out=initial_cash_out,
        total_interest_paid=interest_paid,
        mortgage_interest_tax_benefit=tax_benefit,
    )
