def percent_of(amount: float, percent: float) -> float:
    """`percent` of `amount`, with percent given as 3.5 for 3.5%."""
    return amount * (percent / 100)


def monthly_cost_from_annual_percent(value: float, annual_percent: float) -> float:
    """
    Monthly share of an annual cost quoted as a percentage of a value.

    Used for maintenance and property tax. The engine applies it to the
    ORIGINAL purchase price once and holds the result constant for the whole
    horizon (fixed-base recurring costs); the detailed report follows the
    same policy so both agree.
    """
    return (value * annual_percent) / 100 / 12


def after_tax_monthly_return(annual_return_percent: float, tax_rate_percent: float) -> float:
    """
    Monthly portfolio growth rate after investment tax.

    Tax is a multiplicative haircut on each month's growth, not on principal
    or on withdrawal:
        (annual / 100 / 12) * (1 - tax / 100)
    A negative return stays negative; the haircut then shrinks the loss too.
    """
    monthly_return = annual_return_percent / 100 / 12
    return monthly_return * (1 - tax_rate_percent / 100)


def mortgage_interest_tax_benefit(total_interest_paid: float, deduction_percent: float) -> float:
    """
    Lump-sum refund of mortgage interest at the deduction rate.

    Applied once to the final buying net worth, never as a monthly cash-flow
    reduction. Most EU markets deduct nothing (0%).
    """
    return total_interest_paid * (deduction_percent / 100)


def selling_costs(home_value: float, selling_costs_percent: float) -> float:
    """Agent and transfer fees on exit, charged on the final home value."""
    return home_value * (selling_costs_percent / 100)
