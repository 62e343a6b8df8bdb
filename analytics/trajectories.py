# Import required modules
import numpy as np
import pandas as pd
from models import BuyVsRentInput, BuyVsRentResult
from finance.taxes import monthly_cost_from_annual_percent, selling_costs

BUY_LABEL = "Buy Net Worth"
RENT_LABEL = "Rent & Invest Net Worth"


def yearly_dataframe(result: BuyVsRentResult) -> pd.DataFrame:
    """One row per simulated year with display column names."""
    rows = result.yearly_data
    return pd.DataFrame(
        {
            "Year": [y.year for y in rows],
            "Home Value": [y.home_value for y in rows],
            "Mortgage Balance": [y.mortgage_balance for y in rows],
            BUY_LABEL: [y.buying_net_worth for y in rows],
            "Buyer Monthly Cost": [y.buyer_monthly_expense for y in rows],
            "Buyer Cumulative Cost": [y.buyer_cumulative_expenses for y in rows],
            "Monthly Rent": [y.renter_monthly_rent for y in rows],
            "Renter Cumulative Cost": [y.rent_cumulative_expenses for y in rows],
            "Monthly Invested": [y.monthly_delta for y in rows],
            RENT_LABEL: [y.renting_net_worth for y in rows],
        }
    )


def wealth_trajectories(result: BuyVsRentResult) -> pd.DataFrame:
    """Long-format (Year, Scenario, Net Worth) frame for a grouped bar chart.

    Buy Net Worth = home value - mortgage balance (sale costs only in the final year).
    Rent & Invest Net Worth = brokerage balance.
    """
    df = yearly_dataframe(result)[["Year", BUY_LABEL, RENT_LABEL]]
    return pd.melt(
        df,
        id_vars=["Year"],
        value_vars=[BUY_LABEL, RENT_LABEL],
        var_name="Scenario",
        value_name="Net Worth",
    )


def winner_by_year(result: BuyVsRentResult) -> pd.DataFrame:
    """Yearly gap between the two paths (positive favours buying) and the leader."""
    df = yearly_dataframe(result)[["Year", BUY_LABEL, RENT_LABEL]].copy()
    df["Gap"] = df[BUY_LABEL] - df[RENT_LABEL]
    df["Leader"] = np.where(df["Gap"] > 0, "Buying", "Renting")
    return df


def cost_breakdown(inputs: BuyVsRentInput, res: BuyVsRentResult) -> pd.DataFrame:
    """Buyer's cash outlays over the horizon by category, for a pie chart.

    Recurring costs follow the engine's fixed-base policy.
    """
    years = max(0, inputs.duration_years)
    months = years * 12
    maintenance = (
        monthly_cost_from_annual_percent(inputs.home_price, inputs.maintenance_annual_percent)
        * months
    )
    property_tax = (
        monthly_cost_from_annual_percent(inputs.home_price, inputs.property_tax_annual_percent)
        * months
    )
    data = {
        "Category": [
            "Down payment",
            "Closing costs",
            "Renovation",
            "Mortgage interest",
            "Maintenance",
            "Property tax",
            "HOA fees",
            "Selling costs",
        ],
        "Amount": [
            inputs.down_payment,
            inputs.closing_costs,
            inputs.renovation_cost,
            res.total_interest_paid,
            maintenance,
            property_tax,
            inputs.hoa_monthly_fee * months,
            selling_costs(res.final_year.home_value, inputs.selling_costs_percent),
        ],
    }
    return pd.DataFrame(data)
