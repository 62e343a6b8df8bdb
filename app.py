import logging

import streamlit as st
import pandas as pd
import altair as alt

from config import CURRENCY, DEFAULT_COUNTRY, DEFAULT_INPUTS, MARKET_DEFAULTS, SLIDER_CONFIG, clamp_to_slider
from models import BuyVsRentInput, validate_inputs
from formatting import format_currency, format_number, format_percentage
from sharing import QUERY_KEYS, decode_query_params, decode_scenario, encode_query_params
from analytics.simulation import compute
from analytics.scenarios import DEFAULT_SCENARIO, SCENARIOS, apply_scenario
from analytics.report import build_report
from analytics.trajectories import (
    BUY_LABEL,
    RENT_LABEL,
    cost_breakdown,
    wealth_trajectories,
    yearly_dataframe,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Buy vs Rent Calculator", page_icon="🏠", layout="wide")


@st.cache_data(show_spinner=False, max_entries=256)
def cached_compute(params: tuple):
    # keyed on the input record; compute is pure so caching only saves time
    return compute(BuyVsRentInput(**dict(params)))


def money(value: float) -> str:
    return format_currency(value, CURRENCY)


# names of prefilled values that had to be pulled into their widget range
clamped_fields = []


def clamp(name: str, value):
    value, changed = clamp_to_slider(name, value)
    if changed:
        clamped_fields.append(name)
    return value


def slider(label: str, name: str, value, help: str = None, key: str = None):
    lo, hi, step = SLIDER_CONFIG[name]
    return st.slider(label, lo, hi, clamp(name, value), step, help=help, key=key)


# ------------------------- Shared link prefill -------------------------

query = dict(st.query_params)
if any(k in query for k in QUERY_KEYS):
    shared_inputs, shared_country = decode_query_params(query)
    prefill = shared_inputs.to_dict()
    shared_scenario = decode_scenario(query)
    logger.info("Prefilled inputs from shared link (country=%s, scenario=%s)", shared_country, shared_scenario)
else:
    prefill = dict(DEFAULT_INPUTS)
    shared_country = None
    shared_scenario = DEFAULT_SCENARIO

# ------------------------- UI LAYOUT -------------------------

st.title("🏠 Buy vs Rent Calculator")

left, right = st.columns([1, 3], gap="large")

with left:
    st.markdown("### Property")
    countries = list(MARKET_DEFAULTS)
    country = st.selectbox(
        "Market",
        countries,
        index=countries.index(shared_country or DEFAULT_COUNTRY),
        format_func=lambda c: MARKET_DEFAULTS[c]["name"],
        help="Sets typical closing costs, property tax and selling costs for the country",
    )
    market = MARKET_DEFAULTS[country]
    from_link = shared_country == country

    home_price = st.number_input(
        "Home price", min_value=SLIDER_CONFIG["home_price"][0], max_value=SLIDER_CONFIG["home_price"][1],
        value=clamp("home_price", prefill["home_price"]), step=SLIDER_CONFIG["home_price"][2], format="%.0f",
        help="Purchase price of the property",
    )
    duration_years = slider("Analysis duration (years)", "duration_years", prefill["duration_years"])
    home_appreciation = slider(
        "Home appreciation (annual %)", "home_appreciation_annual", prefill["home_appreciation_annual"],
        help="Expected annual change in home value; may be negative",
    )

    st.markdown("#### Mortgage")
    down_payment = slider("Down payment (% of price)", "down_payment_percent", prefill["down_payment_percent"])
    mortgage_rate = slider("Mortgage rate (annual %)", "mortgage_rate_percent", prefill["mortgage_rate_percent"])
    mortgage_period = slider("Mortgage period (years)", "mortgage_period_years", prefill["mortgage_period_years"])

    st.markdown("#### Buying costs")
    closing_costs = slider(
        "Closing costs (% of price)", "closing_costs_percent",
        prefill["closing_costs_percent"] if from_link else market["buying_costs"],
        help="Notary, registration, transfer taxes", key=f"closing_{country}",
    )
    renovation = st.number_input(
        "Renovation / EPC upgrade", min_value=0.0, value=float(prefill["renovation_cost"]), step=5000.0,
        format="%.0f", help="One-time cost at purchase",
    )
    hoa = slider("HOA / building fee (monthly)", "hoa_monthly_fee", prefill["hoa_monthly_fee"])
    maintenance = slider(
        "Maintenance (annual % of price)", "maintenance_annual_percent", prefill["maintenance_annual_percent"]
    )
    property_tax = slider(
        "Property tax (annual % of price)", "property_tax_annual_percent",
        prefill["property_tax_annual_percent"] if from_link else market["property_tax"],
        key=f"property_tax_{country}",
    )
    selling = slider(
        "Selling costs (% of sale price)", "selling_costs_percent",
        prefill["selling_costs_percent"] if from_link else market["selling_costs"],
        key=f"selling_{country}",
    )
    deduction = slider(
        "Mortgage interest deduction (%)", "mortgage_interest_deduction_percent",
        prefill["mortgage_interest_deduction_percent"],
        help="Share of mortgage interest refunded through taxes; 0 in most EU countries",
    )

    st.markdown("#### Renting & investing")
    rent = slider("Monthly rent (first year)", "monthly_rent", prefill["monthly_rent"])
    rent_growth = slider("Rent growth (annual %)", "rent_growth_annual_percent", prefill["rent_growth_annual_percent"])
    investment_return = slider(
        "Investment return (annual %)", "investment_return_annual", prefill["investment_return_annual"],
        help="Nominal return on the renter's portfolio",
    )
    investment_tax = slider(
        "Investment tax rate (%)", "investment_tax_rate_percent", prefill["investment_tax_rate_percent"],
        help="Applied to each month's portfolio growth",
    )

    inputs = BuyVsRentInput(
        home_price=home_price, duration_years=duration_years, home_appreciation_annual=home_appreciation,
        down_payment_percent=down_payment, mortgage_rate_percent=mortgage_rate,
        mortgage_period_years=mortgage_period, closing_costs_percent=closing_costs, renovation_cost=renovation,
        hoa_monthly_fee=hoa, maintenance_annual_percent=maintenance, property_tax_annual_percent=property_tax,
        selling_costs_percent=selling, mortgage_interest_deduction_percent=deduction, monthly_rent=rent,
        rent_growth_annual_percent=rent_growth, investment_return_annual=investment_return,
        investment_tax_rate_percent=investment_tax,
    )

with right:
    if clamped_fields:
        st.info("Some values from the shared link were outside the input ranges and were adjusted: "
                + ", ".join(clamped_fields))
    problems = validate_inputs(inputs)
    for problem in problems:
        st.warning(problem)

    # ---- Stress test ----
    scenario_key = st.radio(
        "Stress test scenario", list(SCENARIOS), horizontal=True,
        index=list(SCENARIOS).index(shared_scenario),
        format_func=lambda k: SCENARIOS[k].label,
    )
    st.caption(SCENARIOS[scenario_key].description)
    scenario_inputs = apply_scenario(inputs, scenario_key)
    logger.debug("Recomputing with scenario %s", scenario_key)

    res = cached_compute(tuple(sorted(scenario_inputs.to_dict().items())))

    # ---- Summary verdict ----
    st.markdown("### Summary verdict")
    if res.buying_wins:
        st.success(f"**Buying wins** by {money(abs(res.difference))} after {inputs.duration_years} years")
    else:
        st.error(f"**Renting & investing wins** by {money(abs(res.difference))} after {inputs.duration_years} years")

    col1, col2, col3 = st.columns(3)
    col1.metric("Buying net worth", money(res.final_buying_net_worth), border=True,
                help="Home value - mortgage - selling costs + mortgage interest tax benefit")
    col2.metric("Renting net worth", money(res.final_renting_net_worth), border=True,
                help="Value of the renter's investment portfolio")
    col3.metric("Break-even year", str(res.break_even_year) if res.break_even_year is not None else "Never",
                border=True, help="First year buying net worth exceeds renting net worth")

    # ---- Breakdown ----
    st.markdown("### Breakdown")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Down payment", money(inputs.down_payment), border=True)
    m2.metric("Closing costs", money(inputs.closing_costs), border=True)
    m3.metric("Monthly mortgage", money(res.monthly_mortgage_payment), border=True,
              help=f"Fixed payment on a {money(res.mortgage_principal)} loan")
    m4.metric("Interest paid (horizon)", money(res.total_interest_paid), border=True)

    m5, m6, m7, m8 = st.columns(4)
    m5.metric("Total buying costs", money(res.total_buying_costs), border=True,
              help="Initial cash out plus all monthly housing costs")
    m6.metric("Total rent paid", money(res.total_renting_costs), border=True)
    m7.metric("Buyer monthly cost (yr 1)", money(res.yearly_data[min(1, len(res.yearly_data) - 1)].buyer_monthly_expense),
              border=True)
    m8.metric("Interest tax benefit", money(res.mortgage_interest_tax_benefit), border=True)

    # ---- Charts ----
    chart_left, chart_right = st.columns([2, 1], gap="medium")

    with chart_left:
        st.markdown("### Net worth over time")
        melted = wealth_trajectories(res)
        bar_chart = alt.Chart(melted).mark_bar().encode(
            x=alt.X("Year:O", title="Year", axis=alt.Axis(labelAngle=0)),
            y=alt.Y("Net Worth:Q", title="Net worth", axis=alt.Axis(format=",.0f")),
            color=alt.Color("Scenario:N", scale=alt.Scale(domain=[BUY_LABEL, RENT_LABEL], range=["#4F46E5", "#06B6D4"]),
                            legend=alt.Legend(orient="bottom", titleLimit=0)),
            xOffset="Scenario:N",
            tooltip=[alt.Tooltip("Year:O"), alt.Tooltip("Scenario:N"), alt.Tooltip("Net Worth:Q", format=",.0f")],
        ).properties(height=400)
        st.altair_chart(bar_chart, use_container_width=True)
        st.caption("Selling costs are only deducted from buying net worth in the final year.")

    with chart_right:
        st.markdown("### Buying cost mix")
        odf = cost_breakdown(scenario_inputs, res)
        pie_chart = alt.Chart(odf[odf["Amount"] > 0]).mark_arc(innerRadius=50, outerRadius=120).encode(
            theta=alt.Theta("Amount:Q"),
            color=alt.Color("Category:N", legend=alt.Legend(orient="left", titleLimit=0, labelLimit=0)),
            tooltip=["Category:N", alt.Tooltip("Amount:Q", format=",.0f")],
        )
        st.altair_chart(pie_chart, use_container_width=False)

    # ---- Year by year ----
    with st.expander("📅 Year-by-year data"):
        ydf = yearly_dataframe(res)
        st.dataframe(ydf.set_index("Year").style.format("{:,.0f}"), use_container_width=True)

    # ---- Detailed report ----
    st.markdown("### Detailed report")
    report = build_report(scenario_inputs, res, CURRENCY)

    st.markdown("**📊 Year-by-year investment comparison**")
    st.dataframe(pd.DataFrame([
        {
            "Year": row.year,
            "Home value": money(row.home_value),
            "Mortgage balance": money(row.mortgage_balance),
            "Home equity": money(row.home_equity),
            "Portfolio value": money(row.portfolio_value),
            "Better by": f"{row.winner} {money(row.better_by)}",
        }
        for row in report.comparison_rows
    ]), hide_index=True, use_container_width=True)

    st.markdown("**💰 Amortization schedule**")
    st.dataframe(pd.DataFrame([
        {
            "Year": row.year,
            "Principal paid": money(row.principal_paid),
            "Interest paid": money(row.interest_paid),
            "Mortgage payments": money(row.mortgage_payment),
            "Remaining balance": money(row.remaining_balance),
        }
        for row in report.amortization_rows
    ]), hide_index=True, use_container_width=True)
    i1, i2, i3 = st.columns(3)
    i1.metric(f"Total interest over {inputs.duration_years} years", money(report.total_interest))
    i2.metric("Average annual interest", money(report.average_annual_interest))
    i3.metric("Interest as share of loan", format_percentage(report.interest_share_of_loan))

    st.markdown("**🧾 Tax implications**")
    t1, t2, t3, t4 = st.columns(4)
    t1.metric("Closing costs", money(report.tax.closing_costs),
              help=f"{format_number(scenario_inputs.closing_costs_percent, 1)}% of the price")
    t2.metric("Property tax (horizon)", money(report.tax.total_property_tax),
              help=f"Average {money(report.tax.average_property_tax)}/year")
    t3.metric("Closing costs recovered", f"Year {report.tax.closing_cost_recovery_year}"
              if report.tax.closing_cost_recovery_year is not None else "Not within horizon")
    t4.metric("Investment gains (renting)", money(report.tax.investment_gains),
              help=f"Portfolio {money(report.tax.final_portfolio)} less {money(report.tax.investment_contributions)} invested")

    st.markdown("**💡 Key insights**")
    st.markdown("\n".join(f"- {line}" for line in report.insights))

    # ---- Share ----
    st.markdown("### Share this report")
    params = encode_query_params(inputs, country, scenario_key)
    if st.button("Create shareable link"):
        st.query_params.from_dict(params)
        st.success("The page address now encodes these inputs. Copy it from the browser bar to share.")

# ---- FAQ Section ----
st.markdown("---")
st.markdown("## ❓ FAQ")

with st.expander("📐 How are the calculations performed?"):
    st.markdown("""
    **Buying:** you pay the down payment, closing costs and renovation up front, then a fixed monthly
    housing cost (mortgage payment, maintenance, property tax and HOA fee). Net worth is home value minus
    the outstanding mortgage; selling costs are deducted in the final year. Any mortgage interest
    deduction is added once, at the end.

    **Renting:** the renter invests the same up-front amount, and every month also invests whatever the
    buyer's monthly cost exceeds the rent by. The portfolio compounds monthly at the after-tax return.
    """)
    st.latex(r"""
    \text{Payment} = P \cdot \frac{r(1+r)^n}{(1+r)^n - 1}
    """)
    st.latex(r"""
    \text{Portfolio}_{m+1} = \text{Portfolio}_m \cdot \left(1 + \tfrac{R}{12}(1 - \tau)\right) + \max(0, \text{Buy}_m - \text{Rent}_m)
    """)

with st.expander("🏠 Why are maintenance and property tax fixed?"):
    st.markdown("""
    Maintenance and property tax are computed once from the purchase price and held constant for the
    whole horizon. The detailed report uses the same figures, so every number on this page agrees.
    """)

st.caption("This tool is a decision aid, not financial advice.")
