"""Shareable report links.

An input set travels as URL query parameters so a report can be reopened
(or sent to someone else) and recomputed to the identical result. Floats are
written with ``repr`` which round-trips exactly through ``float()``.
"""

import logging
import math
from typing import Any, Dict, Mapping, Tuple
from urllib.parse import urlencode

from config import DEFAULT_COUNTRY, DEFAULT_INPUTS, MARKET_DEFAULTS
from models import BuyVsRentInput
from analytics.scenarios import DEFAULT_SCENARIO, SCENARIOS

logger = logging.getLogger(__name__)

# query key -> input field
QUERY_KEYS = {
    "homePrice": "home_price",
    "duration": "duration_years",
    "appreciation": "home_appreciation_annual",
    "downPayment": "down_payment_percent",
    "mortgageRate": "mortgage_rate_percent",
    "mortgagePeriod": "mortgage_period_years",
    "closingCosts": "closing_costs_percent",
    "renovationCost": "renovation_cost",
    "hoaMonthly": "hoa_monthly_fee",
    "maintenanceAnnual": "maintenance_annual_percent",
    "propertyTax": "property_tax_annual_percent",
    "sellingCosts": "selling_costs_percent",
    "mortgageDeduction": "mortgage_interest_deduction_percent",
    "rent": "monthly_rent",
    "rentGrowth": "rent_growth_annual_percent",
    "investmentReturn": "investment_return_annual",
    "investmentTaxRate": "investment_tax_rate_percent",
}

INT_FIELDS = {"duration_years", "mortgage_period_years"}


def _encode_value(value: Any) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


def encode_query_params(
    inputs: BuyVsRentInput, country: str = DEFAULT_COUNTRY, scenario: str = DEFAULT_SCENARIO
) -> Dict[str, str]:
    """Query parameters for `inputs` as entered, before any stress test.

    The stress-test scenario travels separately so the recipient applies the
    same overrides and sees the same numbers.
    """
    params = {"country": country, "scenario": scenario}
    for key, name in QUERY_KEYS.items():
        params[key] = _encode_value(getattr(inputs, name))
    return params


def build_share_url(
    base_url: str,
    inputs: BuyVsRentInput,
    country: str = DEFAULT_COUNTRY,
    scenario: str = DEFAULT_SCENARIO,
) -> str:
    return f"{base_url}?{urlencode(encode_query_params(inputs, country, scenario))}"


def _first(value: Any) -> Any:
    # parse_qs-style mappings hold lists
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _to_number(raw: Any, name: str) -> Any:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    if name in INT_FIELDS:
        # "25" and "25.0" are both whole years; "12.5" is not
        if not value.is_integer():
            raise ValueError(f"{name} must be a whole number")
        return int(value)
    return value


def _parse(raw: Any, name: str, default: Any) -> Any:
    if raw is None or raw == "":
        return default
    try:
        return _to_number(raw, name)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid value %r for %s; using default %r", raw, name, default)
        return default


def decode_scenario(params: Mapping[str, Any]) -> str:
    """Stress-test scenario named in the query parameters, `normal` if absent or unknown."""
    scenario = _first(params.get("scenario")) or DEFAULT_SCENARIO
    if scenario not in SCENARIOS:
        logger.warning("Unknown scenario %r in query parameters; using %s", scenario, DEFAULT_SCENARIO)
        return DEFAULT_SCENARIO
    return scenario


def decode_query_params(params: Mapping[str, Any]) -> Tuple[BuyVsRentInput, str]:
    """Rebuild the input set (and market country) from query parameters.

    Never raises on bad values: anything missing, unparseable or non-finite
    falls back to the defaults, with the country preset supplying closing
    costs, property tax and selling costs.
    """
    country = _first(params.get("country")) or DEFAULT_COUNTRY
    if country not in MARKET_DEFAULTS:
        logger.warning("Unknown country %r in query parameters; using %s", country, DEFAULT_COUNTRY)
        country = DEFAULT_COUNTRY
    market = MARKET_DEFAULTS[country]

    defaults = dict(DEFAULT_INPUTS)
    defaults["closing_costs_percent"] = market["buying_costs"]
    defaults["property_tax_annual_percent"] = market["property_tax"]
    defaults["selling_costs_percent"] = market["selling_costs"]

    values = {}
    for key, name in QUERY_KEYS.items():
        values[name] = _parse(_first(params.get(key)), name, defaults[name])
    return BuyVsRentInput(**values), country
