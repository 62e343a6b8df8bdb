import logging
from typing import Tuple

logger = logging.getLogger(__name__)

CURRENCY = "EUR"
DEFAULT_COUNTRY = "DE"

DEFAULT_INPUTS = {
    "home_price": 400000.0,
    "duration_years": 10,
    "home_appreciation_annual": 3.0,  # percentage
    "down_payment_percent": 20.0,  # percentage
    "mortgage_rate_percent": 3.5,  # percentage
    "mortgage_period_years": 25,
    "closing_costs_percent": 11.5,  # percentage
    "renovation_cost": 25000.0,
    "hoa_monthly_fee": 200.0,
    "maintenance_annual_percent": 1.0,  # percentage
    "property_tax_annual_percent": 0.21,  # percentage
    "selling_costs_percent": 3.5,  # percentage
    "mortgage_interest_deduction_percent": 0.0,  # percentage
    "monthly_rent": 1500.0,
    "rent_growth_annual_percent": 2.0,  # percentage
    "investment_return_annual": 7.0,  # percentage
    "investment_tax_rate_percent": 15.0,  # percentage
}

# Buying (closing) costs, property tax and selling costs, all in percent
MARKET_DEFAULTS = {
    "OTHER": {"name": "Other Country", "buying_costs": 3.0, "property_tax": 1.1, "selling_costs": 6.0},
    # Western & Central Europe
    "DE": {"name": "Germany", "buying_costs": 11.5, "property_tax": 0.21, "selling_costs": 3.5},
    "FR": {"name": "France", "buying_costs": 7.5, "property_tax": 0.98, "selling_costs": 5.0},
    "AT": {"name": "Austria", "buying_costs": 10.5, "property_tax": 0.1, "selling_costs": 3.5},
    "BE": {"name": "Belgium", "buying_costs": 14.5, "property_tax": 0.62, "selling_costs": 3.0},
    "NL": {"name": "Netherlands", "buying_costs": 2.5, "property_tax": 0.51, "selling_costs": 1.5},
    "CH": {"name": "Switzerland", "buying_costs": 2.5, "property_tax": 0.08, "selling_costs": 2.0},
    "LU": {"name": "Luxembourg", "buying_costs": 9.5, "property_tax": 0.05, "selling_costs": 3.0},
    # Southern Europe
    "GR": {"name": "Greece", "buying_costs": 8.5, "property_tax": 1.13, "selling_costs": 2.5},
    "IT": {"name": "Italy", "buying_costs": 9.0, "property_tax": 0.62, "selling_costs": 3.0},
    "ES": {"name": "Spain", "buying_costs": 11.5, "property_tax": 0.58, "selling_costs": 5.0},
    "PT": {"name": "Portugal", "buying_costs": 8.5, "property_tax": 0.41, "selling_costs": 5.0},
    "CY": {"name": "Cyprus", "buying_costs": 5.0, "property_tax": 0.0, "selling_costs": 5.0},
    "MT": {"name": "Malta", "buying_costs": 5.0, "property_tax": 0.0, "selling_costs": 5.0},
    # Nordics
    "SE": {"name": "Sweden", "buying_costs": 3.5, "property_tax": 0.35, "selling_costs": 2.5},
    "NO": {"name": "Norway", "buying_costs": 3.6, "property_tax": 0.21, "selling_costs": 2.5},
    "DK": {"name": "Denmark", "buying_costs": 2.5, "property_tax": 0.75, "selling_costs": 2.0},
    "FI": {"name": "Finland", "buying_costs": 4.0, "property_tax": 0.38, "selling_costs": 3.5},
    # Central & Eastern Europe
    "PL": {"name": "Poland", "buying_costs": 4.5, "property_tax": 0.95, "selling_costs": 3.0},
    "CZ": {"name": "Czech Republic", "buying_costs": 4.5, "property_tax": 0.1, "selling_costs": 3.5},
    "HU": {"name": "Hungary", "buying_costs": 5.5, "property_tax": 0.25, "selling_costs": 4.0},
    "RO": {"name": "Romania", "buying_costs": 3.5, "property_tax": 0.15, "selling_costs": 3.0},
    "HR": {"name": "Croatia", "buying_costs": 4.5, "property_tax": 0.25, "selling_costs": 3.0},
    "BG": {"name": "Bulgaria", "buying_costs": 5.0, "property_tax": 0.2, "selling_costs": 2.5},
    # Ireland & UK
    "IE": {"name": "Ireland", "buying_costs": 4.5, "property_tax": 0.29, "selling_costs": 2.0},
    "UK": {"name": "United Kingdom", "buying_costs": 5.5, "property_tax": 1.94, "selling_costs": 3.0},
    # North America
    "US": {"name": "USA (National Avg)", "buying_costs": 3.0, "property_tax": 1.1, "selling_costs": 6.0},
}

# (min, max, step) for each input widget
SLIDER_CONFIG = {
    "home_price": (50000.0, 10000000.0, 10000.0),
    "duration_years": (1, 50, 1),
    "home_appreciation_annual": (-5.0, 10.0, 0.5),
    "down_payment_percent": (0.0, 50.0, 1.0),
    "mortgage_rate_percent": (0.0, 15.0, 0.1),
    "mortgage_period_years": (5, 50, 1),
    "closing_costs_percent": (0.0, 20.0, 0.5),
    "renovation_cost": (0.0, 500000.0, 5000.0),
    "hoa_monthly_fee": (0.0, 1000.0, 50.0),
    "maintenance_annual_percent": (0.0, 3.0, 0.1),
    "property_tax_annual_percent": (0.0, 3.0, 0.01),
    "selling_costs_percent": (0.0, 10.0, 0.5),
    "mortgage_interest_deduction_percent": (0.0, 100.0, 1.0),
    "monthly_rent": (100.0, 10000.0, 50.0),
    "rent_growth_annual_percent": (-5.0, 10.0, 0.5),
    "investment_return_annual": (-5.0, 20.0, 0.5),
    "investment_tax_rate_percent": (0.0, 50.0, 1.0),
}


def market_defaults(country: str) -> dict:
    """Preset for `country`, falling back to the default market."""
    return MARKET_DEFAULTS.get(country, MARKET_DEFAULTS[DEFAULT_COUNTRY])


def clamp_to_slider(name: str, value) -> Tuple[float, bool]:
    """`value` pulled into the widget range for `name`, and whether it moved.

    Values from a shared link can sit outside the widget range. The widget
    cannot show them, so they are clamped and logged.
    """
    lo, hi, _ = SLIDER_CONFIG[name]
    clamped = type(lo)(min(max(value, lo), hi))
    changed = clamped != value
    if changed:
        logger.warning("Clamped %s from %r to %r to fit the input range", name, value, clamped)
    return clamped, changed
