from dataclasses import dataclass, field
from typing import Dict

from models import BuyVsRentInput


@dataclass(frozen=True)
class Scenario:
    key: str
    label: str
    description: str
    overrides: Dict[str, float] = field(default_factory=dict)


DEFAULT_SCENARIO = "normal"

SCENARIOS = {
    "normal": Scenario(
        "normal",
        "Normal",
        "Current market conditions with baseline assumptions",
    ),
    "roaring20s": Scenario(
        "roaring20s",
        "Roaring 20s",
        "Bull market: 15% stocks, 5% home appreciation, 1% rent growth",
        {
            "investment_return_annual": 15.0,
            "home_appreciation_annual": 5.0,
            "rent_growth_annual_percent": 1.0,
        },
    ),
    "lostDecade": Scenario(
        "lostDecade",
        "Lost Decade",
        "Stagnant market: 0% stocks, 1% home appreciation, 5% rent growth",
        {
            "investment_return_annual": 0.0,
            "home_appreciation_annual": 1.0,
            "rent_growth_annual_percent": 5.0,
        },
    ),
    "crash2008": Scenario(
        "crash2008",
        "2008 Crash",
        "Market crash: -50% stocks, -30% property values, 3% rent growth",
        {
            "investment_return_annual": -50.0,
            "home_appreciation_annual": -30.0,
            "rent_growth_annual_percent": 3.0,
        },
    ),
}


def apply_scenario(inputs: BuyVsRentInput, key: str) -> BuyVsRentInput:
    """Return a copy of `inputs` with the stress-test overrides for `key`.

    Raises KeyError for an unknown scenario.
    """
    scenario = SCENARIOS[key]
    if not scenario.overrides:
        return inputs
    return inputs.replace(**scenario.overrides)
