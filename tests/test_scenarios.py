import pytest

from analytics.scenarios import SCENARIOS, apply_scenario
from analytics.simulation import compute


def test_normal_leaves_inputs_untouched(default_inputs):
    assert apply_scenario(default_inputs, "normal") == default_inputs


@pytest.mark.parametrize(
    "key, stocks, homes, rent",
    [
        ("roaring20s", 15.0, 5.0, 1.0),
        ("lostDecade", 0.0, 1.0, 5.0),
        ("crash2008", -50.0, -30.0, 3.0),
    ],
)
def test_overrides(default_inputs, key, stocks, homes, rent):
    adjusted = apply_scenario(default_inputs, key)
    assert adjusted.investment_return_annual == stocks
    assert adjusted.home_appreciation_annual == homes
    assert adjusted.rent_growth_annual_percent == rent
    assert adjusted.home_price == default_inputs.home_price
    assert adjusted.monthly_rent == default_inputs.monthly_rent
    # original is untouched
    assert default_inputs.investment_return_annual == 7.0


def test_unknown_scenario(default_inputs):
    with pytest.raises(KeyError):
        apply_scenario(default_inputs, "moonshot")


def test_every_scenario_computes(default_inputs):
    for key in SCENARIOS:
        res = compute(apply_scenario(default_inputs, key))
        assert len(res.yearly_data) == default_inputs.duration_years + 1
