import pytest

from config import DEFAULT_INPUTS
from models import BuyVsRentInput


@pytest.fixture
def default_inputs() -> BuyVsRentInput:
    return BuyVsRentInput(**DEFAULT_INPUTS)


@pytest.fixture
def buying_favoured(default_inputs) -> BuyVsRentInput:
    # Fast appreciation, idle portfolio, rent above the buyer's monthly cost
    return default_inputs.replace(
        home_appreciation_annual=8.0,
        investment_return_annual=0.0,
        monthly_rent=3000.0,
    )


@pytest.fixture
def renting_favoured(default_inputs) -> BuyVsRentInput:
    # Flat home prices, strong market, cheap rent
    return default_inputs.replace(
        home_appreciation_annual=0.0,
        investment_return_annual=10.0,
        monthly_rent=500.0,
    )
