"""Tests for the shareable-link codec."""

import logging
from urllib.parse import parse_qs, urlsplit

import pytest

from analytics.simulation import compute
from config import DEFAULT_INPUTS
from sharing import build_share_url, decode_query_params, decode_scenario, encode_query_params


class TestRoundTrip:
    def test_encode_decode_is_exact(self, default_inputs):
        odd = default_inputs.replace(
            home_price=412345.67,
            mortgage_rate_percent=3.1,
            home_appreciation_annual=-0.7,
            investment_tax_rate_percent=26.375,
        )
        decoded, country = decode_query_params(encode_query_params(odd, "FR"))
        assert decoded == odd
        assert country == "FR"

    def test_recomputed_result_is_identical(self, default_inputs):
        decoded, _ = decode_query_params(encode_query_params(default_inputs))
        assert compute(decoded) == compute(default_inputs)

    def test_through_a_url(self, default_inputs):
        url = build_share_url("https://example.com/report", default_inputs, "ES")
        assert url.startswith("https://example.com/report?")
        params = parse_qs(urlsplit(url).query)
        decoded, country = decode_query_params(params)
        assert decoded == default_inputs
        assert country == "ES"

    def test_encoded_keys(self, default_inputs):
        params = encode_query_params(default_inputs)
        assert params["country"] == "DE"
        assert params["scenario"] == "normal"
        assert params["homePrice"] == "400000.0"
        assert params["duration"] == "10"
        assert params["rent"] == "1500.0"

    def test_scenario_travels_with_the_link(self, default_inputs):
        url = build_share_url("https://example.com/report", default_inputs, "DE", "crash2008")
        params = parse_qs(urlsplit(url).query)
        decoded, _ = decode_query_params(params)
        assert decode_scenario(params) == "crash2008"
        # the link carries the inputs as entered, not the stressed ones
        assert decoded == default_inputs


class TestFallbacks:
    def test_empty_params_give_defaults(self):
        decoded, country = decode_query_params({})
        assert country == "DE"
        assert decoded.to_dict() == DEFAULT_INPUTS

    def test_country_preset_fills_market_costs(self):
        decoded, country = decode_query_params({"country": "FR", "homePrice": "300000"})
        assert country == "FR"
        assert decoded.home_price == 300000.0
        assert decoded.closing_costs_percent == 7.5
        assert decoded.property_tax_annual_percent == 0.98
        assert decoded.selling_costs_percent == 5.0

    def test_invalid_value_falls_back_and_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sharing"):
            decoded, _ = decode_query_params({"homePrice": "lots", "duration": "12.5"})
        assert decoded.home_price == 400000.0
        assert decoded.duration_years == 10
        assert "home_price" in caplog.text
        assert "duration_years" in caplog.text

    def test_unknown_country(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sharing"):
            _, country = decode_query_params({"country": "XX"})
        assert country == "DE"
        assert "XX" in caplog.text

    @pytest.mark.parametrize("raw", [["250000"], ("250000",)])
    def test_list_values(self, raw):
        decoded, _ = decode_query_params({"homePrice": raw})
        assert decoded.home_price == 250000.0

    def test_non_finite_values_fall_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sharing"):
            decoded, _ = decode_query_params(
                {"homePrice": "nan", "rent": "inf", "appreciation": "-inf", "duration": "inf"}
            )
        assert decoded.home_price == 400000.0
        assert decoded.monthly_rent == 1500.0
        assert decoded.home_appreciation_annual == 3.0
        assert decoded.duration_years == 10
        for name in ("home_price", "monthly_rent", "home_appreciation_annual", "duration_years"):
            assert name in caplog.text

    def test_whole_number_floats_for_year_fields(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sharing"):
            decoded, _ = decode_query_params({"mortgagePeriod": "25.0", "duration": "15.0"})
        assert decoded.mortgage_period_years == 25
        assert isinstance(decoded.mortgage_period_years, int)
        assert decoded.duration_years == 15
        assert caplog.text == ""

    def test_missing_scenario_is_normal(self):
        assert decode_scenario({}) == "normal"
        assert decode_scenario({"scenario": ["lostDecade"]}) == "lostDecade"

    def test_unknown_scenario(self, caplog):
        with caplog.at_level(logging.WARNING, logger="sharing"):
            assert decode_scenario({"scenario": "boom"}) == "normal"
        assert "boom" in caplog.text
