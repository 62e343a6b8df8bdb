from formatting import format_currency, format_number, format_percentage


def test_format_currency_eur():
    assert format_currency(400000) == "400.000 €"
    assert format_currency(1234567.4) == "1.234.567 €"


def test_format_currency_negative():
    assert format_currency(-1234.4) == "-1.234 €"
    assert format_currency(-0.4) == "0 €"


def test_format_currency_other_codes():
    assert format_currency(1500, "USD") == "1.500 $"
    assert format_currency(10, "CHF") == "10 CHF"


def test_format_percentage():
    assert format_percentage(0.35) == "35.0%"
    assert format_percentage(0.035, 2) == "3.50%"


def test_format_number():
    assert format_number(1234567) == "1.234.567"
    assert format_number(1234.5, 2) == "1.234,50"
