CURRENCY_SYMBOLS = {"EUR": "€", "USD": "$", "GBP": "£"}


def _de_grouping(text: str) -> str:
    # "1,234,567.89" -> "1.234.567,89"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_number(value: float, decimals: int = 0) -> str:
    """Number with German-style grouping, e.g. 1234567 -> '1.234.567'."""
    return _de_grouping(f"{value:,.{decimals}f}")


def format_currency(value: float, currency: str = "EUR") -> str:
    """Whole-unit amount in de-DE style: 400000 -> '400.000 €'.

    Currency is a display choice only; no conversion happens.
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    text = format_number(value, 0)
    if text == "-0":
        text = "0"
    return f"{text} {symbol}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Fraction as a percentage: 0.35 -> '35.0%'."""
    return f"{value * 100:.{decimals}f}%"
