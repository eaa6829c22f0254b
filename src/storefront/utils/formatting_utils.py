from decimal import Decimal, ROUND_HALF_UP
import re


class FormattingUtils:
    """
    Money formatting and parsing for display

    Features:
    - Cents to display string with currency symbol and thousands separators
    - Display string back to cents, tolerant of symbols, commas and spaces
    - Percentage formatting for tax rates
    """

    # Currency symbols and formatting rules
    CURRENCY_FORMATS = {
        'USD': {'symbol': '$', 'decimal_places': 2, 'symbol_position': 'before'},
        'EUR': {'symbol': '€', 'decimal_places': 2, 'symbol_position': 'after'},
        'GBP': {'symbol': '£', 'decimal_places': 2, 'symbol_position': 'before'},
        'JPY': {'symbol': '¥', 'decimal_places': 0, 'symbol_position': 'before'},
    }

    AMOUNT_PATTERN = re.compile(r'^-?(\d+\.?\d*|\.\d+)$')

    @classmethod
    def format_money(
        cls,
        amount_cents: int,
        currency: str = 'USD',
        include_symbol: bool = True,
        include_currency_code: bool = False
    ) -> str:
        """
        Format money amount for display

        Args:
            amount_cents: Amount in minor units
            currency: Currency code (USD, EUR, etc.)
            include_symbol: Whether to include currency symbol
            include_currency_code: Whether to include currency code

        Examples:
            format_money(1999) -> "$19.99"
            format_money(123456789) -> "$1,234,567.89"
            format_money(-1999) -> "-$19.99"
        """
        currency_config = cls.CURRENCY_FORMATS.get(currency, cls.CURRENCY_FORMATS['USD'])

        decimal_places = currency_config['decimal_places']
        amount = Decimal(abs(amount_cents)) / (10 ** decimal_places)
        sign = '-' if amount_cents < 0 else ''

        formatted_amount = f"{amount:,.{decimal_places}f}"

        result = formatted_amount
        if include_symbol:
            symbol = currency_config['symbol']
            if currency_config['symbol_position'] == 'before':
                result = f"{symbol}{formatted_amount}"
            else:
                result = f"{formatted_amount}{symbol}"
        result = f"{sign}{result}"

        if include_currency_code:
            result = f"{result} {currency}"

        return result

    @classmethod
    def parse_money(cls, text: str, currency: str = 'USD') -> int:
        """
        Parse a display amount back to minor units

        Currency symbols, thousands separators and whitespace are ignored.
        Extra decimal places are rounded half-up.

        Examples:
            parse_money("$1,000.00") -> 100000
            parse_money("$ 19.99") -> 1999
            parse_money("$19.995") -> 2000
            parse_money("-$19.99") -> -1999

        Raises:
            ValueError: When the text is not a monetary amount
        """
        currency_config = cls.CURRENCY_FORMATS.get(currency, cls.CURRENCY_FORMATS['USD'])
        cleaned = text.replace(currency_config['symbol'], '').replace(',', '')
        cleaned = re.sub(r'\s+', '', cleaned)

        if not cls.AMOUNT_PATTERN.match(cleaned):
            raise ValueError(f"Invalid currency amount: {text!r}")

        scale = Decimal(10) ** currency_config['decimal_places']
        minor_units = (Decimal(cleaned) * scale).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
        return int(minor_units)

    @classmethod
    def format_percentage(cls, decimal_value, decimal_places: int = 1) -> str:
        """
        Format decimal as percentage

        Examples:
            format_percentage(0.1) -> "10.0%"
            format_percentage(Decimal("0.125"), 2) -> "12.50%"
        """
        percentage = Decimal(str(decimal_value)) * 100
        return f"{percentage:.{decimal_places}f}%"
