"""
Response value parsers for converting raw requirement responses to typed values.

Each requirement declares a response type; the raw response text is parsed
accordingly. Blank responses carry no value. Malformed responses raise a
ParseError subclass so the caller can drop the value without writing garbage.
"""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..config.defaults import ParserParams
from ..definitions.models import ResponseType, ValueKind
from .models import (
    AmountValue,
    BooleanValue,
    DateValue,
    DecimalValue,
    IntegerValue,
    TextValue,
    TypedValue,
)

_DEFAULT_PARAMS = ParserParams()

# XML Schema dates may carry a timezone suffix: 2016-12-01Z, 2016-12-01+02:00
_XML_DATE = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:Z|[+-]\d{2}:\d{2})?$")
_AMOUNT_VALUE_FIRST = re.compile(r"^(?P<amount>[+-]?[\d.,]+)\s*(?P<currency>[A-Za-z]{3})$")
_AMOUNT_CURRENCY_FIRST = re.compile(r"^(?P<currency>[A-Za-z]{3})\s*(?P<amount>[+-]?[\d.,]+)$")
_COUNTRY_CODE = re.compile(r"^[A-Za-z]{2}$")
_INTEGER = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")
_THOUSANDS_COMMA = re.compile(r",[0-9]{3}$")


class ParseError(Exception):
    """Raised when a raw response does not match its declared response type."""

    expected_format = "text"


class InvalidBooleanError(ParseError):
    """Raised when an indicator response is not a known boolean token."""

    expected_format = "boolean token"


class InvalidDateError(ParseError):
    """Raised when a date response is not a valid date."""

    expected_format = "YYYY-MM-DD"


class InvalidNumberError(ParseError):
    """Raised when an integer, year or decimal response is not numeric."""

    expected_format = "number"


class InvalidAmountError(ParseError):
    """Raised when an amount response lacks a numeric value or currency code."""

    expected_format = "<amount> <ISO 4217 currency>"


class InvalidCodeError(ParseError):
    """Raised when a coded response is not a valid code."""

    expected_format = "ISO 3166 alpha-2 code"


def parse_response(response_type: ResponseType, raw: Optional[str],
                   params: Optional[ParserParams] = None) -> Optional[TypedValue]:
    """
    Parse a raw response into a typed value.

    Args:
        response_type: Declared response type of the requirement
        raw: Raw response text (first response of the requirement)
        params: Parser parameters; defaults used when omitted

    Returns:
        Typed value, or None when the response is blank

    Raises:
        ParseError: If the response does not match the response type
    """
    if raw is None or not raw.strip():
        return None

    params = params or _DEFAULT_PARAMS
    text = raw.strip()
    kind = response_type.value_kind

    if kind is ValueKind.BOOLEAN:
        return BooleanValue(parse_boolean(text, params))
    if kind is ValueKind.DATE:
        return DateValue(parse_date(text, params))
    if kind is ValueKind.INTEGER:
        number = parse_integer(text)
        if response_type is ResponseType.QUANTITY_YEAR and not params.min_year <= number <= params.max_year:
            raise InvalidNumberError(f"Year {number} outside [{params.min_year}, {params.max_year}]")
        return IntegerValue(number)
    if kind is ValueKind.DECIMAL:
        return DecimalValue(parse_decimal(text))
    if kind is ValueKind.AMOUNT:
        return parse_amount(text)

    if response_type is ResponseType.CODE_COUNTRY:
        if not _COUNTRY_CODE.match(text):
            raise InvalidCodeError(f"Invalid country code '{text}'")
        return TextValue(text.upper())

    # Free text keeps its original whitespace
    return TextValue(raw)


def parse_boolean(text: str, params: ParserParams = _DEFAULT_PARAMS) -> bool:
    """Parse an indicator token."""
    token = text.strip().lower()
    if token in (t.lower() for t in params.true_tokens):
        return True
    if token in (t.lower() for t in params.false_tokens):
        return False
    raise InvalidBooleanError(f"Invalid indicator '{text}'")


def parse_date(text: str, params: ParserParams = _DEFAULT_PARAMS) -> date:
    """Parse an ISO date, then any configured extra formats."""
    match = _XML_DATE.match(text)
    if match:
        try:
            return date.fromisoformat(match.group(1))
        except ValueError as e:
            raise InvalidDateError(f"Invalid date '{text}': {e}")

    for fmt in params.extra_date_formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise InvalidDateError(f"Invalid date '{text}'")


def parse_integer(text: str) -> int:
    """Parse an integer quantity of ASCII digits with an optional sign."""
    if not _INTEGER.match(text):
        raise InvalidNumberError(f"Invalid integer '{text}'")
    return int(text)


def parse_decimal(text: str) -> Decimal:
    """
    Parse a decimal quantity of ASCII digits.

    A single comma is accepted as decimal separator, except when exactly three
    digits follow it: '1,000' may be a thousands separator and is rejected.
    """
    normalized = text
    if "," in normalized and "." not in normalized and normalized.count(",") == 1:
        if _THOUSANDS_COMMA.search(normalized):
            raise InvalidNumberError(f"Ambiguous decimal separator in '{text}'")
        normalized = normalized.replace(",", ".")

    if not _DECIMAL.match(normalized):
        raise InvalidNumberError(f"Invalid decimal '{text}'")
    return Decimal(normalized)


def parse_amount(text: str) -> AmountValue:
    """Parse '<amount> <CUR>' or '<CUR> <amount>'."""
    match = _AMOUNT_VALUE_FIRST.match(text) or _AMOUNT_CURRENCY_FIRST.match(text)
    if not match:
        raise InvalidAmountError(f"Invalid amount '{text}'")

    try:
        amount = parse_decimal(match.group("amount"))
    except InvalidNumberError as e:
        raise InvalidAmountError(f"Invalid amount '{text}': {e}")

    return AmountValue(amount=amount, currency=match.group("currency").upper())
