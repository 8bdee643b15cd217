"""Formatting primitives for agreement text.

None of these raise on bad input: empty or unparseable dates come back as
fixed placeholders so a half-filled form still renders.
"""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Optional

CEDI_SYMBOL = "GH₵"
BLANK = "________"
SIGNATURE_BLANK = "____________________"
DATE_PLACEHOLDER = "________ day of ________ ________"

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine", "Ten",
    "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen", "Seventeen",
    "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def format_currency(amount: int | float) -> str:
    """Format amount as Ghana cedis, e.g. ``GH₵1,500.00``"""
    value = float(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{CEDI_SYMBOL}{abs(value):,.2f}"


def round_half_up(value: int | float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(float(value) + 0.5))


def number_to_words(number: int | float) -> str:
    """Spell out a whole number in English, e.g. ``Twenty-Five``.

    Fractions are rounded first. Magnitudes above 999 million recurse on the
    million count ("One Thousand Million").
    """
    num = round_half_up(number)
    if num == 0:
        return "Zero"
    if num < 0:
        return "Negative " + number_to_words(abs(num))

    words = ""
    if num // 1_000_000 > 0:
        words += number_to_words(num // 1_000_000) + " Million "
        num %= 1_000_000
    if num // 1000 > 0:
        words += number_to_words(num // 1000) + " Thousand "
        num %= 1000
    if num // 100 > 0:
        words += _ONES[num // 100] + " Hundred "
        num %= 100
    if num > 0:
        if num < 20:
            words += _ONES[num]
        else:
            words += _TENS[num // 10]
            if num % 10 > 0:
                words += "-" + _ONES[num % 10]
    return words.strip()


def ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def parse_date(date_string: Optional[str]) -> Optional[date]:
    """Parse an ISO date (or datetime) string; None when empty or invalid"""
    if not date_string:
        return None
    text = date_string.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_date(value: Optional[str | date]) -> str:
    """``2025-12-31`` -> ``31 December 2025``; empty string when invalid"""
    parsed = value if isinstance(value, date) else parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.day} {calendar.month_name[parsed.month]} {parsed.year}"


def format_date_with_ordinal(date_string: Optional[str]) -> str:
    """``2025-06-03`` -> ``3rd day of June 2025``"""
    parsed = parse_date(date_string)
    if parsed is None:
        return DATE_PLACEHOLDER
    day = parsed.day
    return f"{day}{ordinal_suffix(day)} day of {calendar.month_name[parsed.month]} {parsed.year}"


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    # days past the end of a short month carry into the next one
    return date(year, month, 1) + timedelta(days=start.day - 1)


def calculate_end_date(start_date: Optional[str], duration_value: int, duration_unit: str) -> str:
    """Last day of the term: start plus duration, minus one day.

    A start day missing from the target month rolls over (31 January plus one
    month is 3 March, so that term ends on 2 March).
    """
    start = parse_date(start_date)
    if start is None:
        return ""
    unit = getattr(duration_unit, "value", duration_unit)
    try:
        if unit == "Years":
            anniversary = _add_months(start, 12 * int(duration_value))
        elif unit == "Months":
            anniversary = _add_months(start, int(duration_value))
        else:
            anniversary = start
        return format_date(anniversary - timedelta(days=1))
    except (ValueError, OverflowError):
        return ""


def blank_or_value(value: Optional[str], placeholder: str = BLANK) -> str:
    """Empty values and the literal 'N/A' become a blank line to fill by hand"""
    if not value or value.strip() == "N/A":
        return placeholder
    return value


def phone_suffix(phone: Optional[str], include: bool) -> str:
    """`` (0244000000)`` when disclosure is on and the phone is real, else ''"""
    if not include or not phone or phone.strip() == "N/A":
        return ""
    return f" ({phone})"
