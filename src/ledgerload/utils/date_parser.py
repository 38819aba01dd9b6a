"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

# Shapes accepted in CSV files, mapped to their strptime format
TRANSACTION_DATE_FORMATS = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{2}/\d{2}/\d{4}$"), "%m/%d/%Y"),
)


def parse_transaction_date(date_str: str) -> date:
    """Parse a CSV transaction date.

    Exactly two shapes are accepted: ``YYYY-MM-DD`` and ``MM/DD/YYYY``.
    Anything else, including impossible calendar dates, is rejected.

    Args:
        date_str: Date string from a CSV field

    Returns:
        Date object

    Raises:
        ValueError: If date string is not in an accepted shape
    """
    date_str = date_str.strip()
    for pattern, fmt in TRANSACTION_DATE_FORMATS:
        if pattern.match(date_str):
            try:
                return datetime.strptime(date_str, fmt).date()
            except ValueError as e:
                raise ValueError(f"Could not parse date '{date_str}': {e}")
    raise ValueError(f"Unsupported date format '{date_str}' (expected YYYY-MM-DD or MM/DD/YYYY)")


def parse_date(date_str: str) -> date:
    """Parse a free-form date string into a date object.

    Used for listing filters, where operators type dates by hand:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "this month", "last month"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
