"""Jinja2 template configuration."""

from datetime import date, datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

# Template directory is at realestate/templates/
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def format_currency(value: float | None) -> str:
    """USD with thousands separators, e.g. ``$2,500,000.00``."""
    if value is None:
        return ""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_long_date(value: date | datetime | None) -> str:
    """Month name, day and year, e.g. ``June 15, 2023``."""
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


templates.env.filters["currency"] = format_currency
templates.env.filters["longdate"] = format_long_date
