"""Query URL generation for the Alpha Vantage API."""

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from prophet_connector.config import get_settings
from prophet_connector.models import MonthSelection

logger = logging.getLogger(__name__)

# Alpha Vantage only accepts 1, 5, 15, 30 and 60 minute intervals
INTERVALS: Mapping[int, str] = MappingProxyType({
    1: "1min",
    5: "5min",
    15: "15min",
    30: "30min",
    60: "60min",
})

REQUIRED_FIELDS = ("function", "symbol", "interval")


class Function(str, Enum):
    """Alpha Vantage function identifiers."""

    INTRADAY = "TIME_SERIES_INTRADAY"
    DAILY = "TIME_SERIES_DAILY"
    DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
    WEEKLY = "TIME_SERIES_WEEKLY"
    WEEKLY_ADJUSTED = "TIME_SERIES_WEEKLY_ADJUSTED"
    MONTHLY = "TIME_SERIES_MONTHLY"
    MONTHLY_ADJUSTED = "TIME_SERIES_MONTHLY_ADJUSTED"
    QUOTE = "GLOBAL_QUOTE"


class OutputSize(str, Enum):
    COMPACT = "compact"
    FULL = "full"


class DataType(str, Enum):
    JSON = "json"
    CSV = "csv"


class Month(str, Enum):
    """Two-digit month codes used in the ``month`` query parameter."""

    JAN = "01"
    FEB = "02"
    MAR = "03"
    APR = "04"
    MAY = "05"
    JUN = "06"
    JUL = "07"
    AUG = "08"
    SEP = "09"
    OCT = "10"
    NOV = "11"
    DEC = "12"


def _flag(value: Any) -> str:
    """Render a boolean-ish flag as the literal 'true' or 'false'."""
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower()
    return "true" if value else "false"


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return _flag(value)
    return str(value)


def _month_parts(month: Any) -> tuple[Any, Any]:
    if isinstance(month, MonthSelection):
        return month.year, month.month
    if isinstance(month, Mapping):
        return month.get("year"), month.get("month")
    return None, None


def generate_url(
    params: Mapping[str, Any],
    api_key: str | None = None,
    base_url: str | None = None,
) -> str:
    """
    Generate an Alpha Vantage query URL.

    Args:
        params: Query parameters. ``function``, ``symbol`` and ``interval`` are
            required; ``adjusted`` and ``extend_hours`` default to true;
            ``month`` is a ``{"year", "month"}`` pair or a MonthSelection.
        api_key: API key to append (default: configured key)
        base_url: Alpha Vantage root URL (default: configured URL)

    Returns:
        The query URL, or an empty string if the parameters are invalid.
        Keys and values are not percent-encoded.
    """
    if not all(params.get(name) for name in REQUIRED_FIELDS):
        return ""

    # Work on a copy; keys already present keep their position
    query = dict(params)

    query["adjusted"] = "true" if query.get("adjusted") is None else _flag(query["adjusted"])
    query["extend_hours"] = (
        "true" if query.get("extend_hours") is None else _flag(query["extend_hours"])
    )

    if query.get("month") is not None:
        year, month = _month_parts(query["month"])
        if not (year and month):
            return ""
        query["month"] = f"{_format_value(year)}-{_format_value(month)}"

    settings = get_settings()
    if api_key is None:
        api_key = settings.alpha_vantage_api_key
    if base_url is None:
        base_url = settings.alpha_vantage_base_url

    url = f"{base_url}query?"
    for key, value in query.items():
        if value is None:
            continue
        url += f"{key}={_format_value(value)}&"
    url += f"apikey={api_key}"

    logger.debug("Generated Alpha Vantage URL for %s", query["symbol"])
    return url
