"""Data models for the Alpha Vantage and SEC EDGAR connectors."""

from typing import Any

from pydantic import BaseModel


class MonthSelection(BaseModel):
    """A year/month pair selecting one month of intraday history."""

    year: str
    month: str

    def __str__(self) -> str:
        return f"{self.year}-{self.month}"


class TimeSeriesQuery(BaseModel):
    """Typed parameters for an Alpha Vantage time-series or quote query."""

    function: str
    symbol: str
    interval: str
    adjusted: bool | None = None
    extend_hours: bool | None = None
    month: MonthSelection | None = None
    outputsize: str | None = None
    datatype: str | None = None

    def to_params(self) -> dict[str, Any]:
        """
        Build the parameter mapping accepted by ``generate_url``.

        Unset optional fields are left out so the generator applies its defaults.
        """
        return self.model_dump(exclude_none=True)
