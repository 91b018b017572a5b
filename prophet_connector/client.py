"""Async SEC EDGAR client for submissions, XBRL concepts, facts and frames.

API reference: https://www.sec.gov/edgar/sec-api-documentation
"""

import logging
from typing import Any

import httpx

from prophet_connector.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_TAXONOMY = "us-gaap"
DEFAULT_TAG = "AccountsPayableCurrent"
DEFAULT_UNIT = "USD"


def submission_url(base_url: str, cik: str) -> str:
    return f"{base_url}/submissions/CIK{cik}.json"


def company_concept_url(
    base_url: str, cik: str, taxonomy: str = DEFAULT_TAXONOMY, tag: str = DEFAULT_TAG
) -> str:
    return f"{base_url}/api/xbrl/companyconcept/CIK{cik}/{taxonomy}/{tag}.json"


def company_facts_url(base_url: str, cik: str) -> str:
    return f"{base_url}/api/xbrl/companyfacts/CIK{cik}.json"


def frames_url(
    base_url: str,
    year: int | str,
    quarter: int | str,
    taxonomy: str = DEFAULT_TAXONOMY,
    tag: str = DEFAULT_TAG,
    unit: str = DEFAULT_UNIT,
) -> str:
    # CY####Q#I selects instantaneous data for the calendar quarter
    return f"{base_url}/api/xbrl/frames/{taxonomy}/{tag}/{unit}/CY{year}Q{quarter}I.json"


class SECClient:
    """Client issuing one-shot GET requests against the SEC EDGAR JSON APIs."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize with connector settings.

        Args:
            settings: Connector settings (default: process-wide settings)
            transport: Optional httpx transport, used to stub the network
        """
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.sec_base_url.rstrip("/")

    async def _get_json(self, url: str) -> Any:
        """
        Fetch a URL and return its parsed JSON body.

        Raises:
            httpx.RequestError: If the endpoint is unreachable
            httpx.HTTPStatusError: If EDGAR returns a non-2xx status
            json.JSONDecodeError: If the body is not JSON
        """
        # SEC requires a User-Agent header
        headers = {
            "User-Agent": self._settings.sec_user_agent,
            "Accept-Encoding": "gzip, deflate",
        }

        logger.debug("GET %s", url)
        async with httpx.AsyncClient(
            headers=headers,
            timeout=self._settings.sec_timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()

    async def fetch_submission(self, cik: str) -> Any:
        """
        Get an entity's filing history and metadata (names, tickers, exchanges).

        Args:
            cik: CIK of the entity, forwarded as given

        Returns:
            The parsed submissions document
        """
        return await self._get_json(submission_url(self.base_url, cik))

    async def fetch_company_concept(
        self, cik: str, taxonomy: str = DEFAULT_TAXONOMY, tag: str = DEFAULT_TAG
    ) -> Any:
        """
        Get every XBRL disclosure a company made for one concept.

        Args:
            cik: CIK of the entity, forwarded as given
            taxonomy: XBRL taxonomy (e.g., us-gaap, dei)
            tag: Concept tag within the taxonomy

        Returns:
            The parsed company-concept document, with facts grouped by unit
        """
        return await self._get_json(company_concept_url(self.base_url, cik, taxonomy, tag))

    async def fetch_company_facts(self, cik: str) -> Any:
        """Get all company concept data for an entity in a single document."""
        return await self._get_json(company_facts_url(self.base_url, cik))

    async def fetch_frames(
        self,
        year: int | str,
        quarter: int | str,
        taxonomy: str = DEFAULT_TAXONOMY,
        tag: str = DEFAULT_TAG,
        unit: str = DEFAULT_UNIT,
    ) -> Any:
        """
        Get one fact per reporting entity for an instantaneous calendar quarter.

        Args:
            year: Calendar year
            quarter: Calendar quarter (1-4)
            taxonomy: XBRL taxonomy
            tag: Concept tag within the taxonomy
            unit: Unit of measure (e.g., USD, USD-per-shares, pure)

        Returns:
            The parsed frame document
        """
        return await self._get_json(
            frames_url(self.base_url, year, quarter, taxonomy, tag, unit)
        )


async def fetch_submission(cik: str) -> Any:
    return await SECClient().fetch_submission(cik)


async def fetch_company_concept(
    cik: str, taxonomy: str = DEFAULT_TAXONOMY, tag: str = DEFAULT_TAG
) -> Any:
    return await SECClient().fetch_company_concept(cik, taxonomy, tag)


async def fetch_company_facts(cik: str) -> Any:
    return await SECClient().fetch_company_facts(cik)


async def fetch_frames(
    year: int | str,
    quarter: int | str,
    taxonomy: str = DEFAULT_TAXONOMY,
    tag: str = DEFAULT_TAG,
    unit: str = DEFAULT_UNIT,
) -> Any:
    return await SECClient().fetch_frames(year, quarter, taxonomy, tag, unit)
