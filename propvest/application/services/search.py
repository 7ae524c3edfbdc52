"""Listing search service.

Routes a free-text query to the external listing provider, either as a
city search or as a single address / listing URL lookup, and imports a
chosen result into the portfolio through the normalizer.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Optional, Protocol, Union

import structlog
from pydantic import ValidationError

from propvest.application.services.normalizer import normalize_listing
from propvest.application.services.portfolio import PropertyPortfolio
from propvest.core.exceptions import ListingProviderError
from propvest.domain.models.listing import ListingPayload
from propvest.domain.models.property import Property, SearchFilters

log = structlog.get_logger(__name__)

RawListing = Union[Mapping[str, Any], ListingPayload]

_STREET_NUMBER = re.compile(r"^\d+\s")


class QueryKind(str, Enum):
    """How a search query is sent to the provider."""

    CITY = "city"
    ADDRESS = "address"


def classify_query(query: str) -> QueryKind:
    """Listing URLs and queries starting with a street number are lookups."""
    lowered = query.strip().lower()
    if "http" in lowered or "www" in lowered:
        return QueryKind.ADDRESS
    if _STREET_NUMBER.match(query.strip()):
        return QueryKind.ADDRESS
    return QueryKind.CITY


class ListingProvider(Protocol):
    """External listing source (search API, LLM with web search, ...)."""

    def fetch_listings_by_city(
        self, city: str, filters: Optional[SearchFilters] = None
    ) -> Sequence[RawListing]:
        ...

    def fetch_property_listing(self, query: str) -> Optional[RawListing]:
        ...


class ListingSearchService:
    """Searches listings through a provider.

    The service does not retry. Provider failures surface as
    ListingProviderError so the caller can offer a retry.
    """

    def __init__(self, provider: ListingProvider):
        self.provider = provider

    def search(self, query: str, filters: Optional[SearchFilters] = None) -> list[ListingPayload]:
        """Run a search.

        Args:
            query: City name, street address or listing URL
            filters: Bounds for city searches (ignored for lookups)

        Returns:
            Parsed listings; at most one for an address lookup

        Raises:
            ListingProviderError: The provider call failed
        """
        query = query.strip()
        if not query:
            return []

        kind = classify_query(query)
        log.info("listing_search_started", query=query, kind=kind.value)

        try:
            if kind is QueryKind.ADDRESS:
                raw = self.provider.fetch_property_listing(query)
                raw_listings = [raw] if raw else []
            else:
                raw_listings = list(self.provider.fetch_listings_by_city(query, filters))
        except Exception as e:
            log.error("listing_search_failed", query=query, kind=kind.value, error=str(e))
            raise ListingProviderError(query, str(e)) from e

        listings = self._parse(raw_listings)
        if kind is QueryKind.CITY and filters is not None:
            listings = [item for item in listings if filters.matches(item)]

        log.info("listing_search_completed", query=query, count=len(listings))
        return listings

    @staticmethod
    def _parse(raw_listings: Sequence[RawListing]) -> list[ListingPayload]:
        parsed = []
        for raw in raw_listings:
            if isinstance(raw, ListingPayload):
                item = raw
            else:
                try:
                    item = ListingPayload.model_validate(raw)
                except ValidationError as e:
                    log.warning("listing_skipped", reason=str(e))
                    continue
            if not item.address.strip():
                log.warning("listing_skipped", reason="blank address")
                continue
            parsed.append(item)
        return parsed


def import_listing(listing: RawListing, portfolio: PropertyPortfolio) -> Property:
    """Normalize a listing, add it to the portfolio and select it."""
    prop = normalize_listing(listing)
    return portfolio.add(prop)
