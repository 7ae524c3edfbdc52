"""Data models for propvest."""

from .listing import ListingPayload
from .metrics import InvestmentMetrics, OfferAssessment, OfferVerdict
from .property import FAIR_OFFER_PLACEHOLDER, Property, SearchFilters, generate_property_id

__all__ = [
    "FAIR_OFFER_PLACEHOLDER",
    "InvestmentMetrics",
    "ListingPayload",
    "OfferAssessment",
    "OfferVerdict",
    "Property",
    "SearchFilters",
    "generate_property_id",
]
