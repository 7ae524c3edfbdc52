"""Application services."""

from .exporter import PortfolioExporter, metrics_frame
from .normalizer import LISTING_DEFAULTS, apply_listing_defaults, normalize_listing
from .portfolio import PropertyPortfolio, seed_properties
from .search import ListingProvider, ListingSearchService, QueryKind, classify_query, import_listing

__all__ = [
    "LISTING_DEFAULTS",
    "ListingProvider",
    "ListingSearchService",
    "PortfolioExporter",
    "PropertyPortfolio",
    "QueryKind",
    "apply_listing_defaults",
    "classify_query",
    "import_listing",
    "metrics_frame",
    "normalize_listing",
    "seed_properties",
]
