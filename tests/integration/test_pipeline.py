"""Integration tests for the listing pipeline.

Tests the complete flow from search → normalize → portfolio → metrics → export.
"""

import json

import pytest

from propvest.application.services.exporter import PortfolioExporter, metrics_frame
from propvest.application.services.portfolio import PropertyPortfolio
from propvest.application.services.search import ListingSearchService, import_listing
from propvest.core.settings import AppSettings
from propvest.domain.calculator.offer import assess_offer
from propvest.domain.models.metrics import OfferVerdict
from propvest.domain.models.property import SearchFilters


class StubProvider:
    """Provider returning canned city results and one rich lookup."""

    def fetch_listings_by_city(self, city, filters=None):
        return [
            {"address": f"1 Main St, {city}", "price": 300000, "bedrooms": 3, "bathrooms": 2, "sqft": 1500,
             "image": "https://example.com/main.jpg"},
            {"address": f"9 Hill Rd, {city}", "price": 1200000, "bedrooms": 5, "bathrooms": 4, "sqft": 4200},
        ]

    def fetch_property_listing(self, query):
        return {
            "address": query,
            "price": 525000,
            "bedrooms": 4,
            "bathrooms": 3,
            "sqft": 2200,
            "images": ["https://example.com/1.jpg", "https://example.com/2.jpg"],
            "nightlyRate": 320,
            "occupancyRate": 70,
            "propertyTax": 6100,
            "insurance": 2400,
            "hoa": 0,
            "snowRemoval": 1200,
        }


class TestListingPipeline:
    """End-to-end listing flows."""

    @pytest.fixture
    def service(self):
        return ListingSearchService(StubProvider())

    def test_city_search_to_metrics(self, service):
        portfolio = PropertyPortfolio()
        results = service.search("Asheville", SearchFilters(max_price=500_000))
        assert len(results) == 1

        prop = import_listing(results[0], portfolio)
        assert portfolio.selected.id == prop.id
        assert len(portfolio) == 2

        metrics = portfolio.metrics(prop.id)
        # Defaults for a 300k listing
        assert metrics.loan_amount == pytest.approx(240_000)
        assert metrics.gross_annual_revenue == pytest.approx(150 * 365 * 0.55)
        assert metrics.cap_rate is not None

    def test_address_lookup_keeps_provider_figures(self, service):
        portfolio = PropertyPortfolio([])
        (listing,) = service.search("77 Ridge View Dr, Asheville, NC")
        prop = import_listing(listing, portfolio)

        assert prop.images == ["https://example.com/1.jpg", "https://example.com/2.jpg"]
        assert prop.property_tax == 6100
        assert prop.snow_removal == 1200
        assert prop.maintenance == 250

    def test_edit_then_reassess(self, service):
        portfolio = PropertyPortfolio([])
        (listing,) = service.search("77 Ridge View Dr, Asheville, NC")
        prop = import_listing(listing, portfolio)
        settings = AppSettings(target_cap_rate_pct=6.0, negotiation_margin_pct=10.0)

        before = assess_offer(prop, settings=settings)
        prop.nightly_rate = 60
        after = assess_offer(prop, settings=settings)

        assert before.verdict is not OfferVerdict.INSUFFICIENT_INCOME
        assert after.verdict is OfferVerdict.INSUFFICIENT_INCOME

    def test_export_portfolio(self, service, tmp_path):
        portfolio = PropertyPortfolio()
        for listing in service.search("Boone"):
            import_listing(listing, portfolio)

        frame = metrics_frame(portfolio)
        assert len(frame) == 3

        path = PortfolioExporter(str(tmp_path)).save(list(portfolio))
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        assert payload["metadata"]["count"] == 3
        assert {r["property"]["address"] for r in payload["properties"]} >= {
            "1 Main St, Boone", "9 Hill Rd, Boone"
        }
