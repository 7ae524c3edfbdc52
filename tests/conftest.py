"""Pytest fixtures for propvest tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from propvest.domain.models.property import Property  # noqa: E402


@pytest.fixture
def sample_property_data():
    """Complete property data (the Austin seed listing)."""
    return {
        "id": "austin-1",
        "address": "1204 Willow Creek Dr, Austin, TX",
        "price": 450000.0,
        "images": ["https://example.com/front.jpg", "https://example.com/kitchen.jpg"],
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 2400,
        "down_payment_percent": 20.0,
        "interest_rate": 6.5,
        "loan_term_years": 30,
        "nightly_rate": 250.0,
        "occupancy_rate": 65.0,
        "property_tax": 8000.0,
        "insurance": 2000.0,
        "management_fee_percent": 25.0,
        "snow_removal": 0.0,
        "hot_tub_maintenance": 150.0,
        "utilities": 300.0,
        "maintenance": 200.0,
        "hoa": 50.0,
        "other_expenses": 0.0,
        "fair_offer_recommendation": "List price appears fair.",
        "is_favorite": True,
    }


@pytest.fixture
def make_property(sample_property_data):
    """Factory building a Property from the sample data with overrides."""
    def _make(**overrides) -> Property:
        return Property(**{**sample_property_data, **overrides})
    return _make


@pytest.fixture
def sample_property(make_property):
    return make_property()


@pytest.fixture
def camel_case_listing():
    """Rich address-lookup payload as returned by the provider."""
    return {
        "address": "88 Summit Rd, Breckenridge, CO",
        "price": 900000,
        "bedrooms": 3,
        "bathrooms": 2.5,
        "sqft": 1850,
        "images": ["https://example.com/a.jpg", "https://example.com/b.jpg"],
        "nightlyRate": 475,
        "occupancyRate": 62,
        "propertyTax": 5200,
        "insurance": 3100,
        "snowRemoval": 1800,
        "hotTubMaintenance": 900,
        "utilities": 420,
        "hoa": 150,
        "fairOfferRecommendation": "Offer 5% under list.",
    }
