"""Property and search filter data models.

A property is one real-estate asset under evaluation, carrying the raw
acquisition, financing, income and expense assumptions. Investment metrics
are never stored on it; they are derived on demand by the analytics engine.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from propvest.domain.models.listing import ListingPayload

FAIR_OFFER_PLACEHOLDER = "Review the expenses to get an accurate analysis."


def generate_property_id() -> str:
    """Millisecond timestamp plus a random suffix, unique across rapid calls."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}"


class Property(BaseModel):
    """Rental property with its investment assumptions.

    Validated on construction and on every assignment, so an edited
    property can never hold a negative price or an out-of-range percentage.
    """

    # Identity
    id: str = Field(default_factory=generate_property_id, min_length=1, description="Stable identifier")

    # Physical attributes
    address: str = Field(..., min_length=1, description="Street address")
    bedrooms: float = Field(default=0, ge=0, description="Bedroom count")
    bathrooms: float = Field(default=0, ge=0, description="Bathroom count")
    sqft: float = Field(default=0, ge=0, description="Livable area in square feet")
    images: list[str] = Field(default_factory=list, description="Image URLs, first is the thumbnail")

    # Acquisition / financing
    price: float = Field(..., ge=0, description="Purchase price in $")
    down_payment_percent: float = Field(..., ge=0, le=100, description="Down payment % of price")
    interest_rate: float = Field(..., ge=0, description="Annual interest rate %")
    loan_term_years: int = Field(..., gt=0, description="Loan term in years")

    # Income
    nightly_rate: float = Field(..., ge=0, description="Nightly rental rate in $")
    occupancy_rate: float = Field(..., ge=0, le=100, description="Occupied nights %")

    # Annual expenses
    property_tax: float = Field(..., ge=0, description="Annual property tax in $")
    insurance: float = Field(..., ge=0, description="Annual insurance in $")
    management_fee_percent: float = Field(..., ge=0, le=100, description="Management fee % of gross revenue")
    snow_removal: float = Field(..., ge=0, description="Annual snow removal in $")
    hot_tub_maintenance: float = Field(..., ge=0, description="Annual hot tub maintenance in $")
    other_expenses: float = Field(..., ge=0, description="Other annual expenses in $")

    # Monthly expenses
    utilities: float = Field(..., ge=0, description="Monthly utilities in $")
    maintenance: float = Field(..., ge=0, description="Monthly maintenance in $")
    hoa: float = Field(..., ge=0, description="Monthly HOA dues in $")

    # Advisory
    fair_offer_recommendation: str = Field(default=FAIR_OFFER_PLACEHOLDER, description="Fair-offer narrative")
    is_favorite: bool = Field(default=False, description="Favorited by the user")

    model_config = {
        "validate_assignment": True,
        "extra": "forbid",
        "allow_inf_nan": False,
    }

    @field_validator("address")
    @classmethod
    def strip_address(cls, v: str) -> str:
        """Reject whitespace-only addresses."""
        v = v.strip()
        if not v:
            raise ValueError("address must not be blank")
        return v

    @field_validator("fair_offer_recommendation")
    @classmethod
    def default_blank_recommendation(cls, v: str) -> str:
        """Blank narrative falls back to the placeholder."""
        return v if v.strip() else FAIR_OFFER_PLACEHOLDER

    @property
    def thumbnail(self) -> str | None:
        """First image, used for cards."""
        return self.images[0] if self.images else None


class SearchFilters(BaseModel):
    """Optional bounds narrowing an external listing search."""

    min_price: float | None = Field(None, ge=0, description="Minimum list price in $")
    max_price: float | None = Field(None, ge=0, description="Maximum list price in $")
    min_beds: float | None = Field(None, ge=0, description="Minimum bedrooms")
    min_baths: float | None = Field(None, ge=0, description="Minimum bathrooms")
    min_sqft: float | None = Field(None, ge=0, description="Minimum square footage")

    @property
    def is_empty(self) -> bool:
        """True when no bound is set."""
        return all(v is None for v in self.model_dump().values())

    def matches(self, listing: ListingPayload) -> bool:
        """Check a listing against every bound that is set.

        A listing that does not report the bounded attribute is kept.
        """
        checks = [
            (listing.price, self.min_price, lambda v, b: v >= b),
            (listing.price, self.max_price, lambda v, b: v <= b),
            (listing.bedrooms, self.min_beds, lambda v, b: v >= b),
            (listing.bathrooms, self.min_baths, lambda v, b: v >= b),
            (listing.sqft, self.min_sqft, lambda v, b: v >= b),
        ]
        for value, bound, ok in checks:
            if value is None or bound is None:
                continue
            if not ok(value, bound):
                return False
        return True
