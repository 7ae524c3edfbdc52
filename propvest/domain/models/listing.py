"""Listing payload data model.

The shape of a listing as it arrives from the search provider or from
manual entry: every field except the address may be missing.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ListingPayload(BaseModel):
    """Partial listing record, accepted in camelCase or snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    id: str | None = None
    address: str = Field(..., description="Street address")

    price: float | None = None
    bedrooms: float | None = None
    bathrooms: float | None = None
    sqft: float | None = None
    image: str | None = Field(None, description="Single thumbnail from city search")
    images: list[str] | None = Field(None, description="Gallery from address lookup")

    down_payment_percent: float | None = None
    interest_rate: float | None = None
    loan_term_years: int | None = None
    nightly_rate: float | None = None
    occupancy_rate: float | None = None

    property_tax: float | None = None
    insurance: float | None = None
    management_fee_percent: float | None = None
    snow_removal: float | None = None
    hot_tub_maintenance: float | None = None
    utilities: float | None = None
    maintenance: float | None = None
    hoa: float | None = None
    other_expenses: float | None = None

    fair_offer_recommendation: str | None = None
    is_favorite: bool | None = None

    @property
    def image_list(self) -> list[str]:
        """Gallery if present, else the single image, else nothing."""
        if self.images:
            return list(self.images)
        if self.image:
            return [self.image]
        return []
