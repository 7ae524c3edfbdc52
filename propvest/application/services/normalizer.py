"""Listing normalization service.

Turns a sparse listing (search result, address lookup or manual entry)
into a complete Property. Missing financial fields are filled from one
declarative default table; present values are never overridden.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from propvest.core.exceptions import InvalidListingError
from propvest.core.logging import get_logger
from propvest.domain.models.listing import ListingPayload
from propvest.domain.models.property import FAIR_OFFER_PLACEHOLDER, Property, generate_property_id

log = get_logger(__name__)


@dataclass(frozen=True)
class FieldDefault:
    """Fallback for one missing field: a constant, or a share of the price."""
    value: Any = 0.0
    price_factor: float | None = None

    def resolve(self, price: float) -> Any:
        if self.price_factor is not None:
            return price * self.price_factor
        return self.value


LISTING_DEFAULTS: dict[str, FieldDefault] = {
    # Financing
    "down_payment_percent": FieldDefault(20.0),
    "interest_rate": FieldDefault(6.8),
    "loan_term_years": FieldDefault(30),
    # Income
    "nightly_rate": FieldDefault(price_factor=0.0005),
    "occupancy_rate": FieldDefault(55.0),
    # Annual expenses
    "property_tax": FieldDefault(price_factor=0.015),
    "insurance": FieldDefault(price_factor=0.004),
    "management_fee_percent": FieldDefault(25.0),
    "snow_removal": FieldDefault(0.0),
    "hot_tub_maintenance": FieldDefault(0.0),
    "other_expenses": FieldDefault(0.0),
    # Monthly expenses
    "utilities": FieldDefault(300.0),
    "maintenance": FieldDefault(250.0),
    "hoa": FieldDefault(0.0),
    # Advisory
    "fair_offer_recommendation": FieldDefault(FAIR_OFFER_PLACEHOLDER),
    "is_favorite": FieldDefault(False),
}

# Physical attributes a listing may omit
PHYSICAL_FIELDS = ("price", "bedrooms", "bathrooms", "sqft")

ListingInput = Union[Mapping[str, Any], ListingPayload, Property]


def _as_payload(listing: ListingInput) -> ListingPayload:
    if isinstance(listing, ListingPayload):
        return listing
    if isinstance(listing, Property):
        return ListingPayload.model_validate(listing.model_dump())
    try:
        return ListingPayload.model_validate(dict(listing))
    except ValidationError as e:
        raise InvalidListingError(
            f"Listing is missing required data: {e}",
            address=listing.get("address") if isinstance(listing.get("address"), str) else None,
        ) from e


def apply_listing_defaults(payload: ListingPayload) -> tuple[dict[str, Any], list[str]]:
    """Fill every missing field of a listing.

    Args:
        payload: Parsed listing

    Returns:
        Tuple of (complete field dict ready for Property, names of defaulted fields)
    """
    data = payload.model_dump(exclude={"id", "image", "images"})
    defaulted: list[str] = []

    for name in PHYSICAL_FIELDS:
        if data[name] is None:
            data[name] = 0.0
            defaulted.append(name)

    text = data.get("fair_offer_recommendation")
    if text is not None and not text.strip():
        data["fair_offer_recommendation"] = None

    price = data["price"]
    for name, rule in LISTING_DEFAULTS.items():
        if data[name] is None:
            data[name] = rule.resolve(price)
            defaulted.append(name)

    data["images"] = payload.image_list
    return data, defaulted


def normalize_listing(listing: ListingInput) -> Property:
    """Build a complete Property from a possibly sparse listing.

    Args:
        listing: Raw mapping (camelCase or snake_case keys), ListingPayload,
            or an existing Property

    Returns:
        New Property. Keeps the listing's id when it has one, otherwise
        a freshly generated one.

    Raises:
        InvalidListingError: No usable address, or a present value is out
            of range (negative price, percentage outside 0-100, ...)
    """
    payload = _as_payload(listing)
    if not payload.address.strip():
        raise InvalidListingError("Listing has no address")

    data, defaulted = apply_listing_defaults(payload)
    data["id"] = payload.id or generate_property_id()

    try:
        prop = Property(**data)
    except ValidationError as e:
        raise InvalidListingError(
            f"Listing '{payload.address}' has invalid values: {e}",
            address=payload.address,
        ) from e

    log.debug(
        "listing_normalized",
        property_id=prop.id,
        address=prop.address,
        defaulted=defaulted,
    )
    return prop
