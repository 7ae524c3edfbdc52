"""Property portfolio service.

In-memory collection of properties under evaluation, with an explicit
selected identifier. Owned and passed around by the host application;
the analytics engine never holds a reference to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from propvest.core.exceptions import DuplicatePropertyError, PropertyNotFoundError
from propvest.core.logging import get_logger
from propvest.domain.calculator.metrics import analyze_property
from propvest.domain.models.metrics import InvestmentMetrics
from propvest.domain.models.property import Property

log = get_logger(__name__)


def seed_properties() -> list[Property]:
    """Startup record shown before anything is imported."""
    return [
        Property(
            id="1",
            address="1204 Willow Creek Dr, Austin, TX",
            price=450000,
            images=[
                "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
                "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
                "https://images.unsplash.com/photo-1484154218962-a1c002085d2f?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80",
            ],
            bedrooms=4,
            bathrooms=3,
            sqft=2400,
            down_payment_percent=20,
            interest_rate=6.5,
            loan_term_years=30,
            nightly_rate=250,
            occupancy_rate=65,
            property_tax=8000,
            insurance=2000,
            management_fee_percent=25,
            snow_removal=0,
            hot_tub_maintenance=150,
            utilities=300,
            maintenance=200,
            hoa=50,
            other_expenses=0,
            fair_offer_recommendation=(
                "Based on the strong cash flow and 65% occupancy estimate, the list "
                "price of $450k appears fair. A specific offer of $440k might be "
                "accepted given market cooling."
            ),
            is_favorite=True,
        )
    ]


class PropertyPortfolio:
    """Ordered property collection with a current selection.

    Newest properties come first. Identifiers are unique within the
    portfolio.
    """

    def __init__(self, properties: Iterable[Property] | None = None):
        """Initialize portfolio.

        Args:
            properties: Initial properties, in display order. Defaults to
                the seed record. The first one starts selected.
        """
        self._properties: list[Property] = []
        for prop in seed_properties() if properties is None else properties:
            self._ensure_unique(prop.id)
            self._properties.append(prop)
        self.selected_id: str | None = self._properties[0].id if self._properties else None

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(list(self._properties))

    def __contains__(self, property_id: object) -> bool:
        return any(p.id == property_id for p in self._properties)

    def _ensure_unique(self, property_id: str) -> None:
        if property_id in self:
            raise DuplicatePropertyError(property_id)

    def _index(self, property_id: str) -> int:
        for i, prop in enumerate(self._properties):
            if prop.id == property_id:
                return i
        raise PropertyNotFoundError(property_id)

    def get(self, property_id: str) -> Property:
        """Return the property with `property_id`.

        Raises:
            PropertyNotFoundError: Unknown identifier
        """
        return self._properties[self._index(property_id)]

    def add(self, prop: Property) -> Property:
        """Insert a property at the front and select it.

        Raises:
            DuplicatePropertyError: Identifier already present
        """
        self._ensure_unique(prop.id)
        self._properties.insert(0, prop)
        self.selected_id = prop.id
        log.info("property_added", property_id=prop.id, address=prop.address, count=len(self))
        return prop

    def update(self, prop: Property) -> Property:
        """Replace the stored property that has the same identifier."""
        self._properties[self._index(prop.id)] = prop
        log.debug("property_updated", property_id=prop.id)
        return prop

    def toggle_favorite(self, property_id: str) -> Property:
        """Flip the favorite flag, returning the updated property."""
        prop = self.get(property_id)
        prop.is_favorite = not prop.is_favorite
        log.debug("favorite_toggled", property_id=property_id, is_favorite=prop.is_favorite)
        return prop

    def remove(self, property_id: str) -> Property:
        """Delete a property. Clears the selection if it pointed at it."""
        prop = self._properties.pop(self._index(property_id))
        if self.selected_id == property_id:
            self.selected_id = None
        log.info("property_removed", property_id=property_id, count=len(self))
        return prop

    def select(self, property_id: str) -> Property:
        prop = self.get(property_id)
        self.selected_id = property_id
        return prop

    @property
    def selected(self) -> Property | None:
        """Selected property, falling back to the first one."""
        if self.selected_id is not None and self.selected_id in self:
            return self.get(self.selected_id)
        return self._properties[0] if self._properties else None

    def filtered(self, favorites_only: bool = False) -> list[Property]:
        """Properties for the "all" or "favorites" view."""
        if favorites_only:
            return [p for p in self._properties if p.is_favorite]
        return list(self._properties)

    def metrics(self, property_id: str) -> InvestmentMetrics:
        """Fresh metrics for one property."""
        return analyze_property(self.get(property_id))
