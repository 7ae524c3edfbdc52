"""Derived metric data models.

Results of the analytics engine and of the offer assessment. Both are
frozen snapshots computed from a property's current inputs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class InvestmentMetrics(BaseModel):
    """Investment metrics for one property.

    Ratio metrics are None when their denominator is zero (not applicable).
    """

    model_config = {"frozen": True}

    # Financing
    loan_amount: float = Field(..., description="Borrowed principal in $")
    cash_invested: float = Field(..., description="Down payment in $")
    monthly_payment: float = Field(..., description="Monthly principal + interest in $")
    annual_debt_service: float = Field(..., description="Yearly mortgage payments in $")

    # Operations
    gross_annual_revenue: float = Field(..., description="Yearly rental revenue in $")
    annual_operating_expenses: float = Field(..., description="Yearly expenses excluding debt in $")
    net_operating_income: float = Field(..., description="Revenue minus operating expenses in $")
    annual_cash_flow: float = Field(..., description="NOI minus debt service in $")
    monthly_cash_flow: float = Field(..., description="Annual cash flow / 12 in $")

    # Ratios
    cap_rate: float | None = Field(None, description="NOI / price, %")
    cash_on_cash_return: float | None = Field(None, description="Cash flow / cash invested, %")
    break_even_occupancy: float | None = Field(None, description="Occupancy % where cash flow is zero")
    dscr: float | None = Field(None, description="NOI / annual debt service")

    @property
    def is_cash_flow_positive(self) -> bool:
        return self.annual_cash_flow > 0


class OfferVerdict(str, Enum):
    """Outcome of comparing the asking price with the income-based fair value."""

    FAIR = "fair"
    NEGOTIATE = "negotiate"
    OVERPRICED = "overpriced"
    INSUFFICIENT_INCOME = "insufficient_income"


class OfferAssessment(BaseModel):
    """Fair-offer recommendation for one property."""

    model_config = {"frozen": True}

    verdict: OfferVerdict
    target_cap_rate: float = Field(..., description="Cap rate the fair value is priced at, %")
    fair_value: float | None = Field(None, description="Price yielding the target cap rate in $")
    suggested_offer: float | None = Field(None, description="Recommended offer in $")
    narrative: str = Field(..., description="Human-readable recommendation")
