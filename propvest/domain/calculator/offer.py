"""Fair-offer assessment.

Prices the property by income: the fair value is the price at which the
current NOI would yield the target cap rate. The asking price is then
judged against that value.
"""

from __future__ import annotations

from propvest.core.settings import AppSettings, get_settings
from propvest.domain.calculator.metrics import analyze_property, safe_ratio
from propvest.domain.models.metrics import InvestmentMetrics, OfferAssessment, OfferVerdict
from propvest.domain.models.property import Property


def _money(value: float) -> str:
    if abs(value) >= 1000:
        return f"${value / 1000:,.0f}k"
    return f"${value:,.0f}"


def income_fair_value(noi: float, target_cap_rate_pct: float) -> float | None:
    """Price at which `noi` yields `target_cap_rate_pct`. None without income."""
    if noi <= 0:
        return None
    return safe_ratio(noi, target_cap_rate_pct / 100.0)


def assess_offer(
    prop: Property,
    metrics: InvestmentMetrics | None = None,
    settings: AppSettings | None = None,
) -> OfferAssessment:
    """Judge whether the asking price is fair.

    Args:
        prop: Property to assess
        metrics: Precomputed metrics for `prop` (computed when omitted)
        settings: Thresholds source (application settings when omitted)

    Returns:
        OfferAssessment with verdict, fair value, suggested offer and narrative
    """
    settings = settings or get_settings()
    metrics = metrics or analyze_property(prop)
    target = settings.target_cap_rate_pct
    margin = settings.negotiation_margin_pct / 100.0

    fair_value = income_fair_value(metrics.net_operating_income, target)
    occupancy = f"{prop.occupancy_rate:g}% occupancy estimate"
    cash_flow = f"{_money(metrics.monthly_cash_flow)}/month cash flow"

    if fair_value is None:
        return OfferAssessment(
            verdict=OfferVerdict.INSUFFICIENT_INCOME,
            target_cap_rate=target,
            narrative=(
                f"At the {occupancy} the rental income does not cover operating "
                f"expenses, so the list price of {_money(prop.price)} cannot be "
                f"justified by income. Revisit the nightly rate and expenses."
            ),
        )

    if prop.price <= fair_value:
        verdict = OfferVerdict.FAIR
        suggested = prop.price
        narrative = (
            f"Based on {cash_flow} and the {occupancy}, the list price of "
            f"{_money(prop.price)} appears fair against an income value of "
            f"{_money(fair_value)} at a {target:g}% cap rate."
        )
    elif prop.price <= fair_value * (1.0 + margin):
        verdict = OfferVerdict.NEGOTIATE
        suggested = fair_value
        narrative = (
            f"With {cash_flow} at the {occupancy}, the list price of "
            f"{_money(prop.price)} is slightly above its {_money(fair_value)} "
            f"income value. An offer of {_money(suggested)} would meet a "
            f"{target:g}% cap rate."
        )
    else:
        verdict = OfferVerdict.OVERPRICED
        suggested = fair_value
        narrative = (
            f"The list price of {_money(prop.price)} is well above the "
            f"{_money(fair_value)} the income supports at a {target:g}% cap rate "
            f"({cash_flow}, {occupancy}). Only an offer near {_money(suggested)} "
            f"makes the numbers work."
        )

    return OfferAssessment(
        verdict=verdict,
        target_cap_rate=target,
        fair_value=fair_value,
        suggested_offer=suggested,
        narrative=narrative,
    )
