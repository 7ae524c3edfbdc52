"""Investment analytics engine.

Pure functions deriving investment metrics from a property's current
inputs. Nothing is cached: every call recomputes from the fields, so an
edited property never shows stale numbers.

Expense cadence:
- annual: property tax, insurance, snow removal, hot tub, other expenses
- monthly: utilities, maintenance, HOA (annualized x12)
- management fee: percentage of gross revenue
"""

from __future__ import annotations

import math

import pandas as pd

from propvest.core.financial import (
    calculate_loan_amount,
    calculate_monthly_payment,
    calculate_total_interest,
    generate_amortization_schedule,
)
from propvest.domain.models.metrics import InvestmentMetrics
from propvest.domain.models.property import Property

NIGHTS_PER_YEAR = 365
MONTHS_PER_YEAR = 12


def safe_ratio(numerator: float, denominator: float) -> float | None:
    """Divide, returning None instead of inf/NaN.

    Used by every ratio metric so a zero price, down payment or nightly
    rate yields "not applicable" rather than a non-finite number.
    """
    if denominator == 0:
        return None
    result = numerator / denominator
    if not math.isfinite(result):
        return None
    return result


def safe_percentage(numerator: float, denominator: float) -> float | None:
    """safe_ratio scaled to a percentage."""
    ratio = safe_ratio(numerator, denominator)
    return None if ratio is None else ratio * 100.0


def loan_amount(prop: Property) -> float:
    return calculate_loan_amount(prop.price, prop.down_payment_percent)


def cash_invested(prop: Property) -> float:
    return prop.price * (prop.down_payment_percent / 100.0)


def monthly_mortgage_payment(prop: Property) -> float:
    return calculate_monthly_payment(
        loan_amount(prop),
        prop.interest_rate,
        prop.loan_term_years * MONTHS_PER_YEAR,
    )


def amortization_schedule(prop: Property) -> pd.DataFrame:
    """Month-by-month repayment of the property's mortgage."""
    return generate_amortization_schedule(
        loan_amount(prop),
        prop.interest_rate,
        prop.loan_term_years * MONTHS_PER_YEAR,
    )


def total_interest_paid(prop: Property) -> float:
    return calculate_total_interest(
        loan_amount(prop),
        prop.interest_rate,
        prop.loan_term_years * MONTHS_PER_YEAR,
    )


def annual_debt_service(prop: Property) -> float:
    return monthly_mortgage_payment(prop) * MONTHS_PER_YEAR


def gross_annual_revenue(prop: Property) -> float:
    return prop.nightly_rate * NIGHTS_PER_YEAR * (prop.occupancy_rate / 100.0)


def fixed_annual_expenses(prop: Property) -> float:
    """Operating expenses that do not scale with revenue."""
    return (
        prop.property_tax
        + prop.insurance
        + prop.snow_removal
        + prop.hot_tub_maintenance
        + prop.utilities * MONTHS_PER_YEAR
        + prop.maintenance * MONTHS_PER_YEAR
        + prop.hoa * MONTHS_PER_YEAR
        + prop.other_expenses
    )


def management_fee(prop: Property) -> float:
    return (prop.management_fee_percent / 100.0) * gross_annual_revenue(prop)


def annual_operating_expenses(prop: Property) -> float:
    """All operating expenses, excluding debt service."""
    return fixed_annual_expenses(prop) + management_fee(prop)


def net_operating_income(prop: Property) -> float:
    return gross_annual_revenue(prop) - annual_operating_expenses(prop)


def annual_cash_flow(prop: Property) -> float:
    return net_operating_income(prop) - annual_debt_service(prop)


def cap_rate(prop: Property) -> float | None:
    """NOI / price, as a percentage. None when price is 0."""
    return safe_percentage(net_operating_income(prop), prop.price)


def cash_on_cash_return(prop: Property) -> float | None:
    """Annual cash flow / down payment, as a percentage. None with no cash in."""
    return safe_percentage(annual_cash_flow(prop), cash_invested(prop))


def break_even_occupancy(prop: Property) -> float | None:
    """Occupancy % at which annual cash flow is exactly zero.

    Cash flow is linear in occupancy:
        CF(o) = R(o) * (1 - fee) - fixed - debt,  R(o) = nightly * 365 * o/100
    so CF = 0 at o = (fixed + debt) / ((1 - fee) * nightly * 365) * 100.

    None when the nightly rate is 0 or the management fee takes all revenue.
    Values above 100 mean no occupancy level breaks even.
    """
    if prop.nightly_rate == 0:
        return None
    net_share = 1.0 - prop.management_fee_percent / 100.0
    revenue_at_full = prop.nightly_rate * NIGHTS_PER_YEAR * net_share
    return safe_percentage(
        fixed_annual_expenses(prop) + annual_debt_service(prop),
        revenue_at_full,
    )


def debt_service_coverage_ratio(prop: Property) -> float | None:
    """NOI / annual debt service. None for a loan-free purchase."""
    return safe_ratio(net_operating_income(prop), annual_debt_service(prop))


def analyze_property(prop: Property) -> InvestmentMetrics:
    """Compute the full set of investment metrics for a property.

    Args:
        prop: Property with its current assumptions

    Returns:
        Frozen InvestmentMetrics snapshot
    """
    loan = loan_amount(prop)
    payment = monthly_mortgage_payment(prop)
    debt_service = payment * MONTHS_PER_YEAR
    revenue = gross_annual_revenue(prop)
    expenses = annual_operating_expenses(prop)
    noi = revenue - expenses
    cash_flow = noi - debt_service
    invested = cash_invested(prop)

    return InvestmentMetrics(
        loan_amount=loan,
        cash_invested=invested,
        monthly_payment=payment,
        annual_debt_service=debt_service,
        gross_annual_revenue=revenue,
        annual_operating_expenses=expenses,
        net_operating_income=noi,
        annual_cash_flow=cash_flow,
        monthly_cash_flow=cash_flow / MONTHS_PER_YEAR,
        cap_rate=safe_percentage(noi, prop.price),
        cash_on_cash_return=safe_percentage(cash_flow, invested),
        break_even_occupancy=break_even_occupancy(prop),
        dscr=safe_ratio(noi, debt_service),
    )
