"""Financial calculation functions.

Core loan and amortization calculations for rental property investments.
"""

from __future__ import annotations

import numpy as np
import numpy_financial as npf
import pandas as pd

from propvest.core.exceptions import InvalidParameterError

SCHEDULE_COLUMNS = [
    "month",
    "opening_balance",
    "interest",
    "principal",
    "payment",
    "closing_balance",
]


def calculate_loan_amount(price: float, down_payment_pct: float) -> float:
    """Amount borrowed once the down payment is paid.

    Args:
        price: Purchase price in $
        down_payment_pct: Down payment as percentage of price (e.g., 20 for 20%)

    Returns:
        Loan principal in $

    Raises:
        InvalidParameterError: Down payment outside 0-100%
    """
    if not 0 <= down_payment_pct <= 100:
        raise InvalidParameterError("down_payment_pct", down_payment_pct, "must be between 0 and 100")
    return price * (1.0 - down_payment_pct / 100.0)


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Calculate monthly loan payment (principal + interest).

    Args:
        principal: Loan amount in $
        annual_rate_pct: Annual interest rate as percentage (e.g., 6.5 for 6.5%)
        duration_months: Loan term in months

    Returns:
        Monthly payment amount in $
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    # The annuity formula is undefined at a zero rate
    if monthly_rate <= 0:
        return principal / duration_months

    return float(-npf.pmt(monthly_rate, duration_months, principal))


def generate_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> pd.DataFrame:
    """Generate the full loan amortization schedule.

    Args:
        principal: Loan amount in $
        annual_rate_pct: Annual interest rate %
        duration_months: Loan term in months

    Returns:
        DataFrame with one row per month and columns:
        month, opening_balance, interest, principal, payment, closing_balance.
        Empty (but with the same columns) when there is nothing to repay.
    """
    if principal <= 0 or duration_months <= 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    monthly_rate = max(0.0, (annual_rate_pct / 100.0) / 12.0)
    payment = calculate_monthly_payment(principal, annual_rate_pct, duration_months)

    months = np.arange(1, duration_months + 1)
    opening = np.empty(duration_months)
    interest = np.empty(duration_months)
    principal_paid = np.empty(duration_months)

    balance = principal
    for i in range(duration_months):
        opening[i] = balance
        interest[i] = balance * monthly_rate
        principal_paid[i] = payment - interest[i]
        balance -= principal_paid[i]

    return pd.DataFrame({
        "month": months,
        "opening_balance": opening,
        "interest": interest,
        "principal": principal_paid,
        "payment": np.full(duration_months, payment),
        # Float drift leaves a few cents of dust on the last row
        "closing_balance": np.maximum(0.0, opening - principal_paid),
    })


def calculate_total_interest(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Total interest paid over the life of the loan.

    Args:
        principal: Loan amount in $
        annual_rate_pct: Annual interest rate %
        duration_months: Loan term in months

    Returns:
        Sum of all interest payments in $
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0
    payment = calculate_monthly_payment(principal, annual_rate_pct, duration_months)
    return payment * duration_months - principal
