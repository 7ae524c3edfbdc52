"""Core loan math, configuration and error types."""

from .exceptions import (
    ConfigurationError,
    DuplicatePropertyError,
    InvalidListingError,
    InvalidParameterError,
    ListingProviderError,
    PortfolioError,
    PropertyNotFoundError,
    PropVestError,
)
from .financial import (
    calculate_loan_amount,
    calculate_monthly_payment,
    calculate_total_interest,
    generate_amortization_schedule,
)

__all__ = [
    "calculate_loan_amount",
    "calculate_monthly_payment",
    "calculate_total_interest",
    "generate_amortization_schedule",
    # Exceptions
    "PropVestError",
    "InvalidListingError",
    "InvalidParameterError",
    "PortfolioError",
    "PropertyNotFoundError",
    "DuplicatePropertyError",
    "ListingProviderError",
    "ConfigurationError",
]
