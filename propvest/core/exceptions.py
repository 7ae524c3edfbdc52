"""Custom exceptions for propvest.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class PropVestError(Exception):
    """Base exception for all propvest errors."""
    pass


# --- Input Errors ---

class InvalidListingError(PropVestError):
    """A listing payload cannot be turned into a valid property."""

    def __init__(self, message: str, address: str | None = None):
        self.address = address
        super().__init__(message)


class InvalidParameterError(PropVestError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Portfolio Errors ---

class PortfolioError(PropVestError):
    """General portfolio-related error."""
    pass


class PropertyNotFoundError(PortfolioError, KeyError):
    """No property with the given identifier is held by the portfolio."""

    def __init__(self, property_id: str):
        self.property_id = property_id
        super().__init__(f"Property '{property_id}' not found")

    def __str__(self) -> str:
        return self.args[0]


class DuplicatePropertyError(PortfolioError):
    """A property with the same identifier is already in the portfolio."""

    def __init__(self, property_id: str):
        self.property_id = property_id
        super().__init__(f"Property '{property_id}' already exists")


# --- External Errors ---

class ListingProviderError(PropVestError):
    """The listing search provider failed. Safe to retry."""

    retryable = True

    def __init__(self, query: str, reason: str = ""):
        self.query = query
        self.reason = reason
        msg = f"Listing search failed for '{query}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# --- Configuration Errors ---

class ConfigurationError(PropVestError):
    """Error in application configuration."""
    pass
