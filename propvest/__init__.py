"""
propvest - Rental Property Investment Analyzer

Turns a property's acquisition, financing, income and expense assumptions
into investment metrics and a fair-offer recommendation.

Modules:
    - core: Loan math, settings, logging and exceptions
    - domain: Pydantic models and the analytics / offer calculators
    - application: Listing normalizer, portfolio, search and export services
"""

__version__ = "1.2.0"
