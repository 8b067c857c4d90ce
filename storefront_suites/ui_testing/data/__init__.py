"""
Test data for the storefront UI suites.
"""

from .storefront_data import (
    CartExpectations,
    CategoryData,
    LoginCredentials,
    RegistrationCredentials,
    StorefrontData,
    build_storefront_data,
    timestamp_email_factory,
)

__all__ = [
    "CartExpectations",
    "CategoryData",
    "LoginCredentials",
    "RegistrationCredentials",
    "StorefrontData",
    "build_storefront_data",
    "timestamp_email_factory",
]
