"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the storefront.

Each page class declares:
    - Element locators (a class-level LocatorRegistry)
    - Page-specific actions
    - Never-raising state queries

Author: Automation Team
License: MIT
================================================================================
"""

from .header_panel import HeaderPanel
from .login_page import LoginPage
from .product_page import ProductPage
from .register_page import RegisterPage

__all__ = [
    "HeaderPanel",
    "LoginPage",
    "ProductPage",
    "RegisterPage",
]
