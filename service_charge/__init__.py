"""
Service Charge - Source Package

Splits shared building expenses (service charges) across the flats of a
building and renders the result with localized numerals and amounts in words.

DESIGN PRINCIPLES:
1. Money always reconciles: per-flat shares are rounded UP, never down
2. The same input always produces the same bill
3. Bad form input degrades to zeros, it never crashes the calculator
4. Every language registers its own formatter
"""

__version__ = "1.0.0"
__author__ = "Service Charge Team"
