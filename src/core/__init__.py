"""
Core domain value objects and contracts.

This module contains the building blocks that are independent of the
transaction-building and networking layers: addresses, colors, amount
rules and JSON Schema contracts.
"""
