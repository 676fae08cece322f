"""
Test suite for the SendFunds options layer

Contains:
- tests/unit/          : Unit tests for domain types, options, builder, contracts
"""
