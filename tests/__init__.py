"""
Test suite for routing-transit-number

Contains:
- tests/unit/          : Unit tests for individual modules
"""
