"""
Test suite for trading_bridge

Contains:
- tests/unit/          : Unit tests for individual modules and entry points
"""
