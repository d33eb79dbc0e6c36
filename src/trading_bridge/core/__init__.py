"""
Core domain models, conversion math, errors and capability ports.

This module contains the foundational building blocks that are independent
of the host ledger (balances, attributes, markers, storage).
"""
