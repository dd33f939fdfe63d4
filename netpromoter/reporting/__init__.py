"""
Reporting helpers for netpromoter.

Segment counts and pandas views for external report generators.
"""
