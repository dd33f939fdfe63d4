"""
Survey module.

Keyed response container, score computation and id generators for
bulk insertion.
"""
