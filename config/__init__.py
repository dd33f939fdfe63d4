"""
Configuration package for netpromoter.
"""
