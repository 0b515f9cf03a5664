"""
Utility functions used by the hashing rules.
"""
