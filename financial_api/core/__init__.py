"""
Core package.

Holds process-wide configuration.
"""
