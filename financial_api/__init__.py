"""
Financial API service package.

Layered around a single bounded context (users):
domain -> application -> infrastructure / interfaces.
"""
