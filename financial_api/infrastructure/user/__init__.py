"""
Infrastructure adapters for the user bounded context.
"""
