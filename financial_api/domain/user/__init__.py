"""
User bounded context: domain layer.

Entities, errors and ports for the user resource.
"""
