"""
Interface layer package.

HTTP routers, request/response schemas and dependency wiring.
Routes delegate to handlers and use cases; no business logic here.
"""
