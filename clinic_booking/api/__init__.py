"""
HTTP layer: routing, middleware and exception handlers.
"""
