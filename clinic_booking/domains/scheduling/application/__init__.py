"""
Scheduling Application Layer

Use cases and ports for appointment scheduling.
"""
