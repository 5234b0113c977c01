"""
Scheduling Infrastructure Layer

Persistence adapters for the scheduling domain.
"""
