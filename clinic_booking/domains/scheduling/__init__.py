"""
Scheduling Domain

Doctor availability, appointment booking and status transitions.
"""
