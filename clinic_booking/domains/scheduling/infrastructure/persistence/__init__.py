"""
Scheduling persistence layer.
"""
