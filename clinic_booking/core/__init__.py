"""
Core building blocks shared by all domains.
"""
