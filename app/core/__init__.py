"""
Core domain logic: favorites persistence, pagination and search annotation.
"""
