"""
Shared helpers for the API layer.
"""
