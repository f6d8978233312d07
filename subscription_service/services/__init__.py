"""
Domain services that combine several models.
"""
