"""
HTTP API namespaces.
"""
