"""
Endpoint modules, one per service plus the shared health check.
"""
