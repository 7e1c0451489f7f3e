"""
HTTP layer for both services.

Endpoint modules in ``endpoints`` declare their routes as explicit
tables; ``router`` mounts them under each service's base path.
"""
