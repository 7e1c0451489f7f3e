"""
Service layer.

Services receive their repository through the constructor and add no
business rules of their own; ``get`` calls report a missing record as
a ``NotFound`` value instead of raising.
"""
