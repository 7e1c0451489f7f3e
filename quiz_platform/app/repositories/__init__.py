"""
Persistence layer.

Every entity has an abstract repository in ``base`` and two
implementations: SQLite for deployments and an in-memory store for
tests and demos.  Services depend only on the abstract interface.
"""
