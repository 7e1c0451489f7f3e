"""
Shared infrastructure: settings, logging, SQLite helpers and result types.
"""
