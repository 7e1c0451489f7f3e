"""
Pydantic schema definitions for API payloads.

Each service defines a ``*Create`` model for request bodies and a
``*Read`` model, which adds the server-assigned ``id``, for responses.
"""
