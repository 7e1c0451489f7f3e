"""
Top-level package for the quiz and question services.

All functionality lives in submodules under ``app``; the client for
calling the running services is the separate ``quiz_platform_client``
module at the project root.
"""

__all__ = []
