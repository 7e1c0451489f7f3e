"""
Application package for the two services.

The quiz and question services share this package but are built as
separate FastAPI applications by the factories in ``main``.  Each is
layered as endpoints (``api``) over services (``services``) over
repositories (``repositories``), with shared configuration, logging,
database and result types in ``core``.
"""

from .main import create_question_app, create_quiz_app  # noqa: F401
