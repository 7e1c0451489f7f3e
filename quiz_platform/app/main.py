"""
Application factories for the quiz and question services.

``create_quiz_app`` and ``create_question_app`` each build a separate
FastAPI application: they configure logging, construct the repository
selected by ``Settings.store_backend``, hand it to the service
constructor and store the service on ``app.state`` for the endpoint
dependencies.  Run a single service with uvicorn's factory mode, e.g.::

    uvicorn quiz_platform.app.main:create_quiz_app --factory --port 8081

or start both with ``python run.py``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.router import question_router, quiz_router
from .core.config import Settings, settings
from .core.db import get_database_path
from .core.logging_config import setup_logging
from .core.result import StoreError
from .repositories.base import QuestionRepository, QuizRepository
from .repositories.question_repository import InMemoryQuestionRepository, SQLiteQuestionRepository
from .repositories.quiz_repository import InMemoryQuizRepository, SQLiteQuizRepository
from .services.question_service import QuestionService
from .services.quiz_service import QuizService

logger = logging.getLogger(__name__)

STORE_BACKENDS = {"sqlite", "memory"}


def _check_backend(app_settings: Settings) -> str:
    backend = app_settings.store_backend.lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown STORE_BACKEND {app_settings.store_backend!r}; expected one of {sorted(STORE_BACKENDS)}"
        )
    return backend


def build_quiz_repository(app_settings: Settings) -> QuizRepository:
    if _check_backend(app_settings) == "memory":
        return InMemoryQuizRepository()
    return SQLiteQuizRepository(get_database_path(app_settings.quiz_database_url))


def build_question_repository(app_settings: Settings) -> QuestionRepository:
    if _check_backend(app_settings) == "memory":
        return InMemoryQuestionRepository()
    return SQLiteQuestionRepository(get_database_path(app_settings.question_database_url))


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage backend error"},
    )


def _base_app(app_settings: Settings, service_name: str) -> FastAPI:
    setup_logging(app_settings.log_level, app_settings.log_file or None)
    app = FastAPI(
        title=f"{app_settings.project_name} - {service_name.capitalize()} Service",
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.service_name = service_name
    app.add_exception_handler(StoreError, store_error_handler)
    return app


def create_quiz_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[QuizRepository] = None,
) -> FastAPI:
    """Create the quiz service application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    repository : Optional[QuizRepository]
        Repository to wire in; built from ``app_settings`` if omitted.
    """
    app_settings = app_settings or settings
    app = _base_app(app_settings, "quiz")
    app.state.quiz_service = QuizService(repository or build_quiz_repository(app_settings))
    app.include_router(quiz_router)
    logger.info("Quiz service ready (store backend: %s)", app_settings.store_backend)
    return app


def create_question_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[QuestionRepository] = None,
) -> FastAPI:
    """Create the question service application.

    Same parameters as ``create_quiz_app``, with a ``QuestionRepository``.
    """
    app_settings = app_settings or settings
    app = _base_app(app_settings, "question")
    app.state.question_service = QuestionService(repository or build_question_repository(app_settings))
    app.include_router(question_router)
    logger.info("Question service ready (store backend: %s)", app_settings.store_backend)
    return app
