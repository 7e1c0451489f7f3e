"""
Configuration for the quiz and question services.

Both services share one ``Settings`` dataclass that reads its values
from environment variables.  Defaults are provided for every field so
the services start without any configuration; each service keeps its
own database file so that the two can be deployed separately.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Quiz Platform")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Either ``sqlite`` (persistent, one file per service) or ``memory``
    # (process-local, lost on restart).
    store_backend: str = os.getenv("STORE_BACKEND", "sqlite")

    # Paths to the SQLite files.  Relative paths are resolved against the
    # project root by the ``db`` module.
    quiz_database_url: str = os.getenv("QUIZ_DATABASE_URL", "quiz_service.db")
    question_database_url: str = os.getenv("QUESTION_DATABASE_URL", "question_service.db")

    quiz_service_host: str = os.getenv("QUIZ_SERVICE_HOST", "0.0.0.0")
    quiz_service_port: int = int(os.getenv("QUIZ_SERVICE_PORT", "8081"))
    question_service_host: str = os.getenv("QUESTION_SERVICE_HOST", "0.0.0.0")
    question_service_port: int = int(os.getenv("QUESTION_SERVICE_PORT", "8082"))


# Environment variables are read once, when this module is imported.
settings = Settings()
