import pytest
from fastapi.testclient import TestClient

from quiz_platform.app.core.config import Settings
from quiz_platform.app.main import create_question_app, create_quiz_app


@pytest.fixture
def sqlite_settings(tmp_path):
    return Settings(
        store_backend="sqlite",
        quiz_database_url=str(tmp_path / "quiz.db"),
        question_database_url=str(tmp_path / "question.db"),
        log_file="",
    )


@pytest.fixture
def memory_settings():
    return Settings(store_backend="memory", log_file="")


@pytest.fixture(params=["sqlite", "memory"])
def app_settings(request, sqlite_settings, memory_settings):
    return sqlite_settings if request.param == "sqlite" else memory_settings


@pytest.fixture
def quiz_client(app_settings):
    return TestClient(create_quiz_app(app_settings))


@pytest.fixture
def question_client(app_settings):
    return TestClient(create_question_app(app_settings))
