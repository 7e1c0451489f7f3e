import pytest
from fastapi.testclient import TestClient

from quiz_platform.app.core.config import Settings
from quiz_platform.app.core.result import StoreError
from quiz_platform.app.main import create_question_app, create_quiz_app
from quiz_platform.app.repositories.question_repository import InMemoryQuestionRepository
from quiz_platform.app.repositories.quiz_repository import InMemoryQuizRepository


class FailingQuizRepository(InMemoryQuizRepository):
    def find_all(self):
        raise StoreError("disk I/O error")


class FailingQuestionRepository(InMemoryQuestionRepository):
    def find_all_by_quiz_id(self, quiz_id):
        raise StoreError("database is locked")


def test_unknown_store_backend_is_rejected():
    with pytest.raises(ValueError):
        create_quiz_app(Settings(store_backend="redis"))
    with pytest.raises(ValueError):
        create_question_app(Settings(store_backend="redis"))


def test_store_backend_name_is_case_insensitive():
    client = TestClient(create_quiz_app(Settings(store_backend="MEMORY")))
    assert client.get("/quiz/getAll").json() == []


def test_explicit_repository_is_used(memory_settings):
    repository = InMemoryQuizRepository()
    client = TestClient(create_quiz_app(memory_settings, repository=repository))
    client.post("/quiz/create", json={"title": "Wired"})
    assert [quiz.title for quiz in repository.find_all()] == ["Wired"]


def test_store_error_maps_to_500(memory_settings):
    client = TestClient(create_quiz_app(memory_settings, repository=FailingQuizRepository()))
    response = client.get("/quiz/getAll")
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage backend error"}


def test_question_store_error_maps_to_500(memory_settings):
    client = TestClient(create_question_app(memory_settings, repository=FailingQuestionRepository()))
    response = client.get("/question/quiz/1")
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage backend error"}


def test_sqlite_files_are_created_per_service(sqlite_settings, tmp_path):
    create_quiz_app(sqlite_settings)
    create_question_app(sqlite_settings)
    assert (tmp_path / "quiz.db").exists()
    assert (tmp_path / "question.db").exists()


def test_openapi_titles(memory_settings):
    quiz_schema = TestClient(create_quiz_app(memory_settings)).get("/openapi.json").json()
    question_schema = TestClient(create_question_app(memory_settings)).get("/openapi.json").json()
    assert quiz_schema["info"]["title"] == "Quiz Platform - Quiz Service"
    assert question_schema["info"]["title"] == "Quiz Platform - Question Service"
    assert "/quiz/get/{quiz_id}" in quiz_schema["paths"]
    assert "/question/quiz/{quiz_id}" in question_schema["paths"]
