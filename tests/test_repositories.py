import sqlite3

import pytest

from quiz_platform.app.core.db import QUESTION_MIGRATIONS, QUIZ_MIGRATIONS, get_cursor, init_db
from quiz_platform.app.core.result import StoreError
from quiz_platform.app.repositories.question_repository import (
    InMemoryQuestionRepository,
    SQLiteQuestionRepository,
)
from quiz_platform.app.repositories.quiz_repository import InMemoryQuizRepository, SQLiteQuizRepository
from quiz_platform.app.schemas.question import QuestionCreate
from quiz_platform.app.schemas.quiz import QuizCreate


@pytest.fixture(params=["sqlite", "memory"])
def quiz_repo(request, tmp_path):
    if request.param == "sqlite":
        return SQLiteQuizRepository(str(tmp_path / "quiz.db"))
    return InMemoryQuizRepository()


@pytest.fixture(params=["sqlite", "memory"])
def question_repo(request, tmp_path):
    if request.param == "sqlite":
        return SQLiteQuestionRepository(str(tmp_path / "question.db"))
    return InMemoryQuestionRepository()


def test_quiz_ids_are_sequential(quiz_repo):
    first = quiz_repo.create(QuizCreate(title="a"))
    second = quiz_repo.create(QuizCreate(title="b"))
    assert (first.id, second.id) == (1, 2)


def test_quiz_find_by_id(quiz_repo):
    created = quiz_repo.create(QuizCreate(title="Math", description="Numbers"))
    assert quiz_repo.find_by_id(created.id) == created
    assert quiz_repo.find_by_id(created.id + 1) is None


def test_quiz_find_all_in_id_order(quiz_repo):
    created = [quiz_repo.create(QuizCreate(title=str(i))) for i in range(5)]
    assert quiz_repo.find_all() == created


def test_question_find_all_by_quiz_id(question_repo):
    q1 = question_repo.create(QuestionCreate(text="a", quiz_id=1))
    question_repo.create(QuestionCreate(text="b", quiz_id=2))
    q3 = question_repo.create(QuestionCreate(text="c", quiz_id=1))
    assert question_repo.find_all_by_quiz_id(1) == [q1, q3]
    assert question_repo.find_all_by_quiz_id(3) == []


def test_question_round_trip(question_repo):
    created = question_repo.create(QuestionCreate(text="2+2?", quiz_id=7))
    assert question_repo.find_by_id(created.id) == created
    assert question_repo.find_by_id(99) is None


def test_sqlite_data_survives_reopening(tmp_path):
    path = str(tmp_path / "quiz.db")
    created = SQLiteQuizRepository(path).create(QuizCreate(title="Persisted"))
    assert SQLiteQuizRepository(path).find_by_id(created.id) == created


def test_init_db_is_idempotent(tmp_path):
    path = str(tmp_path / "question.db")
    assert init_db(path, QUESTION_MIGRATIONS) == 2
    assert init_db(path, QUESTION_MIGRATIONS) == 2
    with get_cursor(path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [1, 2]


def test_init_db_applies_only_new_migrations(tmp_path):
    path = str(tmp_path / "quiz.db")
    init_db(path, QUIZ_MIGRATIONS)
    extra = QUIZ_MIGRATIONS + [(2, "ALTER TABLE quizzes ADD COLUMN level TEXT;")]
    assert init_db(path, extra) == 2
    with get_cursor(path) as cursor:
        columns = [row["name"] for row in cursor.execute("PRAGMA table_info(quizzes)")]
    assert "level" in columns


def test_sqlite_failure_raises_store_error(tmp_path):
    path = str(tmp_path / "quiz.db")
    repo = SQLiteQuizRepository(path)
    conn = sqlite3.connect(path)
    conn.execute("DROP TABLE quizzes")
    conn.commit()
    conn.close()
    with pytest.raises(StoreError):
        repo.find_all()


def test_unusable_database_path_raises_store_error(tmp_path):
    with pytest.raises(StoreError):
        SQLiteQuizRepository(str(tmp_path / "missing" / "quiz.db"))


def test_sqlite_out_of_range_integer_raises_store_error(tmp_path):
    quizzes = SQLiteQuizRepository(str(tmp_path / "quiz.db"))
    questions = SQLiteQuestionRepository(str(tmp_path / "question.db"))
    with pytest.raises(StoreError):
        quizzes.find_by_id(2**64)
    with pytest.raises(StoreError):
        questions.find_all_by_quiz_id(2**64)
    with pytest.raises(StoreError):
        questions.create(QuestionCreate.model_construct(text="?", quiz_id=2**64))
