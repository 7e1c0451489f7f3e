"""
Question repositories.

Questions are stored with whatever ``quiz_id`` the caller supplied.
The quiz service's data is never consulted, so a question may point
at a quiz that does not exist.
"""

from __future__ import annotations

import sqlite3
import threading
from typing import Dict, List, Optional

from quiz_platform.app.core.db import QUESTION_MIGRATIONS, get_cursor, init_db
from quiz_platform.app.core.result import StoreError
from quiz_platform.app.repositories.base import QuestionRepository
from quiz_platform.app.schemas.question import QuestionCreate, QuestionRead

_COLUMNS = "id, quiz_id, text"


class SQLiteQuestionRepository(QuestionRepository):
    """Question persistence backed by SQLite."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path
        try:
            init_db(database_path, QUESTION_MIGRATIONS)
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot initialise question database: {exc}") from exc

    def create(self, data: QuestionCreate) -> QuestionRead:
        try:
            with get_cursor(self.database_path) as cursor:
                cursor.execute(
                    "INSERT INTO questions (quiz_id, text) VALUES (?, ?)",
                    (data.quiz_id, data.text),
                )
                question_id = cursor.lastrowid
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        return QuestionRead(id=question_id, quiz_id=data.quiz_id, text=data.text)

    def find_by_id(self, question_id: int) -> Optional[QuestionRead]:
        rows = self._select(f"SELECT {_COLUMNS} FROM questions WHERE id = ?", (question_id,))
        return rows[0] if rows else None

    def find_all(self) -> List[QuestionRead]:
        return self._select(f"SELECT {_COLUMNS} FROM questions ORDER BY id", ())

    def find_all_by_quiz_id(self, quiz_id: int) -> List[QuestionRead]:
        return self._select(
            f"SELECT {_COLUMNS} FROM questions WHERE quiz_id = ? ORDER BY id",
            (quiz_id,),
        )

    def _select(self, query: str, params: tuple) -> List[QuestionRead]:
        try:
            with get_cursor(self.database_path) as cursor:
                rows = cursor.execute(query, params).fetchall()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        return [
            QuestionRead(id=row["id"], quiz_id=row["quiz_id"], text=row["text"])
            for row in rows
        ]


class InMemoryQuestionRepository(QuestionRepository):
    """Process-local question store."""

    def __init__(self) -> None:
        self._questions: Dict[int, QuestionRead] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, data: QuestionCreate) -> QuestionRead:
        with self._lock:
            question = QuestionRead(id=self._next_id, quiz_id=data.quiz_id, text=data.text)
            self._questions[question.id] = question
            self._next_id += 1
        return question

    def find_by_id(self, question_id: int) -> Optional[QuestionRead]:
        with self._lock:
            return self._questions.get(question_id)

    def find_all(self) -> List[QuestionRead]:
        with self._lock:
            return [self._questions[key] for key in sorted(self._questions)]

    def find_all_by_quiz_id(self, quiz_id: int) -> List[QuestionRead]:
        return [question for question in self.find_all() if question.quiz_id == quiz_id]
