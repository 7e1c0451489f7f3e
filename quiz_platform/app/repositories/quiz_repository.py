"""
Quiz repositories.

``SQLiteQuizRepository`` stores quizzes in the quiz service's own
SQLite file; ``InMemoryQuizRepository`` keeps them in a dict.  Both
assign ids sequentially starting from 1 and list in id order.
"""

from __future__ import annotations

import sqlite3
import threading
from typing import Dict, List, Optional

from quiz_platform.app.core.db import QUIZ_MIGRATIONS, get_cursor, init_db
from quiz_platform.app.core.result import StoreError
from quiz_platform.app.repositories.base import QuizRepository
from quiz_platform.app.schemas.quiz import QuizCreate, QuizRead


class SQLiteQuizRepository(QuizRepository):
    """Quiz persistence backed by SQLite."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path
        try:
            init_db(database_path, QUIZ_MIGRATIONS)
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot initialise quiz database: {exc}") from exc

    def create(self, data: QuizCreate) -> QuizRead:
        try:
            with get_cursor(self.database_path) as cursor:
                cursor.execute(
                    "INSERT INTO quizzes (title, description) VALUES (?, ?)",
                    (data.title, data.description),
                )
                quiz_id = cursor.lastrowid
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        return QuizRead(id=quiz_id, **data.model_dump())

    def find_by_id(self, quiz_id: int) -> Optional[QuizRead]:
        try:
            with get_cursor(self.database_path) as cursor:
                row = cursor.execute(
                    "SELECT id, title, description FROM quizzes WHERE id = ?",
                    (quiz_id,),
                ).fetchone()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        if row is None:
            return None
        return self._row_to_quiz(row)

    def find_all(self) -> List[QuizRead]:
        try:
            with get_cursor(self.database_path) as cursor:
                rows = cursor.execute(
                    "SELECT id, title, description FROM quizzes ORDER BY id"
                ).fetchall()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(str(exc)) from exc
        return [self._row_to_quiz(row) for row in rows]

    @staticmethod
    def _row_to_quiz(row: sqlite3.Row) -> QuizRead:
        return QuizRead(id=row["id"], title=row["title"], description=row["description"])


class InMemoryQuizRepository(QuizRepository):
    """Process-local quiz store."""

    def __init__(self) -> None:
        self._quizzes: Dict[int, QuizRead] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, data: QuizCreate) -> QuizRead:
        with self._lock:
            quiz = QuizRead(id=self._next_id, **data.model_dump())
            self._quizzes[quiz.id] = quiz
            self._next_id += 1
        return quiz

    def find_by_id(self, quiz_id: int) -> Optional[QuizRead]:
        with self._lock:
            return self._quizzes.get(quiz_id)

    def find_all(self) -> List[QuizRead]:
        with self._lock:
            return [self._quizzes[key] for key in sorted(self._quizzes)]
