"""
Business logic for quizzes.

``QuizService`` delegates to a ``QuizRepository``.  Input is stored as
given; there is no validation beyond the request schema.
"""

import logging
from typing import List

from quiz_platform.app.core.result import NotFound, Ok, Result
from quiz_platform.app.repositories.base import QuizRepository
from quiz_platform.app.schemas.quiz import QuizCreate, QuizRead

logger = logging.getLogger(__name__)


class QuizService:
    """Service for creating and reading quizzes."""

    def __init__(self, repository: QuizRepository) -> None:
        self.repository = repository

    async def create(self, data: QuizCreate) -> QuizRead:
        quiz = self.repository.create(data)
        logger.info("Created quiz %s", quiz.id)
        return quiz

    async def get(self, quiz_id: int) -> Result[QuizRead]:
        quiz = self.repository.find_by_id(quiz_id)
        if quiz is None:
            logger.info("Quiz %s not found", quiz_id)
            return NotFound(entity="Quiz", entity_id=quiz_id)
        return Ok(quiz)

    async def get_all(self) -> List[QuizRead]:
        return self.repository.find_all()
