"""
Business logic for questions.

``QuestionService`` delegates to a ``QuestionRepository``.  The
``quiz_id`` of a new question is not checked against the quiz
service; questions referencing an unknown quiz are stored as well.
"""

import logging
from typing import List

from quiz_platform.app.core.result import NotFound, Ok, Result
from quiz_platform.app.repositories.base import QuestionRepository
from quiz_platform.app.schemas.question import QuestionCreate, QuestionRead

logger = logging.getLogger(__name__)


class QuestionService:
    """Service for creating and reading questions."""

    def __init__(self, repository: QuestionRepository) -> None:
        self.repository = repository

    async def create(self, data: QuestionCreate) -> QuestionRead:
        question = self.repository.create(data)
        logger.info("Created question %s for quiz %s", question.id, question.quiz_id)
        return question

    async def get(self, question_id: int) -> Result[QuestionRead]:
        question = self.repository.find_by_id(question_id)
        if question is None:
            logger.info("Question %s not found", question_id)
            return NotFound(entity="Question", entity_id=question_id)
        return Ok(question)

    async def get_all(self) -> List[QuestionRead]:
        return self.repository.find_all()

    async def get_questions_of_quiz(self, quiz_id: int) -> List[QuestionRead]:
        """Return the questions recorded against ``quiz_id``, possibly none."""
        return self.repository.find_all_by_quiz_id(quiz_id)
