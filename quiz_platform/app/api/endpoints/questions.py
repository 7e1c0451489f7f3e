"""
Question endpoints.

Same layout as ``quizzes``: an explicit ``ROUTES`` table registered on
``router``, mounted under ``/question``.  ``/quiz/{quiz_id}`` lists the
questions recorded against a quiz id and returns an empty list, not an
error, when there are none.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from quiz_platform.app.api.dependencies import get_question_service, unwrap
from quiz_platform.app.core.db import INTEGER_MAX, INTEGER_MIN
from quiz_platform.app.schemas.question import QuestionCreate, QuestionRead
from quiz_platform.app.services.question_service import QuestionService


async def create_question(
    question: QuestionCreate,
    service: QuestionService = Depends(get_question_service),
) -> QuestionRead:
    return await service.create(question)


async def get_all_questions(
    service: QuestionService = Depends(get_question_service),
) -> List[QuestionRead]:
    return await service.get_all()


async def get_question(
    question_id: int = Path(..., ge=INTEGER_MIN, le=INTEGER_MAX),
    service: QuestionService = Depends(get_question_service),
) -> QuestionRead:
    """Retrieve a single question by id.  Returns HTTP 404 if it does not exist."""
    return unwrap(await service.get(question_id))


async def get_questions_of_quiz(
    quiz_id: int = Path(..., ge=INTEGER_MIN, le=INTEGER_MAX),
    service: QuestionService = Depends(get_question_service),
) -> List[QuestionRead]:
    return await service.get_questions_of_quiz(quiz_id)


ROUTES = (
    ("POST", "/create", create_question, QuestionRead),
    ("GET", "/getAll", get_all_questions, List[QuestionRead]),
    ("GET", "/get/{question_id}", get_question, QuestionRead),
    ("GET", "/quiz/{quiz_id}", get_questions_of_quiz, List[QuestionRead]),
)

router = APIRouter()
for method, path, endpoint, response_model in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], response_model=response_model)
