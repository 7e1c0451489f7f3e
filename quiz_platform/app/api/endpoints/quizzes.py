"""
Quiz endpoints.

Routes are listed in ``ROUTES`` as ``(method, path, handler,
response_model)`` and registered on ``router`` in one loop, which is
mounted under ``/quiz`` by ``api.router``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from quiz_platform.app.api.dependencies import get_quiz_service, unwrap
from quiz_platform.app.core.db import INTEGER_MAX, INTEGER_MIN
from quiz_platform.app.schemas.quiz import QuizCreate, QuizRead
from quiz_platform.app.services.quiz_service import QuizService


async def create_quiz(
    quiz: QuizCreate,
    service: QuizService = Depends(get_quiz_service),
) -> QuizRead:
    """Store a new quiz and return it with its assigned id."""
    return await service.create(quiz)


async def get_quiz(
    quiz_id: int = Path(..., ge=INTEGER_MIN, le=INTEGER_MAX),
    service: QuizService = Depends(get_quiz_service),
) -> QuizRead:
    """Retrieve a single quiz by id.  Returns HTTP 404 if it does not exist."""
    return unwrap(await service.get(quiz_id))


async def get_all_quizzes(
    service: QuizService = Depends(get_quiz_service),
) -> List[QuizRead]:
    """Return every stored quiz."""
    return await service.get_all()


ROUTES = (
    ("POST", "/create", create_quiz, QuizRead),
    ("GET", "/get/{quiz_id}", get_quiz, QuizRead),
    ("GET", "/getAll", get_all_quizzes, List[QuizRead]),
)

router = APIRouter()
for method, path, endpoint, response_model in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], response_model=response_model)
