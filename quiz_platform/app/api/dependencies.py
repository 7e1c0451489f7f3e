"""
Request-time accessors for objects wired at application start.

The application factories in ``main`` construct each service once and
store it on ``app.state``; handlers receive it through ``Depends``.
"""

from typing import TypeVar

from fastapi import HTTPException, Request, status

from quiz_platform.app.core.result import NotFound, Result
from quiz_platform.app.services.question_service import QuestionService
from quiz_platform.app.services.quiz_service import QuizService

T = TypeVar("T")


def get_quiz_service(request: Request) -> QuizService:
    return request.app.state.quiz_service


def get_question_service(request: Request) -> QuestionService:
    return request.app.state.question_service


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` result or raise HTTP 404 for ``NotFound``."""
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    return result.value
