"""
Top-level routers, one per service.

``quiz_router`` serves the quiz service under ``/quiz`` and
``question_router`` the question service under ``/question``.  Each
also carries the ``/health`` check.
"""

from fastapi import APIRouter

from .endpoints import health, questions, quizzes

quiz_router = APIRouter()
quiz_router.include_router(quizzes.router, prefix="/quiz", tags=["quiz"])
quiz_router.include_router(health.router, tags=["health"])

question_router = APIRouter()
question_router.include_router(questions.router, prefix="/question", tags=["question"])
question_router.include_router(health.router, tags=["health"])
