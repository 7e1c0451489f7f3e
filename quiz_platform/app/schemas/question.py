"""
Pydantic models for question data.

On the wire the quiz reference is spelled ``quizId``; in Python it is
``quiz_id``.  Request bodies may use either name.  The quiz id is not
checked against the quiz service.
"""

from typing import Optional

from pydantic import BaseModel, Field

from quiz_platform.app.core.db import INTEGER_MAX, INTEGER_MIN


class QuestionBase(BaseModel):
    text: Optional[str] = Field(None, examples=["2+2?"])
    quiz_id: Optional[int] = Field(
        None, alias="quizId", ge=INTEGER_MIN, le=INTEGER_MAX, examples=[1]
    )

    model_config = {
        "populate_by_name": True,
    }


class QuestionCreate(QuestionBase):
    """Schema for creating a question."""
    pass


class QuestionRead(QuestionBase):
    """Schema for reading a question from the API."""

    id: int

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
