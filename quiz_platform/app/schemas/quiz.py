"""
Pydantic models for quiz data.

No field is required: the quiz service stores whatever it is given.
Any ``id`` in a create body is ignored because identity is always
assigned by the store.
"""

from typing import Optional

from pydantic import BaseModel, Field


class QuizBase(BaseModel):
    title: Optional[str] = Field(None, examples=["Math"])
    description: Optional[str] = Field(None, examples=["Basic arithmetic"])


class QuizCreate(QuizBase):
    """Schema for creating a quiz."""
    pass


class QuizRead(QuizBase):
    """Schema for reading a quiz from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
