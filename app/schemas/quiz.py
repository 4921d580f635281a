from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.base import CamelModel


class OptionSchema(CamelModel):
    id: str = Field(..., description="Option ID, unique within its question")
    text: str


class QuestionSchema(CamelModel):
    id: str = Field(..., description="Question ID, unique within its quiz")
    text: str
    options: List[OptionSchema] = Field(default_factory=list)


class QuizCreate(CamelModel):
    title: str
    description: Optional[str] = None
    questions: List[QuestionSchema] = Field(
        ..., description="Ordered list of multiple-choice questions"
    )


class QuizRead(QuizCreate):
    id: str
    created_at: datetime
