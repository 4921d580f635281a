from datetime import datetime
from typing import Dict, Optional

from pydantic import Field

from app.schemas.base import CamelModel


class QuizResponseCreate(CamelModel):
    user_id: str = Field(..., description="ID of the registered user")
    quiz_id: str = Field(..., description="ID of the quiz being submitted")
    answers: Dict[str, str] = Field(
        ..., description="Selected option ID keyed by question ID"
    )
    score: Optional[int] = Field(
        None, ge=0, description="Defaults to the number of answered questions"
    )


class QuizResponseRead(CamelModel):
    id: str
    user_id: str
    quiz_id: str
    answers: Dict[str, str]
    score: Optional[int] = None
    completed_at: datetime
