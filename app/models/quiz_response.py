from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.types import JSON

from app.core.database import Base, UTCDateTime


class QuizResponse(Base):
    __tablename__ = "quiz_responses"

    id = Column(String(36), primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    quiz_id = Column(String(36), ForeignKey("quizzes.id"), nullable=False, index=True)
    answers = Column(JSON, nullable=False)
    score = Column(Integer, nullable=True)
    completed_at = Column(UTCDateTime(), nullable=False, index=True)

    # Ensure one response per user per quiz
    __table_args__ = (
        UniqueConstraint("user_id", "quiz_id", name="uq_quiz_response_user_quiz"),
    )
