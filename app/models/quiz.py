from sqlalchemy import Column, String, Text
from sqlalchemy.types import JSON

from app.core.database import Base, UTCDateTime


class Quiz(Base):
    __tablename__ = "quizzes"

    id = Column(String(36), primary_key=True, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    # [{"id": "q1", "text": ..., "options": [{"id": "a1", "text": ...}]}]
    questions = Column(JSON, nullable=False)
    created_at = Column(UTCDateTime(), nullable=False)
