from typing import List, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from app.models.quiz_response import QuizResponse


class QuizResponseRepository:
    """Repository for QuizResponse database operations following DDD pattern"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user_id(self, user_id: str) -> List[QuizResponse]:
        """Get all quiz responses submitted by a user"""
        return (
            self.db.query(QuizResponse)
            .filter(QuizResponse.user_id == user_id)
            .order_by(QuizResponse.completed_at)
            .all()
        )

    def get_by_user_and_quiz(self, user_id: str, quiz_id: str) -> Optional[QuizResponse]:
        """Get the response a user submitted for a specific quiz"""
        return (
            self.db.query(QuizResponse)
            .filter(
                and_(
                    QuizResponse.user_id == user_id,
                    QuizResponse.quiz_id == quiz_id,
                )
            )
            .first()
        )

    def create(self, response_data: dict) -> QuizResponse:
        """
        Create a new quiz response entry.

        Raises IntegrityError (after rolling back) when the user already has
        a response for the quiz.
        """
        db_response = QuizResponse(**response_data)
        self.db.add(db_response)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(db_response)
        return db_response
