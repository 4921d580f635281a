from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    """Repository for User database operations following DDD pattern"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user entry by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def create(self, user_data: dict) -> User:
        """Create a new user entry"""
        db_user = User(**user_data)
        self.db.add(db_user)
        self.db.commit()
        self.db.refresh(db_user)
        return db_user
