from abc import ABC, abstractmethod
from functools import lru_cache
from typing import List, Optional

from app.core.config import Settings, settings
from app.schemas.quiz import QuizCreate, QuizRead
from app.schemas.quiz_response import QuizResponseCreate, QuizResponseRead
from app.schemas.user import UserCreate, UserRead


class Storage(ABC):
    """
    Persistence capability for users, quizzes and quiz responses.

    Creates always succeed and return the stored record with a fresh ID and
    timestamp; gets return None on a miss. The one exception is
    create_quiz_response, which inserts only if the (user, quiz) pair has no
    response yet and raises DuplicateQuizResponseError otherwise.
    """

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[UserRead]: ...

    @abstractmethod
    async def create_user(self, user: UserCreate) -> UserRead: ...

    @abstractmethod
    async def get_quiz(self, quiz_id: str) -> Optional[QuizRead]: ...

    @abstractmethod
    async def get_all_quizzes(self) -> List[QuizRead]: ...

    @abstractmethod
    async def create_quiz(self, quiz: QuizCreate) -> QuizRead: ...

    @abstractmethod
    async def create_quiz_response(
        self, response: QuizResponseCreate
    ) -> QuizResponseRead: ...

    @abstractmethod
    async def get_quiz_responses_by_user(
        self, user_id: str
    ) -> List[QuizResponseRead]: ...

    @abstractmethod
    async def get_user_quiz_response(
        self, user_id: str, quiz_id: str
    ) -> Optional[QuizResponseRead]: ...


def build_storage(config: Settings) -> Storage:
    """Create the storage variant selected by STORAGE_BACKEND"""
    backend = config.STORAGE_BACKEND.strip().lower()
    if backend == "memory":
        from app.repositories.memory_storage import MemoryStorage

        return MemoryStorage(
            seed=config.SEED_SAMPLE_QUIZ, sample_quiz_id=config.DEFAULT_QUIZ_ID
        )
    if backend == "database":
        from app.core.database import build_engine, build_session_factory
        from app.repositories.database_storage import DatabaseStorage

        engine = build_engine(config.DATABASE_URL)
        return DatabaseStorage(
            build_session_factory(engine),
            engine=engine,
            seed=config.SEED_SAMPLE_QUIZ,
            sample_quiz_id=config.DEFAULT_QUIZ_ID,
        )
    raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND}")


@lru_cache
def get_storage() -> Storage:
    """Process-wide storage, injected into routes with Depends"""
    return build_storage(settings)
