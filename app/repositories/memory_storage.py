import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.core.exceptions import DuplicateQuizResponseError
from app.domain.quiz_domain import SAMPLE_QUIZ_ID, QuizDomain
from app.repositories.storage import Storage
from app.schemas.quiz import QuizCreate, QuizRead
from app.schemas.quiz_response import QuizResponseCreate, QuizResponseRead
from app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """Dictionary-backed storage; records live for the process lifetime"""

    def __init__(self, seed: bool = True, sample_quiz_id: str = SAMPLE_QUIZ_ID):
        self.users: Dict[str, UserRead] = {}
        self.quizzes: Dict[str, QuizRead] = {}
        self.quiz_responses: Dict[str, QuizResponseRead] = {}
        self._responses_lock = threading.Lock()

        if seed:
            self._seed_sample_quiz(sample_quiz_id)

    def _seed_sample_quiz(self, quiz_id: str) -> None:
        quiz = QuizDomain.sample_quiz()
        self.quizzes[quiz_id] = QuizRead(**quiz.model_dump(), id=quiz_id, created_at=_now())
        logger.info(f"Seeded sample quiz '{quiz_id}' into memory storage")

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        return self.users.get(user_id)

    async def create_user(self, user: UserCreate) -> UserRead:
        record = UserRead(**user.model_dump(), id=_new_id(), created_at=_now())
        self.users[record.id] = record
        return record

    async def get_quiz(self, quiz_id: str) -> Optional[QuizRead]:
        return self.quizzes.get(quiz_id)

    async def get_all_quizzes(self) -> List[QuizRead]:
        return list(self.quizzes.values())

    async def create_quiz(self, quiz: QuizCreate) -> QuizRead:
        record = QuizRead(**quiz.model_dump(), id=_new_id(), created_at=_now())
        self.quizzes[record.id] = record
        return record

    async def create_quiz_response(
        self, response: QuizResponseCreate
    ) -> QuizResponseRead:
        # Check and insert under one lock so two submissions cannot both pass
        with self._responses_lock:
            if self._find_response(response.user_id, response.quiz_id) is not None:
                raise DuplicateQuizResponseError(response.user_id, response.quiz_id)
            record = QuizResponseRead(
                **response.model_dump(), id=_new_id(), completed_at=_now()
            )
            self.quiz_responses[record.id] = record
        return record

    async def get_quiz_responses_by_user(self, user_id: str) -> List[QuizResponseRead]:
        return [r for r in self.quiz_responses.values() if r.user_id == user_id]

    async def get_user_quiz_response(
        self, user_id: str, quiz_id: str
    ) -> Optional[QuizResponseRead]:
        return self._find_response(user_id, quiz_id)

    def _find_response(self, user_id: str, quiz_id: str) -> Optional[QuizResponseRead]:
        return next(
            (
                r
                for r in list(self.quiz_responses.values())
                if r.user_id == user_id and r.quiz_id == quiz_id
            ),
            None,
        )


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)
