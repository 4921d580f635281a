import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from starlette.concurrency import run_in_threadpool

from app.core.database import init_db
from app.core.exceptions import DuplicateQuizResponseError
from app.domain.quiz_domain import SAMPLE_QUIZ_ID, QuizDomain
from app.repositories.quiz_repository import QuizRepository
from app.repositories.quiz_response_repository import QuizResponseRepository
from app.repositories.storage import Storage
from app.repositories.user_repository import UserRepository
from app.schemas.quiz import QuizCreate, QuizRead
from app.schemas.quiz_response import QuizResponseCreate, QuizResponseRead
from app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    """
    SQLAlchemy-backed storage.

    Each operation runs in its own session from ``session_factory`` and
    returns detached Pydantic records, so callers see the same types as
    with MemoryStorage. Session work happens in the threadpool so the
    event loop never waits on the database.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        engine=None,
        seed: bool = True,
        sample_quiz_id: str = SAMPLE_QUIZ_ID,
    ):
        self.session_factory = session_factory

        if engine is not None:
            init_db(engine)
        if seed:
            self._seed_sample_quiz(sample_quiz_id)

    def _seed_sample_quiz(self, quiz_id: str) -> None:
        with self.session_factory() as db:
            repository = QuizRepository(db)
            if repository.get_by_id(quiz_id) is not None:
                return
            quiz = QuizDomain.sample_quiz()
            repository.create({**quiz.model_dump(), "id": quiz_id, "created_at": _now()})
        logger.info(f"Seeded sample quiz '{quiz_id}' into database storage")

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        return await run_in_threadpool(self._get_user, user_id)

    async def create_user(self, user: UserCreate) -> UserRead:
        return await run_in_threadpool(self._create_user, user)

    async def get_quiz(self, quiz_id: str) -> Optional[QuizRead]:
        return await run_in_threadpool(self._get_quiz, quiz_id)

    async def get_all_quizzes(self) -> List[QuizRead]:
        return await run_in_threadpool(self._get_all_quizzes)

    async def create_quiz(self, quiz: QuizCreate) -> QuizRead:
        return await run_in_threadpool(self._create_quiz, quiz)

    async def create_quiz_response(
        self, response: QuizResponseCreate
    ) -> QuizResponseRead:
        return await run_in_threadpool(self._create_quiz_response, response)

    async def get_quiz_responses_by_user(self, user_id: str) -> List[QuizResponseRead]:
        return await run_in_threadpool(self._get_quiz_responses_by_user, user_id)

    async def get_user_quiz_response(
        self, user_id: str, quiz_id: str
    ) -> Optional[QuizResponseRead]:
        return await run_in_threadpool(self._get_user_quiz_response, user_id, quiz_id)

    def _get_user(self, user_id: str) -> Optional[UserRead]:
        with self.session_factory() as db:
            user = UserRepository(db).get_by_id(user_id)
            return QuizDomain.user_to_read(user) if user else None

    def _create_user(self, user: UserCreate) -> UserRead:
        with self.session_factory() as db:
            db_user = UserRepository(db).create(
                {**user.model_dump(), "id": _new_id(), "created_at": _now()}
            )
            return QuizDomain.user_to_read(db_user)

    def _get_quiz(self, quiz_id: str) -> Optional[QuizRead]:
        with self.session_factory() as db:
            quiz = QuizRepository(db).get_by_id(quiz_id)
            return QuizDomain.quiz_to_read(quiz) if quiz else None

    def _get_all_quizzes(self) -> List[QuizRead]:
        with self.session_factory() as db:
            return QuizDomain.quiz_to_read_list(QuizRepository(db).get_all())

    def _create_quiz(self, quiz: QuizCreate) -> QuizRead:
        with self.session_factory() as db:
            db_quiz = QuizRepository(db).create(
                {**quiz.model_dump(), "id": _new_id(), "created_at": _now()}
            )
            return QuizDomain.quiz_to_read(db_quiz)

    def _create_quiz_response(self, response: QuizResponseCreate) -> QuizResponseRead:
        with self.session_factory() as db:
            repository = QuizResponseRepository(db)
            try:
                db_response = repository.create(
                    {**response.model_dump(), "id": _new_id(), "completed_at": _now()}
                )
            except IntegrityError:
                # The unique (user_id, quiz_id) constraint rejected the insert
                if repository.get_by_user_and_quiz(response.user_id, response.quiz_id):
                    raise DuplicateQuizResponseError(response.user_id, response.quiz_id)
                raise
            return QuizDomain.response_to_read(db_response)

    def _get_quiz_responses_by_user(self, user_id: str) -> List[QuizResponseRead]:
        with self.session_factory() as db:
            return QuizDomain.response_to_read_list(
                QuizResponseRepository(db).get_by_user_id(user_id)
            )

    def _get_user_quiz_response(
        self, user_id: str, quiz_id: str
    ) -> Optional[QuizResponseRead]:
        with self.session_factory() as db:
            response = QuizResponseRepository(db).get_by_user_and_quiz(user_id, quiz_id)
            return QuizDomain.response_to_read(response) if response else None


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)
