import logging
from typing import List

from app.core.exceptions import DuplicateQuizResponseError, NotFoundError
from app.domain.quiz_domain import QuizDomain
from app.repositories.storage import Storage
from app.schemas.quiz_response import QuizResponseCreate, QuizResponseRead

logger = logging.getLogger(__name__)


class QuizResponseService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def submit(self, response: QuizResponseCreate) -> QuizResponseRead:
        """
        Record a user's completed quiz attempt.

        The user and quiz must exist and the user must not have submitted
        this quiz before. When no score is supplied it is computed as the
        number of answered questions.

        Raises:
            NotFoundError: unknown user or quiz
            DuplicateQuizResponseError: the user already completed the quiz
        """
        if await self.storage.get_user(response.user_id) is None:
            raise NotFoundError("User not found")

        if await self.storage.get_quiz(response.quiz_id) is None:
            raise NotFoundError("Quiz not found")

        existing = await self.storage.get_user_quiz_response(
            response.user_id, response.quiz_id
        )
        if existing is not None:
            logger.warning(
                f"User {response.user_id} already completed quiz {response.quiz_id}"
            )
            raise DuplicateQuizResponseError(response.user_id, response.quiz_id)

        scored = response.model_copy(
            update={"score": QuizDomain.resolve_score(response)}
        )
        created = await self.storage.create_quiz_response(scored)
        logger.info(
            f"📝 User {created.user_id} submitted quiz {created.quiz_id} "
            f"({len(created.answers)} answered, score={created.score})"
        )
        return created

    async def list_for_user(self, user_id: str) -> List[QuizResponseRead]:
        return await self.storage.get_quiz_responses_by_user(user_id)

    async def get_for_user_and_quiz(self, user_id: str, quiz_id: str) -> QuizResponseRead:
        response = await self.storage.get_user_quiz_response(user_id, quiz_id)
        if response is None:
            raise NotFoundError("Quiz response not found")
        return response
