from typing import List

from app.core.exceptions import NotFoundError
from app.repositories.storage import Storage
from app.schemas.quiz import QuizRead


class QuizService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def list_quizzes(self) -> List[QuizRead]:
        return await self.storage.get_all_quizzes()

    async def get_quiz(self, quiz_id: str) -> QuizRead:
        quiz = await self.storage.get_quiz(quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz not found")
        return quiz
