from .quiz import QuizService
from .quiz_response import QuizResponseService
from .user import UserService

__all__ = ["UserService", "QuizService", "QuizResponseService"]
