from .quiz import Quiz
from .quiz_response import QuizResponse
from .user import User

__all__ = ["User", "Quiz", "QuizResponse"]
