from .database_storage import DatabaseStorage
from .memory_storage import MemoryStorage
from .quiz_repository import QuizRepository
from .quiz_response_repository import QuizResponseRepository
from .storage import Storage, build_storage, get_storage
from .user_repository import UserRepository

__all__ = [
    "Storage",
    "MemoryStorage",
    "DatabaseStorage",
    "UserRepository",
    "QuizRepository",
    "QuizResponseRepository",
    "build_storage",
    "get_storage",
]
