import logging

from app.core.exceptions import NotFoundError
from app.repositories.storage import Storage
from app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def register(self, user: UserCreate) -> UserRead:
        """Store a new participant"""
        created = await self.storage.create_user(user)
        logger.info(f"✅ Registered user {created.id} from school '{created.school}'")
        return created

    async def get_user(self, user_id: str) -> UserRead:
        user = await self.storage.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
