import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import NotFoundError
from app.domain.quiz_domain import QuizDomain
from app.repositories.storage import Storage, get_storage
from app.schemas.user import UserCreate, UserPublic
from app.services.user import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


@router.post(
    "/users",
    response_model=UserPublic,
    status_code=status.HTTP_200_OK,
)
async def create_user(user: UserCreate, storage: Storage = Depends(get_storage)):
    """
    Register a quiz participant

    Name, school and phone number are required. The phone number may only
    contain digits, spaces, dashes, parentheses and plus signs. Only the
    public user fields are returned.
    """
    try:
        service = UserService(storage)
        return QuizDomain.to_public(await service.register(user))
    except Exception:
        logger.exception("User registration error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/users/{user_id}", response_model=UserPublic)
async def get_user(user_id: str, storage: Storage = Depends(get_storage)):
    """Get a registered user by ID"""
    try:
        service = UserService(storage)
        return QuizDomain.to_public(await service.get_user(user_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Get user error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
