import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import NotFoundError
from app.repositories.storage import Storage, get_storage
from app.schemas.quiz import QuizRead
from app.services.quiz import QuizService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz"])


@router.get("/quizzes", response_model=List[QuizRead])
async def list_quizzes(storage: Storage = Depends(get_storage)):
    """List every available quiz"""
    try:
        service = QuizService(storage)
        return await service.list_quizzes()
    except Exception:
        logger.exception("Get quizzes error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/quizzes/{quiz_id}", response_model=QuizRead)
async def get_quiz(quiz_id: str, storage: Storage = Depends(get_storage)):
    """Get a quiz with its questions and options"""
    try:
        service = QuizService(storage)
        return await service.get_quiz(quiz_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Get quiz error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
