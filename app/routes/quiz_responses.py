import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import DuplicateQuizResponseError, NotFoundError
from app.repositories.storage import Storage, get_storage
from app.schemas.quiz_response import QuizResponseCreate, QuizResponseRead
from app.services.quiz_response import QuizResponseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz-responses"])


@router.post(
    "/quiz-responses",
    response_model=QuizResponseRead,
    status_code=status.HTTP_200_OK,
)
async def submit_quiz_response(
    request: QuizResponseCreate, storage: Storage = Depends(get_storage)
):
    """
    Submit a user's answers for a quiz

    The user and quiz must already exist and each user may submit a quiz
    only once. When score is omitted it defaults to the number of answered
    questions.
    """
    try:
        service = QuizResponseService(storage)
        return await service.submit(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateQuizResponseError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Submit quiz response error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get(
    "/users/{user_id}/quiz-responses",
    response_model=List[QuizResponseRead],
)
async def list_user_quiz_responses(
    user_id: str, storage: Storage = Depends(get_storage)
):
    """List every quiz response submitted by a user"""
    try:
        service = QuizResponseService(storage)
        return await service.list_for_user(user_id)
    except Exception:
        logger.exception("Get user responses error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get(
    "/users/{user_id}/quiz-responses/{quiz_id}",
    response_model=QuizResponseRead,
)
async def get_user_quiz_response(
    user_id: str, quiz_id: str, storage: Storage = Depends(get_storage)
):
    """Get the response a user submitted for a specific quiz"""
    try:
        service = QuizResponseService(storage)
        return await service.get_for_user_and_quiz(user_id, quiz_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Get user quiz response error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
