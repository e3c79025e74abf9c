# ============================================================================
# FILE: openmusic/api/endpoints/users.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from openmusic.api.dependencies import get_user_service
from openmusic.schemas.user import UserCreate, UserResponse
from openmusic.services.user_service import UserService

router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
def post_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """
    Register a new user account
    """
    user_id = user_service.add_user(user_data)
    return {
        "status": "success",
        "message": "User added",
        "data": {"userId": user_id},
    }

@router.get("/{user_id}")
def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service)
):
    user = user_service.get_user_by_id(user_id)
    return {
        "status": "success",
        "data": {"user": UserResponse.model_validate(user).model_dump()},
    }
