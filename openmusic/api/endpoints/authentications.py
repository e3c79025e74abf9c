# ============================================================================
# FILE: openmusic/api/endpoints/authentications.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from openmusic.api.dependencies import (
    get_authentication_service,
    get_token_manager,
    get_user_service,
)
from openmusic.core.security import TokenManager
from openmusic.schemas.authentication import LoginPayload, RefreshTokenPayload
from openmusic.services.authentication_service import AuthenticationService
from openmusic.services.user_service import UserService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
def post_authentication(
    payload: LoginPayload,
    user_service: UserService = Depends(get_user_service),
    authentication_service: AuthenticationService = Depends(get_authentication_service),
    token_manager: TokenManager = Depends(get_token_manager)
):
    """
    Login with username and password
    Returns an access token and a refresh token
    """
    user_id = user_service.verify_user_credential(payload.username, payload.password)

    access_token = token_manager.generate_access_token({"id": user_id})
    refresh_token = token_manager.generate_refresh_token({"id": user_id})
    authentication_service.add_refresh_token(refresh_token)

    logger.info(f"User logged in: {user_id}")
    return {
        "status": "success",
        "message": "Authentication added",
        "data": {
            "accessToken": access_token,
            "refreshToken": refresh_token,
        },
    }

@router.put("")
def put_authentication(
    payload: RefreshTokenPayload,
    authentication_service: AuthenticationService = Depends(get_authentication_service),
    token_manager: TokenManager = Depends(get_token_manager)
):
    """
    Exchange a stored refresh token for a new access token
    """
    authentication_service.verify_refresh_token(payload.refresh_token)
    claims = token_manager.verify_refresh_token(payload.refresh_token)

    access_token = token_manager.generate_access_token({"id": claims["id"]})
    return {
        "status": "success",
        "message": "Access token refreshed",
        "data": {"accessToken": access_token},
    }

@router.delete("")
def delete_authentication(
    payload: RefreshTokenPayload,
    authentication_service: AuthenticationService = Depends(get_authentication_service)
):
    """
    Logout: revoke a refresh token
    """
    authentication_service.verify_refresh_token(payload.refresh_token)
    authentication_service.delete_refresh_token(payload.refresh_token)
    return {
        "status": "success",
        "message": "Refresh token deleted",
    }
