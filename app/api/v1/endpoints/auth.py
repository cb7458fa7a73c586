from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.api.v1.errors import http_error
from app.core.database import get_db
from app.core.deps import get_current_active_user, auth_rate_limiter
from app.core.exceptions import EnergyMonitorError
from app.core.security import generate_token_response
from app.schemas.user import UserCreate, UserLogin, Token, UserResponse
from app.models.user import User
from app.services.user_service import get_user_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
    _: None = Depends(auth_rate_limiter)
):
    """Register a new user"""
    try:
        user_service = get_user_service(db)
        user = await user_service.register(user_data)

        token_response = generate_token_response(user.to_dict())

        logger.info(f"User registered successfully: {user.email}")
        return Token(**token_response)

    except EnergyMonitorError as e:
        raise http_error(e)
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed"
        )


@router.post("/login", response_model=Token)
async def login(
    login_data: UserLogin,
    db: AsyncSession = Depends(get_db),
    _: None = Depends(auth_rate_limiter)
):
    """Authenticate user and return JWT token"""
    try:
        user_service = get_user_service(db)

        user = await user_service.authenticate_user(login_data.email, login_data.password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password"
            )

        token_response = generate_token_response(user.to_dict())

        logger.info(f"User logged in successfully: {user.email}")
        return Token(**token_response)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed"
        )


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(
    current_user: User = Depends(get_current_active_user)
):
    """Get current user profile"""
    return UserResponse.model_validate(current_user)


@router.post("/logout")
async def logout(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db)
):
    """Logout user (revoke all tokens)"""
    user_service = get_user_service(db)
    await user_service.revoke_tokens(current_user.id)

    logger.info(f"User logged out: {current_user.email}")
    return {"message": "Logged out successfully"}
