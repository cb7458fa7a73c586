from pydantic import BaseModel, EmailStr, Field
from typing import Optional
import uuid

from app.schemas.base import CamelModel, CamelResponse, UtcDatetime


class UserCreate(CamelModel):
    """Schema for user registration"""
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    full_name: Optional[str] = Field(None, max_length=255)


class UserLogin(BaseModel):
    """Schema for user login"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelResponse):
    """Schema for user response"""
    id: uuid.UUID
    email: EmailStr
    full_name: Optional[str] = None
    is_active: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime


class Token(BaseModel):
    """Schema for JWT token response"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class TokenData(BaseModel):
    """Schema for token data"""
    user_id: Optional[str] = None
    email: Optional[str] = None
    issued_at: Optional[float] = None
