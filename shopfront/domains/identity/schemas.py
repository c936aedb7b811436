from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shopfront.domains.identity.entities import Role


class UserLogin(BaseModel):
    """Login credentials; the email is not format-checked so every failure looks alike"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    message: str
    token: str
    role: Role


class AdminRegistration(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: Role


class UserUpdate(BaseModel):
    """Partial update: only the fields that are sent are changed"""
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8, max_length=128)
    role: Optional[Role] = None


class UserResponse(BaseModel):
    """User as listed to admins; never carries the password hash"""
    id: str
    email: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserCreatedResponse(BaseModel):
    message: str
    user_id: str
