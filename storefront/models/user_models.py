"""
Pydantic models for user accounts.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Payload for creating a user account."""
    username: str = Field(..., description="Login name", min_length=1)
    email: EmailStr = Field(..., description="Email address (unique)")
    password: str = Field(..., description="Password, hashed before it reaches storage", min_length=1)
    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")
    phone: Optional[str] = Field(None, description="Contact phone number")

    @field_validator('username')
    @classmethod
    def validate_not_empty_or_whitespace(cls, v: str) -> str:
        """Validate that string fields are not empty or only whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty or contain only whitespace")
        return v.strip()


class User(BaseModel):
    """Stored user account."""
    id: int
    username: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime


class UserPublic(BaseModel):
    """User as returned over HTTP: everything except the password hash."""
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime


class LoginRequest(BaseModel):
    """Credentials for a login attempt."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
