"""
Pydantic models for newsletter subscribers and contact-form messages.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class SubscriberCreate(BaseModel):
    """Newsletter sign-up."""
    email: EmailStr


class Subscriber(BaseModel):
    id: int
    email: str
    created_at: datetime


class ContactCreate(BaseModel):
    """Contact-form submission."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    subject: Optional[str] = None
    message: str = Field(..., min_length=1)


class Contact(BaseModel):
    id: int
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    created_at: datetime
