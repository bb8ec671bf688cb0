"""
Pydantic models for key/value site settings.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

DEFAULT_SETTING_CATEGORY = "general"


class SettingCreate(BaseModel):
    """Payload for creating a setting."""
    key: str = Field(..., description="Setting key (unique), e.g. 'site.logoUrl'", min_length=1)
    value: Optional[str] = None
    category: str = Field(DEFAULT_SETTING_CATEGORY, min_length=1)
    description: Optional[str] = None

    @field_validator('key')
    @classmethod
    def validate_not_empty_or_whitespace(cls, v: str) -> str:
        """Validate that the key is not empty or only whitespace."""
        if not v or not v.strip():
            raise ValueError("Setting key cannot be empty or contain only whitespace")
        return v.strip()


class SettingUpdate(BaseModel):
    """Partial setting update."""
    key: Optional[str] = Field(None, min_length=1)
    value: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None

    @field_validator('key', 'category')
    @classmethod
    def validate_not_null(cls, v: Optional[str]) -> str:
        """Key and category can be changed but not cleared."""
        if v is None or not v.strip():
            raise ValueError("Field cannot be null, empty or contain only whitespace")
        return v.strip()


class Setting(BaseModel):
    """Stored setting."""
    id: int
    key: str
    value: Optional[str] = None
    category: str = DEFAULT_SETTING_CATEGORY
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
