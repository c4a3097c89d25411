"""
User and login models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    username: str
    email: Optional[str] = None     # depends on instance settings
    created: Optional[datetime] = None


class LoginRequest(BaseModel):
    """POST /auth/login body"""
    alias: str
    password: str = Field(alias="pass", repr=False)

    model_config = ConfigDict(populate_by_name=True)


class LoginResponse(BaseModel):
    access_token: str
    user: Optional[User] = None
