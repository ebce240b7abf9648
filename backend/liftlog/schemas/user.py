from typing import Annotated
from pydantic import BaseModel, EmailStr, Field, model_validator
from datetime import datetime

from liftlog.models.user import UserRole

PasswordStr = Annotated[str, Field(min_length=8, max_length=128)]

class UserRegister(BaseModel):
    email: EmailStr = Field(max_length=255)
    password: PasswordStr
    password_confirm: Annotated[str, Field(min_length=8, max_length=128)]

    @model_validator(mode="after")
    def passwords_match(self) -> "UserRegister":
        if self.password != self.password_confirm:
            raise ValueError("Passwords do not match")
        return self

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class RefreshRequest(BaseModel):
    refresh_token: Annotated[str, Field(min_length=1)]

class UserSummary(BaseModel):
    id: str
    email: str
    model_config = {"from_attributes": True}

class UserRead(UserSummary):
    role: UserRole
    created_at: datetime

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSummary
