from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    """Registration body for POST /users"""

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr
