from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class TrainerCreate(BaseModel):
    name: str = Field(max_length=100)
    email: EmailStr | None = None
    bio: str | None = None


class TrainerRead(TrainerCreate):
    id: int
    owner_subject: str
    created_at: datetime

    model_config = {"from_attributes": True}
