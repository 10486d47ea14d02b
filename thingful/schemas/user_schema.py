from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    user_name: str
    full_name: str
    nickname: Optional[str] = None


class UserCreate(UserBase):
    user_name: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    # id e data fixos só quando vêm de um arquivo de seed
    id: Optional[int] = None
    date_created: Optional[datetime] = None


class UserOut(UserBase):
    id: int
    date_created: datetime

    model_config = ConfigDict(from_attributes=True)
