from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from thingful.schemas.user_schema import UserOut


class ReviewCreate(BaseModel):
    id: Optional[int] = None
    text: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    thing_id: int
    user_id: int
    date_created: Optional[datetime] = None


class ReviewOut(BaseModel):
    id: int
    text: str
    rating: int = Field(..., ge=1, le=5)
    thing_id: int
    date_created: datetime
    user: Optional[UserOut] = None

    model_config = ConfigDict(from_attributes=True)
