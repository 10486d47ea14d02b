from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from thingful.schemas.user_schema import UserOut


class ThingCreate(BaseModel):
    id: Optional[int] = None
    title: str = Field(..., min_length=1)
    content: Optional[str] = None
    image: Optional[str] = None
    user_id: int
    date_created: Optional[datetime] = None


class ThingOut(BaseModel):
    id: int
    title: str
    content: Optional[str] = None
    image: Optional[str] = None
    date_created: datetime
    user: Optional[UserOut] = None
    number_of_reviews: int = 0
    average_review_rating: int = 0

    model_config = ConfigDict(from_attributes=True)
