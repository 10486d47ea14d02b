from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from thingful.core.database import Base, UTCDateTime


def utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id            = Column(Integer, primary_key=True, index=True)
    user_name     = Column(String, unique=True, index=True, nullable=False)
    full_name     = Column(String, nullable=False)
    password      = Column(String, nullable=False)
    nickname      = Column(String, nullable=True)
    date_created  = Column(UTCDateTime, default=utcnow, nullable=False)
    date_modified = Column(UTCDateTime, nullable=True)

    things  = relationship("Thing", back_populates="user", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")
