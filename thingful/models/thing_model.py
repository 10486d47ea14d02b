from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from thingful.core.database import Base, UTCDateTime
from thingful.models.user_model import utcnow


class Thing(Base):
    __tablename__ = "things"

    id           = Column(Integer, primary_key=True, index=True)
    title        = Column(String, nullable=False)
    content      = Column(Text, nullable=True)
    image        = Column(String, nullable=True)
    date_created = Column(UTCDateTime, default=utcnow, nullable=False)
    user_id      = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    user    = relationship("User", back_populates="things")
    reviews = relationship(
        "Review",
        back_populates="thing",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )


class Review(Base):
    __tablename__ = "reviews"

    id           = Column(Integer, primary_key=True, index=True)
    text         = Column(Text, nullable=False)
    rating       = Column(Integer, nullable=False)
    date_created = Column(UTCDateTime, default=utcnow, nullable=False)
    thing_id     = Column(Integer, ForeignKey("things.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id      = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    # Nota vai de 1 a 5
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )

    thing = relationship("Thing", back_populates="reviews")
    user  = relationship("User", back_populates="reviews")
