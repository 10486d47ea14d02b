"""
Consultas de things e reviews.

Cada thing volta junto com o número de reviews e a média das notas, calculados
no banco com um LEFT JOIN numa subquery agregada.
"""
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from thingful.models.thing_model import Review, Thing

ThingRow = Tuple[Thing, Optional[int], Optional[float]]


class ThingsStore:
    def __init__(self, db: Session):
        self.db = db

    def _review_stats(self):
        return (
            self.db.query(
                Review.thing_id.label("thing_id"),
                func.count(Review.id).label("number_of_reviews"),
                func.avg(Review.rating).label("average_review_rating"),
            )
            .group_by(Review.thing_id)
            .subquery()
        )

    def _things_query(self):
        stats = self._review_stats()
        return (
            self.db.query(Thing, stats.c.number_of_reviews, stats.c.average_review_rating)
            .outerjoin(stats, stats.c.thing_id == Thing.id)
            .options(joinedload(Thing.user))
        )

    def list_things(self) -> List[ThingRow]:
        return [tuple(row) for row in self._things_query().order_by(Thing.id).all()]

    def get_thing(self, thing_id: int) -> Optional[ThingRow]:
        row = self._things_query().filter(Thing.id == thing_id).first()
        return tuple(row) if row else None

    def thing_exists(self, thing_id: int) -> bool:
        return self.db.query(Thing.id).filter(Thing.id == thing_id).first() is not None

    def get_reviews_for_thing(self, thing_id: int) -> List[Review]:
        return (
            self.db.query(Review)
            .options(joinedload(Review.user))
            .filter(Review.thing_id == thing_id)
            .order_by(Review.id)
            .all()
        )
