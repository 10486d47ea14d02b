"""
Carga de dados a partir de um arquivo JSON

Formato: {"users": [...], "things": [...], "reviews": [...]}. Usuários entram
com senha em texto e são gravados com hash; ids e datas podem vir fixos.

    python -m thingful.seed fixtures.json
"""
import argparse
import json
import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from thingful.core import database
from thingful.core.config import settings
from thingful.models.thing_model import Review, Thing
from thingful.models.user_model import User
from thingful.schemas.review_schema import ReviewCreate
from thingful.schemas.thing_schema import ThingCreate
from thingful.schemas.user_schema import UserCreate
from thingful.services import user_service

logger = logging.getLogger(__name__)


def seed_users(db: Session, users: Iterable[UserCreate]) -> List[User]:
    return [user_service.create_user(db, user_in) for user_in in users]


def seed_things(db: Session, things: Iterable[ThingCreate]) -> List[Thing]:
    db_things = [Thing(**thing.model_dump(exclude_none=True)) for thing in things]
    db.add_all(db_things)
    db.commit()
    return db_things


def seed_reviews(db: Session, reviews: Iterable[ReviewCreate]) -> List[Review]:
    db_reviews = [Review(**review.model_dump(exclude_none=True)) for review in reviews]
    db.add_all(db_reviews)
    db.commit()
    return db_reviews


def seed_from_data(db: Session, data: dict) -> dict:
    users = seed_users(db, [UserCreate.model_validate(u) for u in data.get("users", [])])
    things = seed_things(db, [ThingCreate.model_validate(t) for t in data.get("things", [])])
    reviews = seed_reviews(db, [ReviewCreate.model_validate(r) for r in data.get("reviews", [])])
    return {"users": len(users), "things": len(things), "reviews": len(reviews)}


def seed_from_file(db: Session, path: str) -> dict:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return seed_from_data(db, data)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Carrega users, things e reviews de um arquivo JSON")
    parser.add_argument("path", help="arquivo JSON com as chaves users, things e reviews")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if settings.CREATE_TABLES:
        database.Base.metadata.create_all(bind=database.engine)

    db = database.SessionLocal()
    try:
        counts = seed_from_file(db, args.path)
    except Exception as e:
        db.rollback()
        logger.error(f"Erro ao carregar {args.path}: {e}", exc_info=True)
        raise
    finally:
        db.close()

    logger.info(
        f"Seed concluído: {counts['users']} users, {counts['things']} things, {counts['reviews']} reviews"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
