"""
Conversão das linhas do banco para o formato de resposta.

Funções puras: recebem objetos com atributos (modelos do ORM ou qualquer
objeto equivalente) e devolvem dicts prontos para os schemas de saída.
"""
import math
from datetime import datetime, timezone
from typing import Optional

from thingful.utils.sanitizer import sanitize_text


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normaliza um timestamp para UTC com timezone.

    O SQLite (e colunas sem timezone no Postgres) devolvem datetimes naive;
    esses são tratados como UTC, que é como são gravados.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def round_rating(average) -> int:
    # Arredonda meio para cima (2.5 -> 3), diferente do round() do Python
    if average is None:
        return 0
    return int(math.floor(float(average) + 0.5))


def serialize_user(user) -> Optional[dict]:
    if user is None:
        return None
    return {
        "id": user.id,
        "user_name": sanitize_text(user.user_name),
        "full_name": sanitize_text(user.full_name),
        "nickname": sanitize_text(user.nickname),
        "date_created": to_utc(user.date_created),
    }


def serialize_thing(thing, number_of_reviews=None, average_review_rating=None) -> dict:
    return {
        "id": thing.id,
        "title": sanitize_text(thing.title),
        "content": sanitize_text(thing.content),
        "image": thing.image,
        "date_created": to_utc(thing.date_created),
        "user": serialize_user(getattr(thing, "user", None)),
        "number_of_reviews": int(number_of_reviews or 0),
        "average_review_rating": round_rating(average_review_rating),
    }


def serialize_review(review) -> dict:
    return {
        "id": review.id,
        "text": sanitize_text(review.text),
        "rating": review.rating,
        "thing_id": review.thing_id,
        "date_created": to_utc(review.date_created),
        "user": serialize_user(getattr(review, "user", None)),
    }
