# Things - listagem, detalhe e reviews
import logging
from typing import List

from fastapi import APIRouter, Depends, Path

from thingful.core.dependencies import get_things_store, require_auth
from thingful.core.errors import MethodNotAllowed, ThingNotFound
from thingful.models import user_model
from thingful.schemas import review_schema, thing_schema
from thingful.services.thing_service import ThingsStore
from thingful.utils.serializers import serialize_review, serialize_thing

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/things",
    tags=["Things"],
)


@router.get("", response_model=List[thing_schema.ThingOut])
def list_things(store: ThingsStore = Depends(get_things_store)):
    return [serialize_thing(*row) for row in store.list_things()]


@router.get("/{thing_id}", response_model=thing_schema.ThingOut)
def get_thing(
    thing_id: int = Path(..., description="ID da thing"),
    store: ThingsStore = Depends(get_things_store),
    _: user_model.User = Depends(require_auth),
):
    row = store.get_thing(thing_id)
    if row is None:
        logger.info(f"Thing {thing_id} não encontrada")
        raise ThingNotFound()
    return serialize_thing(*row)


@router.get("/{thing_id}/reviews", response_model=List[review_schema.ReviewOut])
def list_reviews_for_thing(
    thing_id: int = Path(..., description="ID da thing"),
    store: ThingsStore = Depends(get_things_store),
    _: user_model.User = Depends(require_auth),
):
    # A existência da thing é checada à parte: thing sem reviews devolve []
    if not store.thing_exists(thing_id):
        logger.info(f"Thing {thing_id} não encontrada")
        raise ThingNotFound()
    return [serialize_review(review) for review in store.get_reviews_for_thing(thing_id)]


# Rotas de uma thing só aceitam GET, mas o token é validado antes do 405
WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/{thing_id}", methods=WRITE_METHODS, include_in_schema=False)
@router.api_route("/{thing_id}/reviews", methods=WRITE_METHODS, include_in_schema=False)
def reject_write_methods(
    thing_id: int,
    _: user_model.User = Depends(require_auth),
):
    raise MethodNotAllowed()
