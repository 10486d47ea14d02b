# Dependências compartilhadas pelos controllers
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Header
from sqlalchemy.orm import Session

from thingful.core import database
from thingful.core.config import settings
from thingful.models import thing_model, user_model  # noqa: F401 (registra as tabelas)
from thingful.services.auth_service import Authorized, verify_bearer
from thingful.services.thing_service import ThingsStore
from thingful.services.user_service import UsersStore

logger = logging.getLogger(__name__)


# Lifespan: cria as tabelas se configurado e libera o pool no shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES:
        try:
            database.Base.metadata.create_all(bind=database.engine)
        except Exception as e:
            logger.error(f"Erro ao criar tabelas: {e}", exc_info=True)
            raise
    logger.info(f"Thingful API iniciada (ambiente: {settings.ENVIRONMENT})")
    yield
    database.engine.dispose()


def get_db():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_things_store(db: Session = Depends(get_db)) -> ThingsStore:
    return ThingsStore(db)


def get_users_store(db: Session = Depends(get_db)) -> UsersStore:
    return UsersStore(db)


async def require_auth(
    authorization: Optional[str] = Header(None),
    users: UsersStore = Depends(get_users_store),
) -> user_model.User:
    result = verify_bearer(authorization, users.get_by_user_name)
    if isinstance(result, Authorized):
        return result.user
    raise result.error
