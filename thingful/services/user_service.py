from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from thingful.core.config import settings
from thingful.models import user_model
from thingful.schemas import user_schema

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_user_by_user_name(db: Session, user_name: str) -> Optional[user_model.User]:
    return db.query(user_model.User).filter(user_model.User.user_name == user_name).first()


def create_user(db: Session, user_in: user_schema.UserCreate) -> user_model.User:
    # Chamado pelo seed; a API não cria usuários
    data = user_in.model_dump(exclude={"password"}, exclude_none=True)
    db_user = user_model.User(password=pwd_context.hash(user_in.password), **data)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


class UsersStore:
    """Acesso de leitura aos usuários, amarrado à sessão da requisição"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user_name(self, user_name: str) -> Optional[user_model.User]:
        return get_user_by_user_name(self.db, user_name)
