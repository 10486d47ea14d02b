"""
Verificação do bearer token

verify_bearer não conhece FastAPI: recebe o header Authorization e uma função
de busca de usuário e devolve um AuthResult. Quem converte Rejected em resposta
HTTP é a dependência require_auth.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from jose import JWTError, jwt

from thingful.core.config import settings
from thingful.core.errors import ApiError, MissingToken, Unauthorized
from thingful.models.user_model import User

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class Authorized:
    user: User


@dataclass(frozen=True)
class Rejected:
    error: ApiError


AuthResult = Union[Authorized, Rejected]


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def decode_token(token: str, secret: str = None, algorithm: str = None) -> dict:
    return jwt.decode(
        token,
        secret or settings.JWT_SECRET,
        algorithms=[algorithm or settings.JWT_ALGORITHM],
    )


def verify_bearer(
    authorization: Optional[str],
    find_user: Callable[[str], Optional[User]],
) -> AuthResult:
    token = extract_bearer_token(authorization)
    if token is None:
        return Rejected(MissingToken())

    try:
        payload = decode_token(token)
    except JWTError as e:
        logger.warning(f"Token rejeitado: {e}")
        return Rejected(Unauthorized())

    user_name = payload.get("sub")
    if not user_name:
        logger.warning("Token sem 'sub'")
        return Rejected(Unauthorized())

    user = find_user(user_name)
    if user is None:
        logger.warning(f"Token para usuário inexistente: {user_name}")
        return Rejected(Unauthorized())

    return Authorized(user)
