"""
Configuração global para testes

Este arquivo é carregado pelo pytest antes de qualquer teste. As variáveis de
ambiente precisam estar definidas antes de importar qualquer módulo do
thingful, porque Settings e o engine são criados na importação.
"""
import atexit
import os
import tempfile
import uuid
from datetime import datetime, timezone

import pytest

TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"thingful_test_{uuid.uuid4().hex}.db")

TEST_ENV_VARS = {
    "DATABASE_URL": f"sqlite:///{TEST_DB_PATH}",
    "JWT_SECRET": "test-jwt-secret",
    "JWT_ALGORITHM": "HS256",
    "ENVIRONMENT": "testing",
    "LOG_LEVEL": "WARNING",
    "CORS_ORIGINS": "*",
    "RATE_LIMIT_ENABLED": "false",
    "RATE_LIMIT_PER_MINUTE": "60",
    "CREATE_TABLES": "true",
    "BCRYPT_ROUNDS": "4",
}

for key, value in TEST_ENV_VARS.items():
    os.environ[key] = value


def cleanup_temp_db():
    if os.path.exists(TEST_DB_PATH):
        os.unlink(TEST_DB_PATH)


atexit.register(cleanup_temp_db)

from fastapi.testclient import TestClient  # noqa: E402
from jose import jwt  # noqa: E402

from thingful.core.config import settings  # noqa: E402
from thingful.core.database import Base, SessionLocal, engine  # noqa: E402
from thingful.main import app  # noqa: E402
from thingful.models.thing_model import Review, Thing  # noqa: E402
from thingful.models.user_model import User  # noqa: E402
from thingful.schemas.review_schema import ReviewCreate  # noqa: E402
from thingful.schemas.thing_schema import ThingCreate  # noqa: E402
from thingful.schemas.user_schema import UserCreate  # noqa: E402
from thingful import seed  # noqa: E402

Base.metadata.create_all(bind=engine)


# --- Dados de teste ---

def make_users_array():
    created = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)
    return [
        {"id": 1, "user_name": "test-user-1", "full_name": "Test user 1", "nickname": "TU1", "password": "password", "date_created": created},
        {"id": 2, "user_name": "test-user-2", "full_name": "Test user 2", "nickname": "TU2", "password": "password", "date_created": created},
        {"id": 3, "user_name": "test-user-3", "full_name": "Test user 3", "nickname": "TU3", "password": "password", "date_created": created},
        {"id": 4, "user_name": "test-user-4", "full_name": "Test user 4", "nickname": None, "password": "password", "date_created": created},
    ]


def make_things_array(users):
    created = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)
    return [
        {
            "id": 1,
            "title": "First test thing!",
            "image": "http://placehold.it/500x500",
            "user_id": users[0]["id"],
            "date_created": created,
            "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit.",
        },
        {
            "id": 2,
            "title": "Second test thing!",
            "image": "http://placehold.it/500x500",
            "user_id": users[1]["id"],
            "date_created": created,
            "content": "Natus consequuntur deserunt commodi, nobis qui inventore corrupti iusto aliquid.",
        },
        {
            "id": 3,
            "title": "Third test thing!",
            "image": "http://placehold.it/500x500",
            "user_id": users[2]["id"],
            "date_created": created,
            "content": "Debitis accusamus consequatur nam voluptatem adipisci.",
        },
        {
            "id": 4,
            "title": "Fourth test thing!",
            "image": "http://placehold.it/500x500",
            "user_id": users[3]["id"],
            "date_created": created,
            "content": "Soluta fugiat consequatur quos unde quam earum perspiciatis.",
        },
    ]


def make_reviews_array(users, things):
    created = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)
    return [
        {"id": 1, "rating": 2, "text": "This thing is amazing!", "thing_id": things[0]["id"], "user_id": users[0]["id"], "date_created": created},
        {"id": 2, "rating": 3, "text": "This thing is amazing!", "thing_id": things[0]["id"], "user_id": users[1]["id"], "date_created": created},
        {"id": 3, "rating": 1, "text": "This thing is amazing!", "thing_id": things[0]["id"], "user_id": users[2]["id"], "date_created": created},
        {"id": 4, "rating": 5, "text": "This thing is amazing!", "thing_id": things[0]["id"], "user_id": users[3]["id"], "date_created": created},
        {"id": 5, "rating": 1, "text": "This thing is amazing!", "thing_id": things[-1]["id"], "user_id": users[0]["id"], "date_created": created},
        {"id": 6, "rating": 2, "text": "This thing is amazing!", "thing_id": things[-1]["id"], "user_id": users[2]["id"], "date_created": created},
        {"id": 7, "rating": 5, "text": "This thing is amazing!", "thing_id": things[2]["id"], "user_id": users[0]["id"], "date_created": created},
    ]


def make_things_fixtures():
    users = make_users_array()
    things = make_things_array(users)
    reviews = make_reviews_array(users, things)
    return users, things, reviews


def make_malicious_thing(user):
    malicious = {
        "id": 911,
        "image": "http://placehold.it/500x500",
        "date_created": datetime.now(timezone.utc),
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "user_id": user["id"],
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
    }
    expected = {
        **malicious,
        "title": "Naughty naughty very naughty ",
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            'But not <strong>all</strong> bad.'
        ),
    }
    return malicious, expected


def seed_users(db, users):
    return seed.seed_users(db, [UserCreate(**user) for user in users])


def seed_things_tables(db, users, things=(), reviews=()):
    seed_users(db, users)
    seed.seed_things(db, [ThingCreate(**thing) for thing in things])
    seed.seed_reviews(db, [ReviewCreate(**review) for review in reviews])


def seed_malicious_thing(db, user, thing):
    seed_users(db, [user])
    seed.seed_things(db, [ThingCreate(**thing)])


def make_auth_header(user, secret=None):
    token = jwt.encode(
        {"user_id": user["id"], "sub": user["user_name"]},
        secret or settings.JWT_SECRET,
        algorithm="HS256",
    )
    return {"Authorization": f"Bearer {token}"}


def parse_timestamp(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# --- Fixtures ---

@pytest.fixture(autouse=True)
def clean_tables():
    """Limpa as tabelas depois de cada teste (mantém o schema)"""
    yield
    db = SessionLocal()
    try:
        db.query(Review).delete()
        db.query(Thing).delete()
        db.query(User).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def things_fixtures():
    return make_things_fixtures()


@pytest.fixture
def seeded(db_session, things_fixtures):
    users, things, reviews = things_fixtures
    seed_things_tables(db_session, users, things, reviews)
    return users, things, reviews
