from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path
from types import SimpleNamespace

import pytest


_TEST_ROOT = Path(tempfile.mkdtemp(prefix="drinks_review_test_"))
_DB_PATH = _TEST_ROOT / "drinks_review_test.db"

os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture(autouse=True)
def fresh_db():
    from app import models  # noqa: F401
    from app.database import Base, engine

    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    yield


@pytest.fixture()
def api_client():
    from fastapi.testclient import TestClient

    from app.main import app

    return TestClient(app)


@pytest.fixture()
def db_session():
    from app.database import SessionLocal

    with SessionLocal() as session:
        yield session


@pytest.fixture(scope="session")
def password_hash() -> str:
    from app.core.auth import get_password_hash

    return get_password_hash("password123")


@pytest.fixture()
def make_user(password_hash):
    from app.database import SessionLocal
    from app.models import UserModel

    def _make(username: str | None = None, display_name: str | None = None, **extra):
        suffix = uuid.uuid4().hex[:8]
        username = username or f"user_{suffix}"
        with SessionLocal() as session:
            user = UserModel(
                username=username,
                email=f"{username}@example.com",
                password_hash=password_hash,
                display_name=display_name,
                **extra,
            )
            session.add(user)
            session.commit()
            return SimpleNamespace(
                user_id=user.user_id,
                username=user.username,
                email=user.email,
                display_name=user.display_name,
            )

    return _make


@pytest.fixture()
def make_review():
    from app.database import SessionLocal
    from app.models import ReviewModel

    def _make(author, beverage_name: str = "Barolo 2016", content: str = "Test review"):
        with SessionLocal() as session:
            review = ReviewModel(
                user_id=author.user_id, beverage_name=beverage_name, content=content
            )
            session.add(review)
            session.commit()
            return SimpleNamespace(
                review_id=review.review_id, user_id=review.user_id, beverage_name=beverage_name
            )

    return _make


@pytest.fixture()
def auth_headers():
    from app.core.auth import create_access_token

    def _headers(user) -> dict[str, str]:
        token = create_access_token(data={"sub": str(user.user_id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def count_rows():
    from sqlalchemy import func, select

    from app.database import SessionLocal

    def _count(model, *conditions) -> int:
        with SessionLocal() as session:
            stmt = select(func.count()).select_from(model)
            if conditions:
                stmt = stmt.where(*conditions)
            return session.execute(stmt).scalar_one()

    return _count
