"""Shared fixtures for API tests: in-memory SQLite app, users and auth headers."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storerate.core.database import get_db
from storerate.core.security import create_access_token, hash_password
from storerate.main import app
from storerate.models import Base, Rating, Store, User

PASSWORD = "Secret#123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db() -> Generator[Session, None, None]:
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class ApiTestCase(unittest.TestCase):
    """Fresh schema per test, app wired to the test engine, rate limiter reset."""

    def setUp(self) -> None:
        Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
        app.dependency_overrides[get_db] = override_get_db
        app.state.rate_limiter.reset()
        self.client = TestClient(app)
        self.db = TestingSessionLocal()
        self._counter = 0

    def tearDown(self) -> None:
        self.db.close()
        app.dependency_overrides.clear()

    def make_user(
        self,
        role: str = "normal",
        email: str | None = None,
        name: str | None = None,
        address: str = "42 Market Street, Springfield",
        password: str = PASSWORD,
    ) -> User:
        self._counter += 1
        user = User(
            name=name or f"Test Account Number {self._counter:04d}",
            email=email or f"user{self._counter}@storerate.io",
            address=address,
            password_hash=hash_password(password),
            role=role,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def make_store(
        self,
        name: str = "Corner Grocery",
        email: str | None = None,
        address: str = "7 High Street",
        owner: User | None = None,
    ) -> Store:
        self._counter += 1
        store = Store(
            name=name,
            email=email or f"store{self._counter}@storerate.io",
            address=address,
            owner_id=owner.id if owner is not None else None,
        )
        self.db.add(store)
        self.db.commit()
        self.db.refresh(store)
        return store

    def make_rating(self, user: User, store: Store, value: int) -> Rating:
        rating = Rating(user_id=user.id, store_id=store.id, value=value)
        self.db.add(rating)
        self.db.commit()
        self.db.refresh(rating)
        return rating

    def auth(self, user: User) -> dict[str, str]:
        token = create_access_token(sub=user.id, role=user.role)
        return {"Authorization": f"Bearer {token}"}

    def rating_rows(self, user: User, store: Store) -> list[Rating]:
        self.db.expire_all()
        return (
            self.db.query(Rating)
            .filter(Rating.user_id == user.id, Rating.store_id == store.id)
            .all()
        )
