"""Shared test bases: an in-memory SQLite database and a TestClient wired to it."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import get_token_issuer, hash_password
from app.main import app
from app.models import Base, Role, User

# One shared connection so the schema survives across sessions and request threads.
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


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test; self.session for arranging and asserting."""

    def setUp(self) -> None:
        Base.metadata.create_all(bind=engine)
        self.session = TestingSessionLocal()

    def tearDown(self) -> None:
        self.session.close()
        Base.metadata.drop_all(bind=engine)

    def add_user(
        self,
        username: str,
        password: str = "password1",
        role: Role = Role.USER,
        enabled: bool = True,
        deleted: bool = False,
    ) -> User:
        user = User(
            username=username,
            password_hash=hash_password(password),
            role=role,
            enabled=enabled,
            deleted=deleted,
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def reload(self, user_id: int) -> User | None:
        """Read the row as currently stored, bypassing this session's cache."""
        self.session.expire_all()
        return self.session.get(User, user_id)


class ApiTestCase(DatabaseTestCase):
    """
    TestClient against the app with get_db overridden.

    Seeds the super administrator (id 1), a second admin (id 2) and a regular user (id 3).
    """

    def setUp(self) -> None:
        super().setUp()
        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)
        self.issuer = get_token_issuer()
        self.root = self.add_user("root", "rootpass1", Role.ADMIN)
        self.admin = self.add_user("admin", "adminpass1", Role.ADMIN)
        self.alice = self.add_user("alice", "secret", Role.USER)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def auth_headers(self, user: User) -> dict[str, str]:
        token = self.issuer.issue(user)["access_token"]
        return {"Authorization": f"Bearer {token}"}
