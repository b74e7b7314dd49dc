"""Shared test bases: an in-memory SQLite database per test and an API client bound to it."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import hash_password
from app.main import app
from app.models import Base, User


class DatabaseTestCase(unittest.TestCase):
    """Creates all tables in a fresh in-memory database for every test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.session = self.SessionLocal()

    def tearDown(self) -> None:
        self.session.close()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    def make_user(self, name: str = "Ash Ketchum", email: str | None = None) -> User:
        """Insert a user directly, bypassing signup validation."""
        email = email or f"{name.lower().replace(' ', '.')}@example.com"
        user = User(name=name, email=email, password_hash=hash_password("pikachu123"))
        self.session.add(user)
        self.session.commit()
        return user


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def signup(
        self,
        name: str = "Ash Ketchum",
        email: str = "ash@example.com",
        password: str = "pikachu123",
    ) -> tuple[int, str]:
        """Sign up through the API; return (user_id, access_token)."""
        resp = self.client.post(
            "/v1/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        content = resp.json()["content"]
        return content["data"]["id"], content["meta"]["access_token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
