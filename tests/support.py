"""Shared base class for API tests: in-memory SQLite, overridden get_db, cheap bcrypt."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stock_api.core import security
from stock_api.core.database import build_engine, get_db
from stock_api.core.security import create_access_token
from stock_api.main import app
from stock_api.models import Base, Category, Role, User
from stock_api.services.users import insert_user

DEFAULT_PASSWORD = "s3cret-password"


class DatabaseTestCase(unittest.TestCase):
    """Fresh in-memory database per test, plus a session factory bound to it."""

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        # Registered first so it runs after every session opened by the test is closed.
        self.addCleanup(self._drop_database)
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        rounds = patch.object(security, "BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)

    def _drop_database(self) -> None:
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def session(self):
        db = self.SessionTesting()
        self.addCleanup(db.close)
        return db

    def make_user(
        self,
        username: str = "alice",
        email: str = "alice@example.com",
        password: str = DEFAULT_PASSWORD,
        role: Role = Role.USER,
    ) -> User:
        with self.SessionTesting() as db:
            return insert_user(db, username, email, password, role=role)

    def make_category(self, name: str = "Beverages", description: str | None = None) -> Category:
        with self.SessionTesting() as db:
            category = Category(name=name, description=description)
            db.add(category)
            db.commit()
            db.refresh(category)
            return category


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose requests use the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app, raise_server_exceptions=False)

    def token_for(self, role: Role = Role.USER, user_id: int = 1, username: str = "tester") -> str:
        return create_access_token(user_id, username, role)

    def headers_for(self, role: Role = Role.USER) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token_for(role)}"}

    @property
    def admin_headers(self) -> dict[str, str]:
        return self.headers_for(Role.ADMIN)

    @property
    def user_headers(self) -> dict[str, str]:
        return self.headers_for(Role.USER)
