"""
Shared fixtures for tests that run against both storage variants
"""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.database import build_session_factory
from app.main import app
from app.repositories.database_storage import DatabaseStorage
from app.repositories.memory_storage import MemoryStorage
from app.repositories.storage import get_storage


def make_memory_storage(seed: bool = True) -> MemoryStorage:
    return MemoryStorage(seed=seed)


def make_database_storage(seed: bool = True) -> DatabaseStorage:
    """DatabaseStorage over a private in-memory SQLite database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return DatabaseStorage(build_session_factory(engine), engine=engine, seed=seed)


class ApiTestCase:
    """Runs the app against the storage from make_storage(); subclasses pick the variant"""

    def make_storage(self, seed: bool = True):
        raise NotImplementedError

    def setup_method(self):
        """Set up test fixtures"""
        self.use_storage(self.make_storage())
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def use_storage(self, storage):
        self.storage = storage
        app.dependency_overrides[get_storage] = lambda: storage


def is_utc_timestamp(value: str) -> bool:
    return value.endswith(("Z", "+00:00"))
