import os
import shutil
import tempfile

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_volumes.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["VOLUME_CONFIG_FILE"] = os.path.join(_test_db_dir, "volumes.yaml")

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from volumes.main import app
from volumes.api.deps import get_config_resolver
from volumes.domain.config_store import YamlConfigResolver
from volumes.domain.resolution import Resolvers
from volumes.domain.volume import Volume, VolumePlan
import volumes.repositories.pool as pool_repo
import volumes.repositories.team as team_repo
from volumes.repositories.pool import DatabasePoolResolver
from volumes.repositories.team import DatabaseTeamResolver


PLAN_CONFIG = {
    "volume-plans": {
        "plan1": {
            "docker": {"size": "10Gi"},
            "kubernetes": {"storage-class": "ssd", "capacity": "20Gi"},
        },
        "scalar-plan": {"docker": "not-a-mapping"},
        "list-plan": {"docker": ["a", "b"]},
    }
}


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
        poolclass=None,  # Don't use connection pooling for SQLite
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()
        shutil.rmtree(temp_db_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def config_resolver() -> YamlConfigResolver:
    return YamlConfigResolver(PLAN_CONFIG)


@pytest.fixture(scope="function")
def client(db_session, config_resolver):
    """Create a test client with database and config dependency overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from volumes.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_config_resolver] = lambda: config_resolver

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def registry(db: Session):
    """Seed the pools and teams the tests refer to."""
    pool_repo.create_pool(db, "p1", "docker")
    pool_repo.create_pool(db, "kube-pool", "kubernetes")
    pool_repo.create_pool(db, "bare-pool", None)
    team_repo.create_team(db, "team1")


@pytest.fixture(scope="function")
def resolvers(db: Session, registry, config_resolver) -> Resolvers:
    return Resolvers(
        pools=DatabasePoolResolver(db),
        teams=DatabaseTeamResolver(db),
        config=config_resolver,
    )


@pytest.fixture(scope="function")
def volume() -> Volume:
    return Volume(
        name="v1",
        pool="p1",
        plan=VolumePlan(name="plan1"),
        team_owner="team1",
    )
