import os

# Must be set before barberagenda.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_PASSWORD"] = "test-password"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from barberagenda.database import Base, get_db  # noqa: E402
from barberagenda.domain.business_config.schemas import BusinessConfigUpdate  # noqa: E402
from barberagenda.domain.business_config.service import BusinessConfigService  # noqa: E402
from barberagenda.main import app  # noqa: E402

ADMIN_PASSWORD = "test-password"


@pytest.fixture
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client) -> dict:
    response = client.post("/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def short_day_config(db_session):
    """09:00-11:00 every 30 minutes, Monday to Saturday"""
    return BusinessConfigService(db_session).set_config(
        BusinessConfigUpdate(
            operating_start="09:00",
            operating_end="11:00",
            slot_interval_minutes=30,
            open_weekdays=[1, 2, 3, 4, 5, 6],
        )
    )
