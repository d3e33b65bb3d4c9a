"""
Pytest configuration and fixtures for ContentOps API tests.
"""
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.limiter import limiter
from app.main import app
from app.models.content import Content
from app.models.user import User
from app.schemas.workflow import WorkflowStepCreate
from app.services.workflow_templates import create_workflow_template
from app.timeutils import utcnow

# Disable rate limiting for tests
limiter.enabled = False

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get the shared test database session."""
    yield _test_session


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = TestingSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def test_user(db):
    """Create the content owner."""
    user = User(email="owner@example.com", name="Owner")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def reviewer(db):
    """Create a second user who reviews content."""
    user = User(email="reviewer@example.com", name="Reviewer")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_content(db, test_user):
    """Factory inserting content rows directly, bypassing the lifecycle."""
    def _make(**overrides):
        values = {
            "user_id": test_user.id,
            "title": "Launch post",
            "caption": "Our new product is here",
            "platform": "instagram",
            "content_type": "post",
            "status": "draft",
        }
        values.update(overrides)
        content = Content(**values)
        db.add(content)
        db.commit()
        db.refresh(content)
        return content

    return _make


@pytest.fixture
def approval_template(db, test_user, reviewer):
    """Template whose second step is an approval assigned to the reviewer."""
    return create_workflow_template(
        db,
        user_id=test_user.id,
        name="Review then approve",
        steps=[
            WorkflowStepCreate(step_order=1, step_type="review", required=True),
            WorkflowStepCreate(step_order=2, step_type="approval", required=True, assignee_id=reviewer.id),
            WorkflowStepCreate(step_order=3, step_type="scheduling", required=False),
        ],
    )


@pytest.fixture
def future():
    """A timestamp safely in the future."""
    return utcnow() + timedelta(days=7)
