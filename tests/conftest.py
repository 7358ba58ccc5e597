"""
pytest Fixtures for Dog Breeds API Tests

This file contains shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)

Repositories commit and roll back the session themselves, so instead of
wrapping each test in an outer transaction every table is emptied after
the test.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# This disables rate limiting and keeps errors masked
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dog_api.database import Base, get_db
from dog_api.main import app
from dog_api.models import Breed, Category

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite fast and self-contained.
# colors/common_names are JSON columns so they work the same here as on
# PostgreSQL.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite ignores foreign keys unless asked
    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    All rows are deleted afterwards (children first) so tests don't
    affect each other.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(delete(table))
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    get_db is overridden so the GraphQL context uses the test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


def breed_data(**overrides) -> dict:
    """Valid breed fields; override any of them per test."""
    data = {
        "name": "Border Collie",
        "common_names": ["Collie"],
        "description": "A highly intelligent and energetic herding dog.",
        "history": "Developed on the Anglo-Scottish border to herd sheep.",
        "fun_fact": "Border Collies can learn hundreds of words.",
        "health": "Generally healthy; prone to hip dysplasia.",
        "origin": "Scotland",
        "colors": ["Black", "White"],
        "average_height": 53.0,
        "average_weight": 18.0,
        "average_life_expectancy": 13.0,
        "exercise_required": 5,
        "ease_of_training": 5,
        "affection": 4,
        "playfulness": 5,
        "good_with_children": 4,
        "good_with_dogs": 4,
        "grooming_required": 3,
    }
    data.update(overrides)
    return data


@pytest.fixture
def sample_category(db_session: Session) -> Category:
    """Create a sample category for testing."""
    category = Category(
        name="Herding",
        description="Dogs bred to gather and move livestock.",
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def empty_category(db_session: Session) -> Category:
    """Create a category with no breeds."""
    category = Category(name="Toy", description="Small companion dogs.")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def create_breed(db_session: Session, sample_category: Category) -> Callable[..., Breed]:
    """Factory that inserts a breed, in the sample category unless told otherwise."""

    def _create(**overrides) -> Breed:
        overrides.setdefault("category_id", sample_category.id)
        breed = Breed(**breed_data(**overrides))
        db_session.add(breed)
        db_session.commit()
        db_session.refresh(breed)
        return breed

    return _create


@pytest.fixture
def sample_breed(create_breed) -> Breed:
    """Create a sample breed for testing."""
    return create_breed()


@pytest.fixture
def multiple_breeds(create_breed) -> list[Breed]:
    """
    Create five breeds for pagination tests, returned in name order.

    Heights 10, 20, 30, 40, 50 and exercise ratings 1-5 follow name order.
    """
    names = ["Akita", "Beagle", "Corgi", "Dalmatian", "Eurasier"]
    return [
        create_breed(
            name=name,
            average_height=float((i + 1) * 10),
            exercise_required=i + 1,
            colors=["Black"] if i % 2 == 0 else ["Tan", "White"],
        )
        for i, name in enumerate(names)
    ]
