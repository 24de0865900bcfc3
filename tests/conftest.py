"""
pytest Fixtures for Bookstore API Tests

Shared fixtures used across all test files.

FIXTURE SCOPES:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)

Every test runs inside a transaction that is rolled back afterwards, so
the commits made by the services never leak from one test to the next.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# The module-level engine then points at SQLite instead of PostgreSQL,
# and rate limiting is off.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.database import Base, get_db
from bookstore.main import app
from bookstore.models import Author, Book, Publisher, Tag

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite fast and self-contained.
# Some PostgreSQL behaviour (e.g. enforced foreign keys) differs in SQLite;
# the cascades under test are done by the ORM, so they hold on both.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session.
    Without it the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction that is rolled back at the end,
    so session.commit() inside services does not persist anything.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The get_db dependency is overridden to hand out the test session.
    """

    def override_get_db():
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
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(name="George Orwell", email="orwell@example.com")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_publisher(db_session: Session) -> Publisher:
    """Create a sample publisher for testing."""
    publisher = Publisher(name="Secker & Warburg", address="London, United Kingdom")
    db_session.add(publisher)
    db_session.commit()
    db_session.refresh(publisher)
    return publisher


@pytest.fixture
def sample_tag(db_session: Session) -> Tag:
    """Create a sample tag for testing."""
    tag = Tag(name="classic")
    db_session.add(tag)
    db_session.commit()
    db_session.refresh(tag)
    return tag


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    sample_publisher: Publisher,
    sample_tag: Tag,
) -> Book:
    """
    Create a sample book with author, publisher and one tag.

    Depends on the sample_author, sample_publisher and sample_tag fixtures.
    """
    book = Book(
        title="1984",
        isbn="12-345-678",
        price=Decimal("9.99"),
        quantity=3,
        category="fiction",
        author=sample_author,
        publisher=sample_publisher,
        tags={sample_tag},
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def catalog_books(
    db_session: Session,
    sample_author: Author,
    sample_publisher: Publisher,
) -> list[Book]:
    """
    Five books for search and inventory tests.

    Three are in "fiction", one in "Fiction" (different case) and one in
    "poetry".
    """
    second_author = Author(name="Jane Austen", email="austen@example.com")
    db_session.add(second_author)

    rows = [
        ("Concatenation", "fiction", sample_author),
        ("Dog", "fiction", sample_author),
        ("The Cat Returns", "Fiction", second_author),
        ("Emma", "fiction", second_author),
        ("Collected Poems", "poetry", sample_author),
    ]
    books = []
    for i, (title, category, author) in enumerate(rows):
        book = Book(
            title=title,
            isbn=f"10-000-00{i}",
            price=Decimal(f"{10 + i}.50"),
            quantity=i,
            category=category,
            author=author,
            publisher=sample_publisher,
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
