"""
Pytest fixtures and configuration for Nile backend tests

Tests run against an in-memory SQLite database shared through StaticPool,
so no DATABASE_URL or running server is needed.

Author: TM3
Date: 2026-10-18
"""
import os

# Must be set before nile.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nile import models
from nile.core.database import Base, get_db
from nile.main import app


@pytest.fixture(scope="session")
def engine():
    """
    Provides one in-memory SQLite engine for the whole session

    Scope: session (schema is recreated per test by the db fixture)
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    """Fresh schema per test; yields the sessionmaker bound to it"""
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """
    Provides a SQLAlchemy session for each test

    Scope: function (new session per test, closed afterwards)
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """
    TestClient with get_db overridden to use the test database

    One session per request, as in production.
    """
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def business(db):
    """A stored business"""
    business = models.Business(name="Acme Store", username="acme", email="shop@acme.test")
    db.add(business)
    db.commit()
    db.refresh(business)
    return business


@pytest.fixture
def category(db):
    """A stored category"""
    category = models.Category(name="Electronics", description="Gadgets and devices")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def customer(db):
    """A stored customer"""
    customer = models.Customer(
        name="Ada Lovelace",
        first_name="Ada",
        last_name="Lovelace",
        username="ada",
        email="ada@example.test",
        phone_number="+355691234567",
        address="Rruga e Durrësit 1, Tirana",
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@pytest.fixture
def product(db, business, category):
    """A stored product owned by the business fixture, in the category fixture"""
    product = models.Product(
        name="Keyboard",
        description="Mechanical keyboard",
        image="keyboard.png",
        price=Decimal("49.90"),
        quantity=10,
        business_id=business.id,
        category_id=category.id,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def sample_payment_data(customer):
    """Payment creation payload for the customer fixture"""
    return {
        "transaction_id": "TX-0001",
        "amount": "120.50",
        "payment_method": "CREDIT_CARD",
        "payment_status": "PENDING",
        "payment_date": "2026-10-01T10:30:00",
        "customer_id": customer.id,
    }
