"""Pytest fixtures configuring the testing app and an isolated database.

Each test gets a freshly created schema on the in-memory SQLite database
(``TestingConfig``) and dropped afterwards, so committed data never leaks
between cases. Service code commits for real through its units of work.
"""

from __future__ import annotations

import os

import pytest
from storefront.core.config import TestingConfig
from storefront.core.extensions import db as _db  # Flask-SQLAlchemy instance
from storefront.core.extensions import get_mailer
from storefront.factory import create_app  # application factory under test


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied (in-memory
        mailer, fixed JWT secrets) and logging noise reduced.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestingConfig)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture()
def db(app):
    """Create all tables for one test and drop them afterwards.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application, with an app
        context pushed for the duration of the test.
    """
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db):
    """Return the Flask-scoped session shared with services and factories."""
    return db.session


@pytest.fixture()
def client(app, db):
    """Flask test client; requests reuse the test's app context and session."""
    return app.test_client()


@pytest.fixture()
def mailer(app):
    """In-memory mailer bound to the app, emptied before and after each test."""
    m = get_mailer(app)
    m.clear()
    yield m
    m.clear()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the per-test session."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
    SQLAlchemySession.set(None)
