"""
Pytest configuration and fixtures for the API tests.
"""

import pytest

from app import create_app
from models import db

TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'JWT_SECRET': 'test-jwt-secret',
    'CRYPTR_SECRET': 'test-cryptr-secret',
    'LOG_LEVEL': 'WARNING',
}


@pytest.fixture(scope="session")
def app():
    """One application for the whole run; key derivation is slow."""
    return create_app(TEST_CONFIG)


@pytest.fixture(autouse=True)
def clean_db(app):
    """Start every test from empty tables."""
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cipher(app):
    return app.extensions['cipher']
