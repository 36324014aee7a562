"""Shared fixtures.

The app module reads its settings at import time, so the database URL is set
before anything from ``survey_service.main`` is imported. The in-memory SQLite
engine uses a single shared connection, so the tables live for the session.
"""
import os

import pytest

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["PRIVILEGED_ROLE"] = "admin"
os.environ["ROLE_HEADER"] = "X-User-Role"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from survey_service.main import SessionLocal, app  # noqa: E402
from survey_service.models import SurveyForm  # noqa: E402
from tests.factories import SURVEY_ID, survey_doc  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def db_session(client):
    with SessionLocal() as session:
        yield session
    with SessionLocal.begin() as session:
        session.execute(delete(SurveyForm))


@pytest.fixture()
def stored_survey(db_session):
    db_session.add(SurveyForm(**survey_doc()))
    db_session.commit()
    return SURVEY_ID
